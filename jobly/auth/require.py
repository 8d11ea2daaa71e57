import logging
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..errors import UnauthorizedError
from ..session import verify_access

log = logging.getLogger("auth")

bearer = HTTPBearer(auto_error=False)

Claims = Dict[str, Any]


def authenticate(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[Claims]:
    """
    Claims from the bearer token, or None.

    A missing or bad token is not an error here; the require_* guards decide.
    """
    if not creds or creds.scheme.lower() != "bearer":
        return None
    try:
        return verify_access(creds.credentials)
    except jwt.PyJWTError as e:
        log.warning("Rejected bearer token: %s", e)
        return None


def _is_admin(claims: Claims) -> bool:
    return claims.get("isAdmin") is True


def require_login(claims: Optional[Claims] = Depends(authenticate)) -> Claims:
    if not claims:
        raise UnauthorizedError()
    return claims


def require_admin(claims: Optional[Claims] = Depends(authenticate)) -> Claims:
    if not claims or not _is_admin(claims):
        raise UnauthorizedError()
    return claims


def require_admin_or_user(
    username: Optional[str] = None,
    claims: Optional[Claims] = Depends(authenticate),
) -> Claims:
    """
    For routes with a {username} path param: admins, or that user.

    `username` binds to that path segment. On a route without one FastAPI
    reads it from the query string instead, so only mount this guard where
    the path carries {username}.
    """
    if not claims:
        raise UnauthorizedError()
    if _is_admin(claims):
        return claims
    if username is not None and claims.get("username") == username:
        return claims
    raise UnauthorizedError()
