# jobly/session/jwt.py
# Helpers for issuing/verifying access tokens.

from __future__ import annotations
import time
from typing import Any, Dict

import jwt  # PyJWT

from ..config import SECRET_KEY, JWT_ALGORITHM, ACCESS_TTL

# ---- Internals -------------------------------------------------------------


def _now_epoch() -> int:
    return int(time.time())


# ---- Public API ------------------------------------------------------------


def create_token(user: Dict[str, Any]) -> str:
    """
    Returns a signed access token carrying username/isAdmin.
    `user` needs a "username"; "isAdmin" defaults to False.
    """
    iat = _now_epoch()
    payload = {
        "username": user["username"],
        "isAdmin": bool(user.get("isAdmin", False)),
        "iat": iat,
        "exp": iat + ACCESS_TTL,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_access(token: str) -> Dict[str, Any]:
    payload = jwt.decode(
        token,
        SECRET_KEY,
        algorithms=[JWT_ALGORITHM],
        options={"require": ["iat"]},
    )
    if "username" not in payload:
        raise jwt.InvalidTokenError("token has no username")
    return payload
