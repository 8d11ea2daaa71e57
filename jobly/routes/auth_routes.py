# jobly/routes/auth_routes.py
from fastapi import APIRouter, Depends

from ..auth import require_login

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
def me(claims=Depends(require_login)):
    return {
        "username": claims["username"],
        "isAdmin": claims.get("isAdmin", False),
    }
