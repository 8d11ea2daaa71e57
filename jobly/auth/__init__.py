"""
Authentication module for the Jobly API.

This module turns bearer tokens into claims and guards routes by role.
"""

from .require import (
    authenticate,
    require_login,
    require_admin,
    require_admin_or_user,
)

__all__ = [
    "authenticate",
    "require_login",
    "require_admin",
    "require_admin_or_user",
]
