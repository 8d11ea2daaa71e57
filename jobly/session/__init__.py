"""
Session management for the Jobly API.

This module handles JWT token creation and validation.
"""

from .jwt import (
    create_token,
    verify_access,
)

__all__ = [
    "create_token",
    "verify_access",
]
