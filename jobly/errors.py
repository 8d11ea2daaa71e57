"""
Error types for the Jobly API.

Every error carries the HTTP status it should be reported with; the handlers
in ``jobly.main`` render them as ``{"error": {"message", "status"}}``.
"""

from __future__ import annotations
from typing import Any


class AppError(Exception):
    status: int = 500
    default_message = "Internal Server Error"

    def __init__(self, message: Any = None, status: int | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class NotFoundError(AppError):
    status = 404
    default_message = "Not Found"


class UnauthorizedError(AppError):
    status = 401
    default_message = "Unauthorized"


class BadRequestError(AppError):
    status = 400
    default_message = "Bad Request"


class ForbiddenError(AppError):
    status = 403
    default_message = "Forbidden"


__all__ = [
    "AppError",
    "NotFoundError",
    "UnauthorizedError",
    "BadRequestError",
    "ForbiddenError",
]
