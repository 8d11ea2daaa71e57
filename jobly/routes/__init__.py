"""
API routes for the Jobly API.
"""

from .auth_routes import router as auth_router
from .companies import router as companies_router
from .jobs import router as jobs_router

__all__ = [
    "auth_router",
    "companies_router",
    "jobs_router",
]
