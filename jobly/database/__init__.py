"""
Database access for the Jobly API.

This module manages the PostgreSQL connection pool.
"""

from .postgres import (
    connect,
    close,
    get_db,
)

__all__ = [
    "connect",
    "close",
    "get_db",
]
