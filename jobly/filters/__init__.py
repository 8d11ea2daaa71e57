"""
Request validation for the Jobly API.

This module holds the JSON schemas for request bodies and search
query strings, and the helpers that apply them.
"""

from .schemas import (
    COMPANY_NEW_SCHEMA,
    COMPANY_UPDATE_SCHEMA,
    COMPANY_SEARCH_SCHEMA,
    JOB_NEW_SCHEMA,
    JOB_UPDATE_SCHEMA,
    JOB_SEARCH_SCHEMA,
    validate_payload,
    parse_search_query,
)

__all__ = [
    "COMPANY_NEW_SCHEMA",
    "COMPANY_UPDATE_SCHEMA",
    "COMPANY_SEARCH_SCHEMA",
    "JOB_NEW_SCHEMA",
    "JOB_UPDATE_SCHEMA",
    "JOB_SEARCH_SCHEMA",
    "validate_payload",
    "parse_search_query",
]
