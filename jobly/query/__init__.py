"""
Query building module for the Jobly API.

This module builds parameterized SET and WHERE fragments for partial
updates and filtered listings.
"""

from .builder import (
    ClauseBuilderError,
    EmptyInputError,
    RangeConflictError,
    ClauseResult,
    FilterFields,
    COMPANY_FILTERS,
    JOB_FILTERS,
    resolve_column,
    build_set_clause,
    build_filter_clause,
)

__all__ = [
    "ClauseBuilderError",
    "EmptyInputError",
    "RangeConflictError",
    "ClauseResult",
    "FilterFields",
    "COMPANY_FILTERS",
    "JOB_FILTERS",
    "resolve_column",
    "build_set_clause",
    "build_filter_clause",
]
