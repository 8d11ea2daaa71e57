from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from ..errors import BadRequestError


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
class ClauseBuilderError(BadRequestError):
    """Base for inputs the clause builder refuses."""


class EmptyInputError(ClauseBuilderError):
    """No usable fields or criteria were supplied."""


class RangeConflictError(ClauseBuilderError):
    """Lower bound is greater than upper bound."""


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _quote_identifier(name: str) -> str:
    """
    Double-quote an identifier. Doubles internal quotes.
    """
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def resolve_column(table: Optional[Mapping[str, str]], key: str) -> str:
    """
    Map a logical field name to its column name.

    Falls back to the key itself when the table has no entry for it
    (or maps it to an empty name).
    """
    column = (table or {}).get(key)
    return column if column else key


def _as_number(value: Any) -> Any:
    """
    Bounds compare exactly: numbers as they are, strings through Decimal.
    """
    if isinstance(value, str):
        try:
            number = Decimal(value)
        except InvalidOperation:
            number = None
        if number is None or not number.is_finite():
            raise ClauseBuilderError(f"Not a number: {value!r}")
        return number
    return value


class _ParamSink:
    """
    Collects params and hands out numbered placeholders ($1, $2, ...).
    """
    def __init__(self, *, start_index: int = 1):
        self.next_idx = start_index
        self.params: List[Any] = []

    def add(self, value: Any) -> str:
        self.params.append(value)
        ph = f"${self.next_idx}"
        self.next_idx += 1
        return ph


@dataclass(frozen=True)
class ClauseResult:
    clause: str
    values: List[Any] = field(default_factory=list)

    @property
    def next_placeholder(self) -> str:
        """Placeholder for a parameter the caller appends after `values`."""
        return f"${len(self.values) + 1}"


# -----------------------------------------------------------------------------
# SET builder
# -----------------------------------------------------------------------------
def build_set_clause(
    field_map: Mapping[str, Any],
    name_translation: Optional[Mapping[str, str]] = None,
) -> ClauseResult:
    """
    Build the SET part of a partial UPDATE.

        build_set_clause({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        -> ClauseResult('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Values are passed through untouched (None clears a column).
    Raises EmptyInputError if `field_map` is empty.
    """
    if not field_map:
        raise EmptyInputError("No data supplied for update")

    sink = _ParamSink()
    parts: List[str] = []
    for key, value in field_map.items():
        col = _quote_identifier(resolve_column(name_translation, key))
        parts.append(f"{col}={sink.add(value)}")

    return ClauseResult(clause=", ".join(parts), values=sink.params)


# -----------------------------------------------------------------------------
# WHERE builder
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FilterFields:
    """
    The filter criteria one entity understands.

    - text_key:    matched case-insensitively as a substring of `text_column`
    - min_key:     lower bound, column resolved through `translation`
    - max_key:     upper bound, column resolved through `translation`
    - inclusive_bounds: use >= / <= instead of > / <
    """
    text_key: str
    text_column: str
    min_key: str
    max_key: str
    translation: Dict[str, str] = field(default_factory=dict)
    inclusive_bounds: bool = False


COMPANY_FILTERS = FilterFields(
    text_key="name",
    text_column="name",
    min_key="minEmployees",
    max_key="maxEmployees",
    translation={
        "minEmployees": "num_employees",
        "maxEmployees": "num_employees",
    },
)

JOB_FILTERS = FilterFields(
    text_key="title",
    text_column="title",
    min_key="minSalary",
    max_key="maxSalary",
    translation={
        "minSalary": "salary",
        "maxSalary": "salary",
    },
)


def build_filter_clause(
    criteria: Mapping[str, Any],
    fields: FilterFields = COMPANY_FILTERS,
) -> ClauseResult:
    """
    Build the predicate of a WHERE clause from filter criteria.

        build_filter_clause({"name": "C1", "minEmployees": 1, "maxEmployees": 3})
        -> ClauseResult('name ILIKE $1 AND "num_employees">$2 AND "num_employees"<$3',
                        ["%C1%", 1, 3])

    Criteria are always emitted text, lower bound, upper bound; absent ones
    take no placeholder. Unrecognized keys are ignored.

    Raises EmptyInputError if no usable criterion is present and
    RangeConflictError if the lower bound exceeds the upper bound.
    """
    text = criteria.get(fields.text_key)
    lower = criteria.get(fields.min_key)
    upper = criteria.get(fields.max_key)

    has_text = text is not None and text != ""
    has_lower = lower is not None
    has_upper = upper is not None

    if not (has_text or has_lower or has_upper):
        raise EmptyInputError("No filter criteria supplied")
    if has_lower and has_upper and _as_number(lower) > _as_number(upper):
        raise RangeConflictError(
            f"{fields.min_key} can't be greater than {fields.max_key}"
        )

    gt, lt = (">=", "<=") if fields.inclusive_bounds else (">", "<")
    sink = _ParamSink()
    parts: List[str] = []

    if has_text:
        parts.append(f"{fields.text_column} ILIKE {sink.add(f'%{text}%')}")
    if has_lower:
        col = _quote_identifier(resolve_column(fields.translation, fields.min_key))
        parts.append(f"{col}{gt}{sink.add(lower)}")
    if has_upper:
        col = _quote_identifier(resolve_column(fields.translation, fields.max_key))
        parts.append(f"{col}{lt}{sink.add(upper)}")

    return ClauseResult(clause=" AND ".join(parts), values=sink.params)


# -----------------------------------------------------------------------------
# Public exports
# -----------------------------------------------------------------------------
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
