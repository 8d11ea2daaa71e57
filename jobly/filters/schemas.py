# jobly/filters/schemas.py
from __future__ import annotations
import re
from typing import Any, Dict, List, Mapping

from jsonschema import Draft7Validator

from ..errors import BadRequestError

# largest value an INTEGER column holds
_PG_INT_MAX = 2147483647

# ---------------------------------------------------------------------------
# Request body schemas
# ---------------------------------------------------------------------------

_EQUITY = {
    "anyOf": [
        {"type": "number", "minimum": 0, "maximum": 1},
        {"type": "string", "pattern": r"^(0(\.\d+)?|1(\.0+)?)$"},
        {"type": "null"},
    ]
}

COMPANY_NEW_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "New company",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "handle": {"type": "string", "minLength": 1, "maxLength": 25},
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "numEmployees": {"type": "integer", "minimum": 0, "maximum": _PG_INT_MAX},
        "logoUrl": {"type": "string", "format": "uri"},
    },
    "required": ["handle", "name", "description"],
}

COMPANY_UPDATE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Company update",
    "type": "object",
    "additionalProperties": False,
    "minProperties": 1,
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "numEmployees": {"type": ["integer", "null"], "minimum": 0, "maximum": _PG_INT_MAX},
        "logoUrl": {"type": ["string", "null"], "format": "uri"},
    },
}

JOB_NEW_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "New job",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "salary": {"type": ["integer", "null"], "minimum": 0, "maximum": _PG_INT_MAX},
        "equity": _EQUITY,
        "companyHandle": {"type": "string", "minLength": 1, "maxLength": 25},
    },
    "required": ["title", "companyHandle"],
}

# id and companyHandle are fixed once a job exists
JOB_UPDATE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Job update",
    "type": "object",
    "additionalProperties": False,
    "minProperties": 1,
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "salary": {"type": ["integer", "null"], "minimum": 0, "maximum": _PG_INT_MAX},
        "equity": _EQUITY,
    },
}

# ---------------------------------------------------------------------------
# Search (query string) schemas
# ---------------------------------------------------------------------------

COMPANY_SEARCH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Company search",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "minEmployees": {"type": "integer", "minimum": 0, "maximum": _PG_INT_MAX},
        "maxEmployees": {"type": "integer", "minimum": 0, "maximum": _PG_INT_MAX},
    },
}

JOB_SEARCH_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Job search",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": {"type": "string", "minLength": 1},
        "minSalary": {"type": "integer", "minimum": 0, "maximum": _PG_INT_MAX},
        "maxSalary": {"type": "integer", "minimum": 0, "maximum": _PG_INT_MAX},
    },
}

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"^-?\d+$")


def validate_payload(data: Any, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate `data` against `schema`, collecting every error.
    Raises BadRequestError with the list of messages.
    """
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise BadRequestError([_describe(e) for e in errors])
    return data


def _describe(error) -> str:
    where = ".".join(str(p) for p in error.path)
    return f"instance.{where} {error.message}" if where else f"instance {error.message}"


def parse_search_query(params: Mapping[str, str], schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn query-string params into typed filter criteria and validate them.
    Integer-looking values of integer properties become ints; everything
    else stays a string and is left to the schema.
    """
    props = schema.get("properties", {})
    criteria: Dict[str, Any] = {}
    for key, raw in params.items():
        wants_int = props.get(key, {}).get("type") == "integer"
        criteria[key] = int(raw) if wants_int and _INT_RE.match(raw) else raw
    return validate_payload(criteria, schema)


__all__: List[str] = [
    "COMPANY_NEW_SCHEMA",
    "COMPANY_UPDATE_SCHEMA",
    "COMPANY_SEARCH_SCHEMA",
    "JOB_NEW_SCHEMA",
    "JOB_UPDATE_SCHEMA",
    "JOB_SEARCH_SCHEMA",
    "validate_payload",
    "parse_search_query",
]
