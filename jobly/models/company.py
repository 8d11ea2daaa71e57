from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional

import asyncpg

from ..errors import BadRequestError, NotFoundError
from ..query import COMPANY_FILTERS, build_filter_clause, build_set_clause
from .job import job_from_row

log = logging.getLogger(__name__)

_COLUMNS = '''handle,
              name,
              description,
              num_employees AS "numEmployees",
              logo_url AS "logoUrl"'''

_JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class Company:
    """Related functions for companies."""

    @staticmethod
    async def create(db, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a company from `data` ({handle, name, description, numEmployees, logoUrl}).

        Returns {handle, name, description, numEmployees, logoUrl}.
        Raises BadRequestError if the handle or name is taken.
        """
        handle = data["handle"]
        dup = await db.fetchrow(
            "SELECT handle FROM companies WHERE handle = $1",
            handle,
        )
        if dup:
            raise BadRequestError(f"Duplicate company: {handle}")

        try:
            row = await db.fetchrow(
                f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                    VALUES ($1, $2, $3, $4, $5)
                    RETURNING {_COLUMNS}""",
                handle,
                data["name"],
                data.get("description"),
                data.get("numEmployees"),
                data.get("logoUrl"),
            )
        except asyncpg.UniqueViolationError:
            raise BadRequestError(f"Duplicate company: {handle}")
        log.info("Created company %s", handle)
        return dict(row)

    @staticmethod
    async def find_all(db, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        All companies ordered by name, optionally filtered by
        {name, minEmployees, maxEmployees}.
        """
        if criteria:
            where = build_filter_clause(criteria, COMPANY_FILTERS)
            rows = await db.fetch(
                f"""SELECT {_COLUMNS}
                    FROM companies
                    WHERE {where.clause}
                    ORDER BY name""",
                *where.values,
            )
        else:
            rows = await db.fetch(
                f"""SELECT {_COLUMNS}
                    FROM companies
                    ORDER BY name"""
            )
        return [dict(r) for r in rows]

    @staticmethod
    async def get(db, handle: str) -> Dict[str, Any]:
        """
        Returns {handle, name, description, numEmployees, logoUrl, jobs}
        where jobs is [{id, title, salary, equity}, ...].

        Raises NotFoundError if not found.
        """
        row = await db.fetchrow(
            f"""SELECT {_COLUMNS}
                FROM companies
                WHERE handle = $1""",
            handle,
        )
        if not row:
            raise NotFoundError(f"No company: {handle}")

        company = dict(row)
        job_rows = await db.fetch(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            handle,
        )
        company["jobs"] = [job_from_row(r) for r in job_rows]
        return company

    @staticmethod
    async def update(db, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update: only the fields present in `data` change.

        Data can include {name, description, numEmployees, logoUrl}.
        Raises NotFoundError if not found, EmptyInputError if `data` is empty,
        BadRequestError if the new name belongs to another company.
        """
        set_ = build_set_clause(data, _JS_TO_SQL)
        try:
            row = await db.fetchrow(
                f"""UPDATE companies
                    SET {set_.clause}
                    WHERE handle = {set_.next_placeholder}
                    RETURNING {_COLUMNS}""",
                *set_.values,
                handle,
            )
        except asyncpg.UniqueViolationError:
            raise BadRequestError(f"Duplicate company: {data.get('name', handle)}")
        if not row:
            raise NotFoundError(f"No company: {handle}")
        return dict(row)

    @staticmethod
    async def remove(db, handle: str) -> None:
        row = await db.fetchrow(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            handle,
        )
        if not row:
            raise NotFoundError(f"No company: {handle}")
        log.info("Removed company %s", handle)
