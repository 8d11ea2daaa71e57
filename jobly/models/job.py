from __future__ import annotations
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

import asyncpg

from ..errors import BadRequestError, NotFoundError
from ..query import JOB_FILTERS, build_filter_clause, build_set_clause

log = logging.getLogger(__name__)

_COLUMNS = '''id,
              title,
              salary,
              equity,
              company_handle AS "companyHandle"'''

_JS_TO_SQL = {
    "companyHandle": "company_handle",
}


def job_from_row(row) -> Dict[str, Any]:
    # NUMERIC comes back as Decimal; the API speaks strings for equity
    job = dict(row)
    if isinstance(job.get("equity"), Decimal):
        job["equity"] = str(job["equity"])
    return job


def _to_numeric(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise BadRequestError(f"Invalid equity: {value!r}")


def _for_db(data: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(data)
    if "equity" in out:
        out["equity"] = _to_numeric(out["equity"])
    return out


class Job:
    """Related functions for jobs."""

    @staticmethod
    async def create(db, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a job from `data` ({title, salary, equity, companyHandle}).

        Returns {id, title, salary, equity, companyHandle}.
        Raises BadRequestError if the company does not exist.
        """
        data = _for_db(data)
        try:
            row = await db.fetchrow(
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES ($1, $2, $3, $4)
                    RETURNING {_COLUMNS}""",
                data["title"],
                data.get("salary"),
                data.get("equity"),
                data["companyHandle"],
            )
        except asyncpg.ForeignKeyViolationError:
            raise BadRequestError(f"No company: {data['companyHandle']}")
        log.info("Created job %s for %s", row["id"], data["companyHandle"])
        return job_from_row(row)

    @staticmethod
    async def find_all(db, criteria: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        All jobs ordered by title, optionally filtered by
        {title, minSalary, maxSalary}.
        """
        if criteria:
            where = build_filter_clause(criteria, JOB_FILTERS)
            rows = await db.fetch(
                f"""SELECT {_COLUMNS}
                    FROM jobs
                    WHERE {where.clause}
                    ORDER BY title""",
                *where.values,
            )
        else:
            rows = await db.fetch(
                f"""SELECT {_COLUMNS}
                    FROM jobs
                    ORDER BY title"""
            )
        return [job_from_row(r) for r in rows]

    @staticmethod
    async def get(db, id: int) -> Dict[str, Any]:
        """Raises NotFoundError if not found."""
        row = await db.fetchrow(
            f"""SELECT {_COLUMNS}
                FROM jobs
                WHERE id = $1""",
            id,
        )
        if not row:
            raise NotFoundError(f"No job: {id}")
        return job_from_row(row)

    @staticmethod
    async def update(db, id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update: only the fields present in `data` change.

        Data can include {title, salary, equity}.
        Raises NotFoundError if not found, EmptyInputError if `data` is empty.
        """
        set_ = build_set_clause(_for_db(data), _JS_TO_SQL)
        row = await db.fetchrow(
            f"""UPDATE jobs
                SET {set_.clause}
                WHERE id = {set_.next_placeholder}
                RETURNING {_COLUMNS}""",
            *set_.values,
            id,
        )
        if not row:
            raise NotFoundError(f"No job: {id}")
        return job_from_row(row)

    @staticmethod
    async def remove(db, id: int) -> None:
        row = await db.fetchrow(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            id,
        )
        if not row:
            raise NotFoundError(f"No job: {id}")
        log.info("Removed job %s", id)
