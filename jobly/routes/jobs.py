"""Routes for jobs."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from ..auth import require_admin
from ..database import get_db
from ..filters import (
    JOB_NEW_SCHEMA,
    JOB_UPDATE_SCHEMA,
    JOB_SEARCH_SCHEMA,
    validate_payload,
    parse_search_query,
)
from ..models import Job

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_job(payload: Dict[str, Any] = Body(...), db=Depends(get_db)):
    """
    { title, salary, equity, companyHandle } => { job }

    Authorization required: admin
    """
    validate_payload(payload, JOB_NEW_SCHEMA)
    job = await Job.create(db, payload)
    return {"job": job}


@router.get("")
async def list_jobs(request: Request, db=Depends(get_db)):
    """
    => { jobs: [ { id, title, salary, equity, companyHandle }, ...] }

    Can filter on query string: title (case-insensitive, partial match),
    minSalary, maxSalary.
    """
    criteria = parse_search_query(request.query_params, JOB_SEARCH_SCHEMA)
    jobs = await Job.find_all(db, criteria)
    return {"jobs": jobs}


@router.get("/{job_id}")
async def get_job(job_id: int, db=Depends(get_db)):
    job = await Job.get(db, job_id)
    return {"job": job}


@router.patch("/{job_id}", dependencies=[Depends(require_admin)])
async def update_job(job_id: int, payload: Dict[str, Any] = Body(...), db=Depends(get_db)):
    """
    Patch job data; fields can be { title, salary, equity }.

    Authorization required: admin
    """
    validate_payload(payload, JOB_UPDATE_SCHEMA)
    job = await Job.update(db, job_id, payload)
    return {"job": job}


@router.delete("/{job_id}", dependencies=[Depends(require_admin)])
async def delete_job(job_id: int, db=Depends(get_db)):
    await Job.remove(db, job_id)
    return {"deleted": job_id}
