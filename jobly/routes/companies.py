"""Routes for companies."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from ..auth import require_admin
from ..database import get_db
from ..filters import (
    COMPANY_NEW_SCHEMA,
    COMPANY_UPDATE_SCHEMA,
    COMPANY_SEARCH_SCHEMA,
    validate_payload,
    parse_search_query,
)
from ..models import Company

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_company(payload: Dict[str, Any] = Body(...), db=Depends(get_db)):
    """
    { handle, name, description, numEmployees, logoUrl } => { company }

    Authorization required: admin
    """
    validate_payload(payload, COMPANY_NEW_SCHEMA)
    company = await Company.create(db, payload)
    return {"company": company}


@router.get("")
async def list_companies(request: Request, db=Depends(get_db)):
    """
    => { companies: [ { handle, name, description, numEmployees, logoUrl }, ...] }

    Can filter on query string: name (case-insensitive, partial match),
    minEmployees, maxEmployees.
    """
    criteria = parse_search_query(request.query_params, COMPANY_SEARCH_SCHEMA)
    companies = await Company.find_all(db, criteria)
    return {"companies": companies}


@router.get("/{handle}")
async def get_company(handle: str, db=Depends(get_db)):
    """=> { company } where company has a jobs list."""
    company = await Company.get(db, handle)
    return {"company": company}


@router.patch("/{handle}", dependencies=[Depends(require_admin)])
async def update_company(handle: str, payload: Dict[str, Any] = Body(...), db=Depends(get_db)):
    """
    Patch company data; fields can be { name, description, numEmployees, logoUrl }.

    Authorization required: admin
    """
    validate_payload(payload, COMPANY_UPDATE_SCHEMA)
    company = await Company.update(db, handle, payload)
    return {"company": company}


@router.delete("/{handle}", dependencies=[Depends(require_admin)])
async def delete_company(handle: str, db=Depends(get_db)):
    await Company.remove(db, handle)
    return {"deleted": handle}
