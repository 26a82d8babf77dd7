"""Company endpoints for the Question Bank API."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, status

from question_bank.models import Company
from question_bank.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from question_bank.services import catalog
from question_bank.services.catalog import CatalogError

from ..dependencies import CurrentVoterDep, SessionDep
from ..errors import catalog_http_error

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("/", response_model=list[CompanyResponse])
def list_companies(_voter_id: CurrentVoterDep, db: SessionDep) -> Sequence[Company]:
    """List active companies."""
    return catalog.list_companies(db)


@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    company_data: CompanyCreate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Company:
    """Create a new company."""
    return catalog.create_company(db, company_data)


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: int,
    company_data: CompanyUpdate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Company:
    """Update the supplied fields of a company."""
    try:
        return catalog.update_company(db, company_id, company_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.delete("/{company_id}")
def delete_company(
    company_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> dict[str, str]:
    """Soft delete a company."""
    try:
        catalog.deactivate_company(db, company_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return {"status": "success", "message": "Company deleted successfully"}
