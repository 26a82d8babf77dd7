"""Employee endpoints for the Question Bank API."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, status

from question_bank.models import Employee
from question_bank.schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from question_bank.services import catalog
from question_bank.services.catalog import CatalogError

from ..dependencies import CurrentVoterDep, SessionDep
from ..errors import catalog_http_error

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/", response_model=list[EmployeeResponse])
def list_employees(_voter_id: CurrentVoterDep, db: SessionDep) -> Sequence[Employee]:
    """List active employees."""
    return catalog.list_employees(db)


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_data: EmployeeCreate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Employee:
    """Register a question writer."""
    try:
        return catalog.create_employee(db, employee_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Employee:
    """Update the supplied fields of an employee."""
    try:
        return catalog.update_employee(db, employee_id, employee_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.delete("/{employee_id}")
def delete_employee(
    employee_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> dict[str, str]:
    """Soft delete an employee."""
    try:
        catalog.deactivate_employee(db, employee_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return {"status": "success", "message": "Employee deleted successfully"}
