"""Category and subcategory endpoints for the Question Bank API."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, status

from question_bank.models import Category, Subcategory
from question_bank.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    SubcategoryCreate,
    SubcategoryResponse,
    SubcategoryUpdate,
)
from question_bank.services import catalog
from question_bank.services.catalog import CatalogError

from ..dependencies import CurrentVoterDep, SessionDep
from ..errors import catalog_http_error

router = APIRouter(tags=["categories"])


@router.get("/categories/", response_model=list[CategoryResponse])
def list_categories(_voter_id: CurrentVoterDep, db: SessionDep) -> Sequence[Category]:
    """List all categories."""
    return catalog.list_categories(db)


@router.post(
    "/categories/",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    category_data: CategoryCreate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Category:
    """Create a category with a unique name."""
    try:
        return catalog.create_category(db, category_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.put("/categories/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Category:
    """Update the supplied fields of a category."""
    try:
        return catalog.update_category(db, category_id, category_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.delete("/categories/{category_id}")
def delete_category(
    category_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> dict[str, str]:
    """Delete a category that nothing depends on."""
    try:
        catalog.delete_category(db, category_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return {"status": "success", "message": "Category deleted successfully"}


@router.get(
    "/categories/{category_id}/subcategories",
    response_model=list[SubcategoryResponse],
)
def list_subcategories(
    category_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Sequence[Subcategory]:
    """List the subcategories of a category."""
    try:
        return catalog.list_subcategories(db, category_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.post(
    "/categories/{category_id}/subcategories",
    response_model=SubcategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_subcategory(
    category_id: int,
    subcategory_data: SubcategoryCreate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Subcategory:
    """Create a subcategory under a category."""
    try:
        return catalog.create_subcategory(db, category_id, subcategory_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.put("/subcategories/{subcategory_id}", response_model=SubcategoryResponse)
def update_subcategory(
    subcategory_id: int,
    subcategory_data: SubcategoryUpdate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> Subcategory:
    """Update the supplied fields of a subcategory."""
    try:
        return catalog.update_subcategory(db, subcategory_id, subcategory_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err


@router.delete("/subcategories/{subcategory_id}")
def delete_subcategory(
    subcategory_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> dict[str, str]:
    """Delete a subcategory that no active question uses."""
    try:
        catalog.delete_subcategory(db, subcategory_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return {"status": "success", "message": "Subcategory deleted successfully"}
