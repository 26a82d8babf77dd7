"""Category and subcategory Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .common import reject_null


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    category_name: str = Field(..., min_length=1, description="Category name is required")
    category_description: str | None = None


class CategoryUpdate(BaseModel):
    """Partial update for a category."""

    category_name: str | None = Field(None, min_length=1)
    category_description: str | None = None

    @field_validator("category_name")
    @classmethod
    def _not_null(cls, v: object, info: ValidationInfo) -> object:
        return reject_null(v, info.field_name)


class CategoryResponse(BaseModel):
    """Schema for category information returned by the API."""

    category_id: int
    category_name: str
    category_description: str | None

    model_config = ConfigDict(from_attributes=True)


class SubcategoryCreate(BaseModel):
    """Schema for creating a subcategory; the parent comes from the URL."""

    subcategory_name: str = Field(..., min_length=1, description="Subcategory name is required")
    subcategory_description: str | None = None


class SubcategoryUpdate(BaseModel):
    """Partial update for a subcategory."""

    subcategory_name: str | None = Field(None, min_length=1)
    subcategory_description: str | None = None

    @field_validator("subcategory_name")
    @classmethod
    def _not_null(cls, v: object, info: ValidationInfo) -> object:
        return reject_null(v, info.field_name)


class SubcategoryResponse(BaseModel):
    """Schema for subcategory information returned by the API."""

    subcategory_id: int
    category_id: int
    subcategory_name: str
    subcategory_description: str | None

    model_config = ConfigDict(from_attributes=True)
