"""Company-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .common import reject_null


class CompanyCreate(BaseModel):
    """Schema for creating a new company."""

    company_name: str = Field(..., min_length=1, description="Company name is required")
    company_gst_number: str | None = None
    company_city: str | None = None
    company_state: str | None = None
    company_country: str | None = None
    company_pincode: str | None = None
    company_address: str | None = None


class CompanyUpdate(BaseModel):
    """Partial update; only fields present in the payload are applied."""

    company_name: str | None = Field(None, min_length=1)
    company_gst_number: str | None = None
    company_city: str | None = None
    company_state: str | None = None
    company_country: str | None = None
    company_pincode: str | None = None
    company_address: str | None = None
    is_active: bool | None = None

    @field_validator("company_name", "is_active")
    @classmethod
    def _not_null(cls, v: object, info: ValidationInfo) -> object:
        return reject_null(v, info.field_name)


class CompanyResponse(BaseModel):
    """Schema for company information returned by the API."""

    company_id: int
    company_name: str
    company_gst_number: str | None
    company_city: str | None
    company_state: str | None
    company_country: str | None
    company_pincode: str | None
    company_address: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
