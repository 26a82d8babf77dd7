"""Employee-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from .common import reject_null


class EmployeeCreate(BaseModel):
    """Schema for registering a question writer."""

    employee_name: str = Field(..., min_length=1, description="Employee name is required")
    employee_email: EmailStr


class EmployeeUpdate(BaseModel):
    """Partial update; only fields present in the payload are applied."""

    employee_name: str | None = Field(None, min_length=1)
    employee_email: EmailStr | None = None
    is_active: bool | None = None

    @field_validator("employee_name", "employee_email", "is_active")
    @classmethod
    def _not_null(cls, v: object, info: ValidationInfo) -> object:
        return reject_null(v, info.field_name)


class EmployeeResponse(BaseModel):
    """Schema for employee information returned by the API."""

    employee_id: int
    employee_name: str
    employee_email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
