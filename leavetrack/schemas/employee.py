# ruff: noqa: TC003
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator


class ContactInfoPayload(BaseModel):
    phone: str = Field(min_length=1, max_length=50)
    address: str = Field(min_length=1, max_length=500)
    alternate_email: str | None = Field(default=None, max_length=255)
    emergency_contact_name: str | None = Field(default=None, max_length=255)
    emergency_contact_phone: str | None = Field(default=None, max_length=50)


class CreateEmployeeRequest(BaseModel):
    """Request body for registering an employee."""

    employee_id: int = Field(gt=0)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    department: str = Field(min_length=1, max_length=100)
    hire_date: date
    contact_info: ContactInfoPayload | None = None

    @field_validator("first_name", "last_name", "email", "department")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value


class EmployeeResponse(BaseModel):
    """Response schema for an employee."""

    employee_id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    department: str
    hire_date: date
    tenure_years: int
    has_emergency_contact: bool


class EmployeeListResponse(BaseModel):
    """List of employees."""

    items: list[EmployeeResponse]
    total: int


class BalanceResponse(BaseModel):
    """Balance for a single leave type."""

    leave_type: str
    allotted_days: int
    used_days: int
    remaining_days: int


class BalanceListResponse(BaseModel):
    """All leave balances for an employee."""

    employee_id: int
    tenure_bonus_days: int
    items: list[BalanceResponse]
    total: int
