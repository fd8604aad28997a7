# ruff: noqa: TC003
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from leavetrack.models.balance import LeaveBalance
from leavetrack.models.base import _today, completed_months, completed_years
from leavetrack.models.outcome import Outcome

logger = logging.getLogger(__name__)


class ContactInfo(BaseModel):
    """Phone, address and emergency contact details for an employee."""

    phone: str
    address: str
    alternate_email: str | None = None
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None

    def set_emergency_contact(self, name: str, phone: str) -> None:
        self.emergency_contact_name = name
        self.emergency_contact_phone = phone

    def has_emergency_contact(self) -> bool:
        return self.emergency_contact_name is not None and self.emergency_contact_phone is not None


class Employee(BaseModel):
    """A person who requests leave. Owns exactly one ``LeaveBalance``."""

    employee_id: int = Field(frozen=True)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    department: str = Field(min_length=1)
    hire_date: date = Field(frozen=True)
    contact_info: ContactInfo | None = None
    leave_balance: LeaveBalance

    @field_validator("first_name", "last_name", "email", "department")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value

    @model_validator(mode="before")
    @classmethod
    def _attach_leave_balance(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("leave_balance") is None and "hire_date" in data:
            return {**data, "leave_balance": LeaveBalance(hire_date=data["hire_date"])}
        return data

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def tenure_years(self, as_of: date | None = None) -> int:
        return completed_years(self.hire_date, as_of or _today())

    def tenure_months(self, as_of: date | None = None) -> int:
        return completed_months(self.hire_date, as_of or _today())

    # ------------------------------------------------------------------
    # Validated setters: a blank value is refused and the old one kept.
    # ------------------------------------------------------------------

    def _set_text(self, field: str, label: str, value: str) -> Outcome:
        if not value or not value.strip():
            logger.warning("Employee %d: %s cannot be empty", self.employee_id, label)
            return Outcome.refused(f"{label} cannot be empty")
        setattr(self, field, value)
        return Outcome.success()

    def set_first_name(self, value: str) -> Outcome:
        return self._set_text("first_name", "First name", value)

    def set_last_name(self, value: str) -> Outcome:
        return self._set_text("last_name", "Last name", value)

    def set_email(self, value: str) -> Outcome:
        return self._set_text("email", "Email", value)

    def set_department(self, value: str) -> Outcome:
        return self._set_text("department", "Department", value)

    def __str__(self) -> str:
        return f"Employee[{self.employee_id}] {self.full_name} ({self.department})"
