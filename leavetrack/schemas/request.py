# ruff: noqa: TC001, TC003
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, Field, model_validator

from leavetrack.models.enums import LeaveStatus, LeaveType

# ---------------------------------------------------------------------------
# Submit payloads (discriminated on leave_type)
# ---------------------------------------------------------------------------


class _SubmitBase(BaseModel):
    employee_id: int
    start_date: date

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        end_date = getattr(self, "end_date", None)
        if end_date is not None and end_date < self.start_date:
            msg = "end_date must not be before start_date"
            raise ValueError(msg)
        return self


class SubmitSickLeave(_SubmitBase):
    leave_type: Literal[LeaveType.SICK]
    end_date: date
    illness_description: str = Field(default="", max_length=1000)


class SubmitVacationLeave(_SubmitBase):
    leave_type: Literal[LeaveType.VACATION]
    end_date: date


class SubmitMaternityLeave(_SubmitBase):
    leave_type: Literal[LeaveType.MATERNITY]
    expected_delivery_date: date


class SubmitPaternityLeave(_SubmitBase):
    leave_type: Literal[LeaveType.PATERNITY]
    child_birth_date: date
    is_adoption: bool = False


class SubmitBereavementLeave(_SubmitBase):
    leave_type: Literal[LeaveType.BEREAVEMENT]
    relationship_to_deceased: str = Field(min_length=1, max_length=255)
    deceased_name: str = Field(default="", max_length=255)


class SubmitUnpaidLeave(_SubmitBase):
    leave_type: Literal[LeaveType.UNPAID]
    end_date: date
    reason: str = Field(default="", max_length=1000)


class SubmitStudyLeave(_SubmitBase):
    leave_type: Literal[LeaveType.STUDY]
    end_date: date
    course_name: str = Field(min_length=1, max_length=255)
    institution_name: str = Field(min_length=1, max_length=255)


SubmitLeavePayload = Annotated[
    SubmitSickLeave
    | SubmitVacationLeave
    | SubmitMaternityLeave
    | SubmitPaternityLeave
    | SubmitBereavementLeave
    | SubmitUnpaidLeave
    | SubmitStudyLeave,
    Field(discriminator="leave_type"),
]

# ---------------------------------------------------------------------------
# Action payloads
# ---------------------------------------------------------------------------


class RejectPayload(BaseModel):
    """Request body for rejecting a request."""

    reason: str = Field(min_length=1, max_length=1000)


class CertificatePayload(BaseModel):
    doctor_name: str = Field(min_length=1, max_length=255)
    hospital_name: str = Field(min_length=1, max_length=255)
    diagnosis: str = Field(min_length=1, max_length=1000)


class TravelDetailsPayload(BaseModel):
    destination: str = Field(min_length=1, max_length=255)
    accommodation_type: str = Field(min_length=1, max_length=255)
    emergency_contact_name: str = Field(min_length=1, max_length=255)
    emergency_contact_phone: str = Field(min_length=1, max_length=50)
    is_international: bool = False


class ExtensionPayload(BaseModel):
    weeks: int


class ApprovalPayload(BaseModel):
    """A sign-off decision on an unpaid leave request."""

    role: str = Field(min_length=1, max_length=50)
    approved: bool
    comments: str | None = Field(default=None, max_length=1000)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class RequestResponse(BaseModel):
    """Response schema for a single leave request."""

    request_id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    leave_days: int
    status: LeaveStatus
    status_label: str
    rejection_reason: str | None
    request_date: date
    is_eligible: bool
    requires_documentation: bool
    details: dict[str, Any]


class RequestListResponse(BaseModel):
    """List of leave requests, longest first."""

    items: list[RequestResponse]
    total: int


class StatusChangeResponse(BaseModel):
    changed_by: str
    from_status: str
    to_status: str
    notes: str | None
    timestamp: datetime


class StatusHistoryResponse(BaseModel):
    """Ordered status history of one request."""

    request_id: int
    items: list[StatusChangeResponse]
    total: int
