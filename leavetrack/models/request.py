# ruff: noqa: TC003
"""Leave requests: a closed union of seven leave-type variants.

Every variant shares the fields and status handling of ``_LeaveRequestBase``
and is tagged by its ``leave_type``. Type-specific policy lives in the
``is_eligible`` and ``requires_documentation`` functions at the bottom of
this module, which match over the whole union.
"""

from __future__ import annotations

import itertools
import logging
from datetime import date, timedelta
from typing import Annotated, Any, Literal, Self, assert_never

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from leavetrack.models.base import _today
from leavetrack.models.enums import LeaveStatus, LeaveType
from leavetrack.models.history import StatusHistory
from leavetrack.models.outcome import Outcome
from leavetrack.models.workflow import ApprovalWorkflow

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "System"

SICK_DAYS_REQUIRING_CERTIFICATE = 3
CERTIFICATE_VALIDITY_DAYS = 30
VACATION_MIN_ADVANCE_NOTICE_DAYS = 14
VACATION_MAX_CONSECUTIVE_DAYS = 21
MATERNITY_STANDARD_WEEKS = 12
MATERNITY_MAX_EXTENSION_WEEKS = 4
PATERNITY_STANDARD_DAYS = 10
PATERNITY_ADOPTION_DAYS = 14
PATERNITY_VALID_WEEKS_AFTER_BIRTH = 8
BEREAVEMENT_IMMEDIATE_FAMILY_DAYS = 5
BEREAVEMENT_EXTENDED_FAMILY_DAYS = 3
BEREAVEMENT_TRAVEL_DAYS = 2
UNPAID_MAX_DAYS = 30
UNPAID_DAYS_REQUIRING_DOCUMENTATION = 5
STUDY_MAX_DAYS = 10

_IMMEDIATE_FAMILY = ("spouse", "parent", "child", "sibling")

_date_adapter: TypeAdapter[date] = TypeAdapter(date)
_certificate_numbers = itertools.count(1000)


def _next_certificate_number() -> str:
    return f"MC-{next(_certificate_numbers)}"


# ---------------------------------------------------------------------------
# Attached value records
# ---------------------------------------------------------------------------


class MedicalCertificate(BaseModel):
    """Doctor's certificate supporting a sick leave request."""

    doctor_name: str
    hospital_name: str
    diagnosis: str
    issue_date: date = Field(default_factory=_today)
    certificate_number: str = Field(default_factory=_next_certificate_number)

    def is_valid(self, as_of: date | None = None) -> bool:
        return ((as_of or _today()) - self.issue_date).days <= CERTIFICATE_VALIDITY_DAYS


class TravelDetails(BaseModel):
    """Where an employee can be reached while on vacation."""

    destination: str
    accommodation_type: str
    emergency_contact_name: str
    emergency_contact_phone: str
    is_international: bool = False

    def mark_as_international(self) -> None:
        self.is_international = True


# ---------------------------------------------------------------------------
# Shared request behaviour
# ---------------------------------------------------------------------------


class _LeaveRequestBase(BaseModel):
    request_id: int
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    status: LeaveStatus = LeaveStatus.PENDING
    rejection_reason: str | None = None
    request_date: date = Field(default_factory=_today)
    status_history: StatusHistory = Field(default_factory=StatusHistory)
    # Days deducted from the balance on approval and the balance period they were charged in.
    charged_days: int = 0
    charge_period: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _fill_end_date(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("end_date") is None and data.get("start_date") is not None:
            start = _date_adapter.validate_python(data["start_date"])
            derived = cls._derived_end_date(start, data)
            if derived is not None:
                return {**data, "start_date": start, "end_date": derived}
        return data

    @classmethod
    def _derived_end_date(cls, start: date, data: dict[str, Any]) -> date | None:
        """End date implied by the leave type, for variants with a fixed length."""
        return None

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.end_date < self.start_date:
            msg = "end_date must not be before start_date"
            raise ValueError(msg)
        return self

    def model_post_init(self, context: Any, /) -> None:
        if not self.status_history.changes:
            self.status_history.add_change(SYSTEM_ACTOR, "Created", self.status_label)

    @property
    def status_label(self) -> str:
        if self.status == LeaveStatus.REJECTED:
            return f"Rejected: {self.rejection_reason}"
        return self.status.value.capitalize()

    @property
    def display_type(self) -> str:
        return self.leave_type.display_name

    def calculate_leave_days(self) -> int:
        """Inclusive number of calendar days covered by the request."""
        return (self.end_date - self.start_date).days + 1

    def is_eligible(self) -> bool:
        return is_eligible(self)  # type: ignore[arg-type]

    def requires_documentation(self) -> bool:
        return requires_documentation(self)  # type: ignore[arg-type]

    def add_note(self, note: str, changed_by: str = SYSTEM_ACTOR) -> None:
        """Record an event that does not change the status."""
        label = self.status_label
        self.status_history.add_change(changed_by, label, label, note)

    def approve(self, approver_name: str) -> Outcome:
        previous = self.status_label
        self.status = LeaveStatus.APPROVED
        self.rejection_reason = None
        self.status_history.add_change(approver_name, previous, self.status_label)
        logger.info("Request %d approved by %s", self.request_id, approver_name)
        return Outcome.success()

    def reject(self, approver_name: str, reason: str) -> Outcome:
        previous = self.status_label
        self.status = LeaveStatus.REJECTED
        self.rejection_reason = reason
        self.status_history.add_change(approver_name, previous, self.status_label)
        logger.info("Request %d rejected by %s: %s", self.request_id, approver_name, reason)
        return Outcome.success()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class SickLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.SICK] = LeaveType.SICK
    illness_description: str = ""
    medical_certificate: MedicalCertificate | None = None
    is_hospitalized: bool = False

    def attach_medical_certificate(self, doctor_name: str, hospital_name: str, diagnosis: str) -> MedicalCertificate:
        self.medical_certificate = MedicalCertificate(
            doctor_name=doctor_name,
            hospital_name=hospital_name,
            diagnosis=diagnosis,
        )
        self.add_note("Medical certificate attached")
        return self.medical_certificate

    def has_medical_certificate(self) -> bool:
        return self.medical_certificate is not None

    def mark_as_hospitalized(self) -> None:
        self.is_hospitalized = True


class VacationLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.VACATION] = LeaveType.VACATION
    travel_details: TravelDetails | None = None

    def set_travel_details(
        self,
        destination: str,
        accommodation_type: str,
        emergency_contact_name: str,
        emergency_contact_phone: str,
    ) -> TravelDetails:
        self.travel_details = TravelDetails(
            destination=destination,
            accommodation_type=accommodation_type,
            emergency_contact_name=emergency_contact_name,
            emergency_contact_phone=emergency_contact_phone,
        )
        return self.travel_details

    def has_travel_details(self) -> bool:
        return self.travel_details is not None

    def has_advance_notice(self) -> bool:
        return (self.start_date - self.request_date).days >= VACATION_MIN_ADVANCE_NOTICE_DAYS

    def exceeds_max_duration(self) -> bool:
        return self.calculate_leave_days() > VACATION_MAX_CONSECUTIVE_DAYS


class MaternityLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.MATERNITY] = LeaveType.MATERNITY
    expected_delivery_date: date
    extension_requested: bool = False
    extension_weeks: int = 0

    @classmethod
    def _derived_end_date(cls, start: date, data: dict[str, Any]) -> date | None:
        return start + timedelta(weeks=MATERNITY_STANDARD_WEEKS)

    @property
    def is_prenatal(self) -> bool:
        return self.start_date < self.expected_delivery_date

    def weeks_before_delivery(self) -> int:
        if not self.is_prenatal:
            return 0
        return (self.expected_delivery_date - self.start_date).days // 7

    def request_extension(self, weeks: int) -> bool:
        """Extend the leave once by 1 to 4 weeks. Anything else is refused."""
        if self.extension_requested:
            logger.info("Request %d: maternity extension already granted", self.request_id)
            return False
        if not 1 <= weeks <= MATERNITY_MAX_EXTENSION_WEEKS:
            logger.info("Request %d: maternity extension of %d weeks refused", self.request_id, weeks)
            return False
        self.extension_requested = True
        self.extension_weeks = weeks
        self.end_date += timedelta(weeks=weeks)
        self.add_note(f"Extension requested: {weeks} weeks")
        return True


class PaternityLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.PATERNITY] = LeaveType.PATERNITY
    child_birth_date: date
    is_adoption: bool = False

    @classmethod
    def _derived_end_date(cls, start: date, data: dict[str, Any]) -> date | None:
        days = PATERNITY_ADOPTION_DAYS if data.get("is_adoption") else PATERNITY_STANDARD_DAYS
        return start + timedelta(days=days)

    def is_within_valid_period(self) -> bool:
        """Leave must start within 8 completed weeks after the birth."""
        days_after_birth = (self.start_date - self.child_birth_date).days
        return days_after_birth >= 0 and days_after_birth // 7 <= PATERNITY_VALID_WEEKS_AFTER_BIRTH


def is_immediate_family(relationship: str) -> bool:
    rel = relationship.casefold()
    return any(keyword in rel for keyword in _IMMEDIATE_FAMILY)


class BereavementLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.BEREAVEMENT] = LeaveType.BEREAVEMENT
    relationship_to_deceased: str
    deceased_name: str = ""
    requires_travel: bool = False

    @classmethod
    def _derived_end_date(cls, start: date, data: dict[str, Any]) -> date | None:
        relationship = str(data.get("relationship_to_deceased", ""))
        if is_immediate_family(relationship):
            days = BEREAVEMENT_IMMEDIATE_FAMILY_DAYS
        else:
            days = BEREAVEMENT_EXTENDED_FAMILY_DAYS
        # The grant counts the start date itself.
        return start + timedelta(days=days - 1)

    def mark_requires_travel(self) -> Outcome:
        if self.requires_travel:
            return Outcome.refused("Travel already accounted for")
        self.requires_travel = True
        self.end_date += timedelta(days=BEREAVEMENT_TRAVEL_DAYS)
        self.add_note(f"Travel required: +{BEREAVEMENT_TRAVEL_DAYS} days")
        return Outcome.success()


class UnpaidLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.UNPAID] = LeaveType.UNPAID
    reason: str = ""
    approval_workflow: ApprovalWorkflow = Field(default_factory=ApprovalWorkflow)

    def add_approval(self, approver_name: str, role: str, approved: bool, comments: str | None = None) -> None:
        self.approval_workflow.add_approval(approver_name, role, approved, comments)
        action = "approved" if approved else "rejected"
        self.add_note(f"{role} {action}: {comments if comments is not None else 'No comments'}", approver_name)

    def has_all_approvals(self) -> bool:
        return self.approval_workflow.is_fully_approved(self.calculate_leave_days())

    def exceeds_max_duration(self) -> bool:
        return self.calculate_leave_days() > UNPAID_MAX_DAYS

    def approve(self, approver_name: str) -> Outcome:
        if not self.has_all_approvals():
            logger.info("Request %d: approval by %s ignored, sign-off incomplete", self.request_id, approver_name)
            return Outcome.refused("Required approvals have not been obtained")
        return super().approve(approver_name)


class StudyLeaveRequest(_LeaveRequestBase):
    leave_type: Literal[LeaveType.STUDY] = LeaveType.STUDY
    course_name: str
    institution_name: str
    is_company_sponsored: bool = False
    is_job_related: bool = False

    def mark_as_company_sponsored(self) -> None:
        self.is_company_sponsored = True

    def mark_as_job_related(self) -> None:
        self.is_job_related = True

    def is_paid(self) -> bool:
        return self.is_company_sponsored or self.is_job_related


LeaveRequest = Annotated[
    SickLeaveRequest
    | VacationLeaveRequest
    | MaternityLeaveRequest
    | PaternityLeaveRequest
    | BereavementLeaveRequest
    | UnpaidLeaveRequest
    | StudyLeaveRequest,
    Field(discriminator="leave_type"),
]

leave_request_adapter: TypeAdapter[LeaveRequest] = TypeAdapter(LeaveRequest)


# ---------------------------------------------------------------------------
# Leave policy
# ---------------------------------------------------------------------------


def requires_documentation(request: LeaveRequest) -> bool:
    """Whether supporting documents are needed for this request."""
    days = request.calculate_leave_days()
    match request:
        case SickLeaveRequest():
            return days > SICK_DAYS_REQUIRING_CERTIFICATE or request.is_hospitalized
        case VacationLeaveRequest():
            return False
        case UnpaidLeaveRequest():
            return days > UNPAID_DAYS_REQUIRING_DOCUMENTATION
        case MaternityLeaveRequest() | PaternityLeaveRequest() | BereavementLeaveRequest() | StudyLeaveRequest():
            return True
        case _:
            assert_never(request)


def is_eligible(request: LeaveRequest) -> bool:
    """Whether the request satisfies the rules of its leave type."""
    days = request.calculate_leave_days()
    match request:
        case SickLeaveRequest():
            return not requires_documentation(request) or request.has_medical_certificate()
        case VacationLeaveRequest():
            return days <= VACATION_MAX_CONSECUTIVE_DAYS
        case PaternityLeaveRequest():
            return request.is_within_valid_period()
        case UnpaidLeaveRequest():
            return days <= UNPAID_MAX_DAYS and request.has_all_approvals()
        case StudyLeaveRequest():
            return days <= STUDY_MAX_DAYS or request.is_company_sponsored
        case MaternityLeaveRequest() | BereavementLeaveRequest():
            return True
        case _:
            assert_never(request)
