"""Unit tests for the request payload schemas."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import TypeAdapter, ValidationError

from leavetrack.models.enums import LeaveType
from leavetrack.schemas.employee import CreateEmployeeRequest
from leavetrack.schemas.request import (
    ApprovalPayload,
    RejectPayload,
    SubmitBereavementLeave,
    SubmitLeavePayload,
    SubmitMaternityLeave,
    SubmitSickLeave,
    SubmitStudyLeave,
)

_adapter: TypeAdapter[SubmitLeavePayload] = TypeAdapter(SubmitLeavePayload)

# ---------------------------------------------------------------------------
# SubmitLeavePayload
# ---------------------------------------------------------------------------


def test_submit_payload_dispatches_on_leave_type() -> None:
    payload = _adapter.validate_python(
        {"leave_type": "Sick", "employee_id": 1, "start_date": "2025-02-03", "end_date": "2025-02-04"}
    )
    assert isinstance(payload, SubmitSickLeave)
    assert payload.leave_type == LeaveType.SICK
    assert payload.illness_description == ""


def test_submit_payload_rejects_unknown_leave_type() -> None:
    with pytest.raises(ValidationError):
        _adapter.validate_python(
            {"leave_type": "Sabbatical", "employee_id": 1, "start_date": "2025-02-03", "end_date": "2025-02-04"}
        )


def test_submit_payload_rejects_end_before_start() -> None:
    with pytest.raises(ValidationError, match="end_date must not be before start_date"):
        SubmitSickLeave(
            leave_type=LeaveType.SICK,
            employee_id=1,
            start_date=date(2025, 2, 5),
            end_date=date(2025, 2, 4),
        )


def test_single_day_request_is_valid() -> None:
    payload = SubmitSickLeave(
        leave_type=LeaveType.SICK,
        employee_id=1,
        start_date=date(2025, 2, 3),
        end_date=date(2025, 2, 3),
    )
    assert payload.start_date == payload.end_date


def test_fixed_length_leave_has_no_end_date() -> None:
    payload = SubmitMaternityLeave(
        leave_type=LeaveType.MATERNITY,
        employee_id=1,
        start_date=date(2025, 8, 1),
        expected_delivery_date=date(2025, 8, 22),
    )
    assert "end_date" not in payload.model_dump()


def test_bereavement_relationship_required() -> None:
    with pytest.raises(ValidationError):
        SubmitBereavementLeave(
            leave_type=LeaveType.BEREAVEMENT,
            employee_id=1,
            start_date=date(2025, 4, 7),
            relationship_to_deceased="",
        )


def test_study_requires_course_and_institution() -> None:
    with pytest.raises(ValidationError):
        _adapter.validate_python(
            {
                "leave_type": "Study",
                "employee_id": 1,
                "start_date": "2025-09-01",
                "end_date": "2025-09-05",
                "course_name": "Data Engineering",
            }
        )
    payload = _adapter.validate_python(
        {
            "leave_type": "Study",
            "employee_id": 1,
            "start_date": "2025-09-01",
            "end_date": "2025-09-05",
            "course_name": "Data Engineering",
            "institution_name": "Tech University",
        }
    )
    assert isinstance(payload, SubmitStudyLeave)


# ---------------------------------------------------------------------------
# Action payloads
# ---------------------------------------------------------------------------


def test_reject_payload_requires_reason() -> None:
    with pytest.raises(ValidationError):
        RejectPayload(reason="")


def test_approval_payload_comments_optional() -> None:
    payload = ApprovalPayload(role="HR", approved=True)
    assert payload.comments is None


# ---------------------------------------------------------------------------
# CreateEmployeeRequest
# ---------------------------------------------------------------------------


def test_create_employee_requires_positive_id() -> None:
    with pytest.raises(ValidationError):
        CreateEmployeeRequest(
            employee_id=0,
            first_name="Alice",
            last_name="Johnson",
            email="alice@company.com",
            department="Engineering",
            hire_date=date(2020, 3, 15),
        )


@pytest.mark.parametrize("field", ["first_name", "last_name", "email", "department"])
@pytest.mark.parametrize("value", ["", "   "])
def test_create_employee_rejects_blank_text(field: str, value: str) -> None:
    data = {
        "employee_id": 1,
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice@company.com",
        "department": "Engineering",
        "hire_date": date(2020, 3, 15),
    }
    data[field] = value
    with pytest.raises(ValidationError):
        CreateEmployeeRequest.model_validate(data)
