from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, TypeVar

from leavetrack.exceptions import AppError
from leavetrack.models.enums import LeaveStatus, LeaveType
from leavetrack.models.request import (
    BereavementLeaveRequest,
    MaternityLeaveRequest,
    SickLeaveRequest,
    StudyLeaveRequest,
    UnpaidLeaveRequest,
    VacationLeaveRequest,
    leave_request_adapter,
)
from leavetrack.schemas.request import (
    RequestListResponse,
    RequestResponse,
    StatusChangeResponse,
    StatusHistoryResponse,
)
from leavetrack.services.employee import get_employee_or_404

if TYPE_CHECKING:
    from leavetrack.models.request import LeaveRequest
    from leavetrack.schemas.request import (
        ApprovalPayload,
        CertificatePayload,
        ExtensionPayload,
        RejectPayload,
        SubmitLeavePayload,
        TravelDetailsPayload,
    )

logger = logging.getLogger(__name__)

_RequestT = TypeVar("_RequestT")

# Leave types whose length the employee chooses are charged against the balance
# on approval. Fixed-length grants (maternity, paternity, bereavement) and unpaid
# leave are not.
_CHARGED_TYPES = frozenset({LeaveType.VACATION, LeaveType.SICK, LeaveType.STUDY})

# Fields shown at the top level of a response; everything else is a variant detail.
_COMMON_FIELDS = {
    "request_id",
    "employee_id",
    "leave_type",
    "start_date",
    "end_date",
    "status",
    "rejection_reason",
    "request_date",
    "status_history",
    "charged_days",
    "charge_period",
}


class InMemoryLeaveRequestStore:
    """Process-local store of leave requests keyed by request id."""

    def __init__(self, first_id: int = 1) -> None:
        self._requests: dict[int, LeaveRequest] = {}
        self._ids = itertools.count(first_id)

    def next_id(self) -> int:
        return next(self._ids)

    def add(self, request: LeaveRequest) -> None:
        self._requests[request.request_id] = request

    def get(self, request_id: int) -> LeaveRequest | None:
        return self._requests.get(request_id)

    def all_requests(self) -> list[LeaveRequest]:
        return list(self._requests.values())


_request_store = InMemoryLeaveRequestStore()


def get_request_store() -> InMemoryLeaveRequestStore:
    """Return the active request store."""
    return _request_store


def set_request_store(store: InMemoryLeaveRequestStore) -> None:
    """Override the store (for testing)."""
    global _request_store
    _request_store = store


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_request_response(request: LeaveRequest) -> RequestResponse:
    """Map a request model to its response schema."""
    return RequestResponse(
        request_id=request.request_id,
        employee_id=request.employee_id,
        leave_type=request.leave_type,
        start_date=request.start_date,
        end_date=request.end_date,
        leave_days=request.calculate_leave_days(),
        status=request.status,
        status_label=request.status_label,
        rejection_reason=request.rejection_reason,
        request_date=request.request_date,
        is_eligible=request.is_eligible(),
        requires_documentation=request.requires_documentation(),
        details=request.model_dump(mode="json", exclude=_COMMON_FIELDS),
    )


def _get_request_or_404(request_id: int) -> LeaveRequest:
    request = get_request_store().get(request_id)
    if request is None:
        raise AppError("Request not found", status_code=404)
    return request


def _get_variant_or_409(request_id: int, variant: type[_RequestT]) -> _RequestT:
    """Fetch a request and require a specific leave type."""
    request = _get_request_or_404(request_id)
    if not isinstance(request, variant):
        raise AppError(
            f"Request {request_id} is {request.display_type}, not applicable to this action",
            status_code=409,
        )
    return request


def sort_by_duration(requests: list[LeaveRequest]) -> list[LeaveRequest]:
    """Longest leave first; ties keep request id order."""
    return sorted(requests, key=lambda r: (-r.calculate_leave_days(), r.request_id))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def submit_request(payload: SubmitLeavePayload) -> RequestResponse:
    """Create a pending leave request for an existing employee."""
    get_employee_or_404(payload.employee_id)
    store = get_request_store()

    data = payload.model_dump()
    data["request_id"] = store.next_id()
    request = leave_request_adapter.validate_python(data)
    store.add(request)

    logger.info(
        "Submitted request %d: %s for employee %d (%d days)",
        request.request_id,
        request.display_type,
        request.employee_id,
        request.calculate_leave_days(),
    )
    return _build_request_response(request)


def get_request(request_id: int) -> RequestResponse:
    return _build_request_response(_get_request_or_404(request_id))


def list_requests(
    employee_id: int | None = None,
    status_filter: LeaveStatus | None = None,
) -> RequestListResponse:
    """List requests with optional filters, longest leave first."""
    requests = get_request_store().all_requests()
    if employee_id is not None:
        requests = [r for r in requests if r.employee_id == employee_id]
    if status_filter is not None:
        requests = [r for r in requests if r.status == status_filter]
    items = [_build_request_response(r) for r in sort_by_duration(requests)]
    return RequestListResponse(items=items, total=len(items))


def get_status_history(request_id: int) -> StatusHistoryResponse:
    request = _get_request_or_404(request_id)
    items = [
        StatusChangeResponse(
            changed_by=change.changed_by,
            from_status=change.from_status,
            to_status=change.to_status,
            notes=change.notes,
            timestamp=change.timestamp,
        )
        for change in request.status_history.entries()
    ]
    return StatusHistoryResponse(request_id=request_id, items=items, total=len(items))


def approve_request(request_id: int, actor: str) -> RequestResponse:
    """Approve a request and charge its days against the employee's balance.

    Only vacation, sick and study leave are charged. An approval that the
    request itself refuses, or that would overdraw the balance, leaves
    everything unchanged.
    """
    request = _get_request_or_404(request_id)
    if request.status == LeaveStatus.APPROVED:
        raise AppError("Request is already approved", status_code=409)

    balance = get_employee_or_404(request.employee_id).leave_balance
    days = request.calculate_leave_days()
    charged = request.leave_type in _CHARGED_TYPES

    if charged and not balance.can_deduct(request.leave_type, days):
        raise AppError(
            f"Insufficient {request.leave_type} balance: {balance.balance(request.leave_type)} days remaining",
            status_code=400,
        )

    outcome = request.approve(actor)
    if not outcome:
        raise AppError.from_outcome(outcome)

    if charged and balance.deduct(request.leave_type, days):
        request.charged_days = days
        request.charge_period = balance.period
    return _build_request_response(request)


def reject_request(request_id: int, actor: str, payload: RejectPayload) -> RequestResponse:
    """Reject a request, refunding days its approval charged in the current leave year."""
    request = _get_request_or_404(request_id)
    was_approved = request.status == LeaveStatus.APPROVED

    request.reject(actor, payload.reason)

    if was_approved and request.charge_period is not None:
        balance = get_employee_or_404(request.employee_id).leave_balance
        if request.charge_period == balance.period:
            refunded = balance.refund(request.leave_type, request.charged_days)
            logger.info("Refunded %d %s days for request %d", refunded, request.leave_type, request_id)
        else:
            logger.info("Request %d was charged in an earlier leave year, no refund", request_id)
        request.charged_days = 0
        request.charge_period = None
    return _build_request_response(request)


# ---------------------------------------------------------------------------
# Variant actions
# ---------------------------------------------------------------------------


def attach_certificate(request_id: int, payload: CertificatePayload) -> RequestResponse:
    request = _get_variant_or_409(request_id, SickLeaveRequest)
    request.attach_medical_certificate(payload.doctor_name, payload.hospital_name, payload.diagnosis)
    return _build_request_response(request)


def mark_hospitalized(request_id: int) -> RequestResponse:
    request = _get_variant_or_409(request_id, SickLeaveRequest)
    request.mark_as_hospitalized()
    return _build_request_response(request)


def set_travel_details(request_id: int, payload: TravelDetailsPayload) -> RequestResponse:
    request = _get_variant_or_409(request_id, VacationLeaveRequest)
    details = request.set_travel_details(
        payload.destination,
        payload.accommodation_type,
        payload.emergency_contact_name,
        payload.emergency_contact_phone,
    )
    if payload.is_international:
        details.mark_as_international()
    return _build_request_response(request)


def request_extension(request_id: int, payload: ExtensionPayload) -> RequestResponse:
    request = _get_variant_or_409(request_id, MaternityLeaveRequest)
    if not request.request_extension(payload.weeks):
        raise AppError("Extension refused: one extension of 1 to 4 weeks is allowed", status_code=409)
    return _build_request_response(request)


def mark_requires_travel(request_id: int) -> RequestResponse:
    request = _get_variant_or_409(request_id, BereavementLeaveRequest)
    outcome = request.mark_requires_travel()
    if not outcome:
        raise AppError.from_outcome(outcome)
    return _build_request_response(request)


def add_approval(request_id: int, actor: str, payload: ApprovalPayload) -> RequestResponse:
    request = _get_variant_or_409(request_id, UnpaidLeaveRequest)
    request.add_approval(actor, payload.role, payload.approved, payload.comments)
    return _build_request_response(request)


def mark_company_sponsored(request_id: int) -> RequestResponse:
    request = _get_variant_or_409(request_id, StudyLeaveRequest)
    request.mark_as_company_sponsored()
    return _build_request_response(request)


def mark_job_related(request_id: int) -> RequestResponse:
    request = _get_variant_or_409(request_id, StudyLeaveRequest)
    request.mark_as_job_related()
    return _build_request_response(request)
