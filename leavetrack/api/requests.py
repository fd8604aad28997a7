# ruff: noqa: B008
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Query, status

from leavetrack.api.deps import ActorDep
from leavetrack.models.enums import LeaveStatus
from leavetrack.schemas.request import (
    ApprovalPayload,
    CertificatePayload,
    ExtensionPayload,
    RejectPayload,
    RequestListResponse,
    RequestResponse,
    StatusHistoryResponse,
    SubmitLeavePayload,
    TravelDetailsPayload,
)
from leavetrack.services import request as request_service

requests_router = APIRouter(prefix="/requests", tags=["requests"])


@requests_router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_request(
    payload: Annotated[SubmitLeavePayload, Body()],
    actor: ActorDep,
) -> RequestResponse:
    """Submit a new leave request."""
    return request_service.submit_request(payload)


@requests_router.get("", response_model=RequestListResponse)
async def list_requests(
    employee_id: int | None = Query(default=None),
    status_filter: LeaveStatus | None = Query(default=None, alias="status"),
) -> RequestListResponse:
    """List leave requests, longest first."""
    return request_service.list_requests(employee_id, status_filter)


@requests_router.get("/{request_id}", response_model=RequestResponse)
async def get_request(request_id: int) -> RequestResponse:
    """Get a single leave request."""
    return request_service.get_request(request_id)


@requests_router.get("/{request_id}/history", response_model=StatusHistoryResponse)
async def get_status_history(request_id: int) -> StatusHistoryResponse:
    """Get the status history of a request."""
    return request_service.get_status_history(request_id)


@requests_router.post("/{request_id}/approve", response_model=RequestResponse)
async def approve_request(request_id: int, actor: ActorDep) -> RequestResponse:
    """Approve a leave request."""
    return request_service.approve_request(request_id, actor)


@requests_router.post("/{request_id}/reject", response_model=RequestResponse)
async def reject_request(request_id: int, payload: RejectPayload, actor: ActorDep) -> RequestResponse:
    """Reject a leave request with a reason."""
    return request_service.reject_request(request_id, actor, payload)


# ---------------------------------------------------------------------------
# Variant actions
# ---------------------------------------------------------------------------


@requests_router.post("/{request_id}/certificate", response_model=RequestResponse)
async def attach_certificate(request_id: int, payload: CertificatePayload, actor: ActorDep) -> RequestResponse:
    """Attach a medical certificate to a sick leave request."""
    return request_service.attach_certificate(request_id, payload)


@requests_router.post("/{request_id}/hospitalization", response_model=RequestResponse)
async def mark_hospitalized(request_id: int, actor: ActorDep) -> RequestResponse:
    """Mark a sick leave request as involving hospitalization."""
    return request_service.mark_hospitalized(request_id)


@requests_router.post("/{request_id}/travel-details", response_model=RequestResponse)
async def set_travel_details(request_id: int, payload: TravelDetailsPayload, actor: ActorDep) -> RequestResponse:
    """Set travel details on a vacation request."""
    return request_service.set_travel_details(request_id, payload)


@requests_router.post("/{request_id}/extension", response_model=RequestResponse)
async def request_extension(request_id: int, payload: ExtensionPayload, actor: ActorDep) -> RequestResponse:
    """Extend a maternity leave request."""
    return request_service.request_extension(request_id, payload)


@requests_router.post("/{request_id}/travel", response_model=RequestResponse)
async def mark_requires_travel(request_id: int, actor: ActorDep) -> RequestResponse:
    """Mark a bereavement request as requiring travel."""
    return request_service.mark_requires_travel(request_id)


@requests_router.post("/{request_id}/approvals", response_model=RequestResponse)
async def add_approval(request_id: int, payload: ApprovalPayload, actor: ActorDep) -> RequestResponse:
    """Record a sign-off decision on an unpaid leave request."""
    return request_service.add_approval(request_id, actor, payload)


@requests_router.post("/{request_id}/sponsorship", response_model=RequestResponse)
async def mark_company_sponsored(request_id: int, actor: ActorDep) -> RequestResponse:
    """Mark a study leave request as company sponsored."""
    return request_service.mark_company_sponsored(request_id)


@requests_router.post("/{request_id}/job-related", response_model=RequestResponse)
async def mark_job_related(request_id: int, actor: ActorDep) -> RequestResponse:
    """Mark a study leave request as job related."""
    return request_service.mark_job_related(request_id)
