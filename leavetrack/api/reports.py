# ruff: noqa: B008
from __future__ import annotations

from fastapi import APIRouter, Query

from leavetrack.models.enums import LeaveStatus
from leavetrack.schemas.report import LeaveReportResponse
from leavetrack.services import report as report_service

reports_router = APIRouter(prefix="/reports", tags=["reports"])


@reports_router.get("/requests", response_model=LeaveReportResponse)
async def leave_report(
    employee_id: int | None = Query(default=None),
    status_filter: LeaveStatus | None = Query(default=None, alias="status"),
) -> LeaveReportResponse:
    """Leave report rows across all requests, longest first."""
    return report_service.build_leave_report(employee_id=employee_id, status_filter=status_filter)
