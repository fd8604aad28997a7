"""Reporting service: leave report rows across all requests."""

from __future__ import annotations

from leavetrack.models.enums import LeaveStatus
from leavetrack.schemas.report import LeaveReportResponse, ReportEntry
from leavetrack.services.employee import get_employee_directory
from leavetrack.services.request import get_request_store, sort_by_duration


def build_leave_report(
    *,
    employee_id: int | None = None,
    status_filter: LeaveStatus | None = None,
) -> LeaveReportResponse:
    """One row per request, longest leave first.

    Requests whose employee is no longer in the directory are reported under
    ``Employee #<id>``.
    """
    directory = get_employee_directory()
    requests = get_request_store().all_requests()
    if employee_id is not None:
        requests = [r for r in requests if r.employee_id == employee_id]
    if status_filter is not None:
        requests = [r for r in requests if r.status == status_filter]

    items: list[ReportEntry] = []
    for request in sort_by_duration(requests):
        employee = directory.get_employee(request.employee_id)
        items.append(
            ReportEntry(
                request_id=request.request_id,
                employee_name=employee.full_name if employee else f"Employee #{request.employee_id}",
                leave_type=request.display_type,
                days=request.calculate_leave_days(),
                status=request.status_label,
            )
        )

    return LeaveReportResponse(
        items=items,
        total=len(items),
        total_days=sum(item.days for item in items),
    )
