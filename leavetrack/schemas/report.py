from __future__ import annotations

from pydantic import BaseModel


class ReportEntry(BaseModel):
    """One row of the leave report."""

    request_id: int
    employee_name: str
    leave_type: str
    days: int
    status: str


class LeaveReportResponse(BaseModel):
    """Leave report rows, longest leave first."""

    items: list[ReportEntry]
    total: int
    total_days: int
