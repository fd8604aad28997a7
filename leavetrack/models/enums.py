from __future__ import annotations

import enum


class LeaveType(enum.StrEnum):
    """Fixed vocabulary of leave categories, also used as balance keys."""

    SICK = "Sick"
    VACATION = "Vacation"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"
    BEREAVEMENT = "Bereavement"
    UNPAID = "Unpaid"
    STUDY = "Study"

    @property
    def display_name(self) -> str:
        return f"{self.value} Leave"


class LeaveStatus(enum.StrEnum):
    """State of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ApprovalRole(enum.StrEnum):
    """Roles whose sign-off opens an approval gate."""

    MANAGER = "Manager"
    HR = "HR"
