# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from leavetrack.models.base import _now_utc
from leavetrack.models.enums import ApprovalRole

# Unpaid leave longer than this also needs HR sign-off.
HR_APPROVAL_THRESHOLD_DAYS = 5


class ApprovalStep(BaseModel):
    """One recorded sign-off decision."""

    model_config = ConfigDict(frozen=True)

    approver_name: str
    role: str
    approved: bool
    comments: str | None = None
    timestamp: datetime = Field(default_factory=_now_utc)

    def __str__(self) -> str:
        decision = "APPROVED" if self.approved else "REJECTED"
        suffix = f" - {self.comments}" if self.comments is not None else ""
        return f"[{self.timestamp.date()}] {self.approver_name} ({self.role}): {decision}{suffix}"


class ApprovalWorkflow(BaseModel):
    """Manager and HR sign-off gates for an unpaid leave request.

    Gates only ever open: a later rejection by the same role does not close a
    gate that an earlier approval opened. The owning request supplies its
    duration when asking whether the workflow is complete.
    """

    steps: list[ApprovalStep] = Field(default_factory=list)
    manager_approved: bool = False
    hr_approved: bool = False

    def add_approval(self, approver_name: str, role: str, approved: bool, comments: str | None = None) -> ApprovalStep:
        step = ApprovalStep(approver_name=approver_name, role=role, approved=approved, comments=comments)
        self.steps.append(step)
        if approved:
            normalized = role.casefold()
            if normalized == ApprovalRole.MANAGER.value.casefold():
                self.manager_approved = True
            elif normalized == ApprovalRole.HR.value.casefold():
                self.hr_approved = True
        return step

    @staticmethod
    def required_roles(leave_days: int) -> list[ApprovalRole]:
        if leave_days > HR_APPROVAL_THRESHOLD_DAYS:
            return [ApprovalRole.MANAGER, ApprovalRole.HR]
        return [ApprovalRole.MANAGER]

    def is_fully_approved(self, leave_days: int) -> bool:
        if leave_days > HR_APPROVAL_THRESHOLD_DAYS:
            return self.manager_approved and self.hr_approved
        return self.manager_approved

    def step_list(self) -> list[ApprovalStep]:
        return list(self.steps)
