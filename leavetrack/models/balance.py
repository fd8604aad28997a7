# ruff: noqa: TC003
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from leavetrack.models.base import _today, completed_years
from leavetrack.models.enums import LeaveType
from leavetrack.models.outcome import Outcome

logger = logging.getLogger(__name__)

BASE_VACATION_DAYS = 15
BONUS_DAYS_PER_5_YEARS = 5

# Unpaid leave carries no allotment.
_FIXED_ALLOTMENTS: dict[str, int] = {
    LeaveType.SICK.value: 10,
    LeaveType.STUDY.value: 10,
    LeaveType.BEREAVEMENT.value: 10,
    LeaveType.MATERNITY.value: 84,
    LeaveType.PATERNITY.value: 10,
}


class LeaveBalance(BaseModel):
    """Allotted and used leave days per leave type for one employee.

    Owned by an ``Employee`` and created from its hire date. The remaining
    balance of a type is always ``allotted - used`` and never negative.
    """

    hire_date: date
    allotted_days: dict[str, int] = Field(default_factory=dict)
    used_days: dict[str, int] = Field(default_factory=dict)
    # Leave year counter, incremented by each annual reset.
    period: int = 0

    def model_post_init(self, context: Any, /) -> None:
        if not self.allotted_days:
            self._initialize_balances(_today())

    def _initialize_balances(self, as_of: date) -> None:
        allotted = {LeaveType.VACATION.value: BASE_VACATION_DAYS + self.tenure_bonus(as_of)}
        allotted.update(_FIXED_ALLOTMENTS)
        self.allotted_days = allotted
        self.used_days = dict.fromkeys(allotted, 0)

    def tenure_bonus(self, as_of: date | None = None) -> int:
        """Extra vacation days earned per completed 5 years of tenure."""
        years = completed_years(self.hire_date, as_of or _today())
        return (years // 5) * BONUS_DAYS_PER_5_YEARS

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def allotted(self, leave_type: str) -> int:
        return self.allotted_days.get(leave_type, 0)

    def used(self, leave_type: str) -> int:
        return self.used_days.get(leave_type, 0)

    def balance(self, leave_type: str) -> int:
        """Remaining days for ``leave_type``; 0 for an unknown type."""
        return self.allotted(leave_type) - self.used(leave_type)

    def has_allotment(self, leave_type: str) -> bool:
        return leave_type in self.allotted_days

    def can_deduct(self, leave_type: str, days: int) -> bool:
        return self.has_allotment(leave_type) and 0 <= days <= self.balance(leave_type)

    def summary(self) -> dict[str, tuple[int, int]]:
        """Map each leave type to ``(remaining, allotted)``."""
        return {leave_type: (self.balance(leave_type), total) for leave_type, total in self.allotted_days.items()}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def deduct(self, leave_type: str, days: int) -> bool:
        """Record ``days`` as used. Refused without change if it would overdraw."""
        if not self.can_deduct(leave_type, days):
            logger.info(
                "Refused deduction of %d %s days: %d remaining",
                days,
                leave_type,
                self.balance(leave_type),
            )
            return False
        self.used_days[leave_type] = self.used(leave_type) + days
        return True

    def refund(self, leave_type: str, days: int) -> int:
        """Give back used days, never taking ``used`` below zero.

        Returns the number of days actually restored.
        """
        current = self.used(leave_type)
        restored = min(current, max(days, 0))
        if leave_type in self.used_days:
            self.used_days[leave_type] = current - restored
        return restored

    def set_allotment(self, leave_type: str, days: int) -> Outcome:
        if days < 0:
            logger.warning("Rejected negative allotment %d for %s", days, leave_type)
            return Outcome.refused("Leave balance cannot be negative")
        self.allotted_days[leave_type] = days
        self.used_days.setdefault(leave_type, 0)
        return Outcome.success()

    def reset_annual_balances(self, as_of: date | None = None) -> None:
        """Start a new leave year: recompute allotments and clear usage."""
        self._initialize_balances(as_of or _today())
        self.period += 1
        logger.info("Leave balances reset for hire date %s", self.hire_date)
