# ruff: noqa: TC003
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from leavetrack.models.base import _now_utc


class StatusChange(BaseModel):
    """Immutable record of one status transition or note on a request."""

    model_config = ConfigDict(frozen=True)

    changed_by: str
    from_status: str
    to_status: str
    notes: str | None = None
    timestamp: datetime = Field(default_factory=_now_utc)

    def __str__(self) -> str:
        base = f"[{self.timestamp.date()}] {self.changed_by}: {self.from_status} -> {self.to_status}"
        return f"{base} ({self.notes})" if self.notes is not None else base


class StatusHistory(BaseModel):
    """Append-only log of status changes owned by a single request."""

    changes: list[StatusChange] = Field(default_factory=list)

    def add_change(self, changed_by: str, from_status: str, to_status: str, notes: str | None = None) -> StatusChange:
        change = StatusChange(changed_by=changed_by, from_status=from_status, to_status=to_status, notes=notes)
        self.changes.append(change)
        return change

    def entries(self) -> list[StatusChange]:
        """A copy of the recorded changes, oldest first."""
        return list(self.changes)

    def latest(self) -> StatusChange | None:
        return self.changes[-1] if self.changes else None

    def __len__(self) -> int:
        return len(self.changes)
