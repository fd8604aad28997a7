from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Outcome(BaseModel):
    """Result of a mutation that may be refused.

    A refused mutation leaves the target unchanged. Truthiness follows ``ok``
    so callers can write ``if request.approve(actor): ...``.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str | None = None) -> Outcome:
        return cls(ok=True, message=message)

    @classmethod
    def refused(cls, message: str) -> Outcome:
        return cls(ok=False, message=message)
