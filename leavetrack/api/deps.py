# ruff: noqa: B008
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, status

from leavetrack.exceptions import AppError


async def get_actor(x_actor: str | None = Header(default=None)) -> str:
    """Name of the person performing a mutation, from the X-Actor header."""
    if x_actor is None or not x_actor.strip():
        raise AppError("X-Actor header is required", status_code=status.HTTP_401_UNAUTHORIZED)
    return x_actor.strip()


ActorDep = Annotated[str, Depends(get_actor)]
