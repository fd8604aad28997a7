from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from leavetrack.config import get_settings
from leavetrack.services.employee import get_employee_directory
from leavetrack.services.request import get_request_store

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok"]
    version: str
    environment: str
    employees: int
    requests: int


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    return HealthResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        employees=len(get_employee_directory().list_employees()),
        requests=len(get_request_store().all_requests()),
    )
