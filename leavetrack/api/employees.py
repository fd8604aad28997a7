from __future__ import annotations

from fastapi import APIRouter, status

from leavetrack.api.deps import ActorDep
from leavetrack.schemas.employee import (
    BalanceListResponse,
    CreateEmployeeRequest,
    EmployeeListResponse,
    EmployeeResponse,
)
from leavetrack.services import employee as employee_service

employees_router = APIRouter(prefix="/employees", tags=["employees"])


@employees_router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: CreateEmployeeRequest, actor: ActorDep) -> EmployeeResponse:
    """Register an employee."""
    return employee_service.create_employee(payload)


@employees_router.get("", response_model=EmployeeListResponse)
async def list_employees() -> EmployeeListResponse:
    """List all employees."""
    return employee_service.list_employees()


@employees_router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: int) -> EmployeeResponse:
    """Get one employee."""
    return employee_service.get_employee(employee_id)


@employees_router.get("/{employee_id}/balances", response_model=BalanceListResponse)
async def get_balances(employee_id: int) -> BalanceListResponse:
    """Get the employee's leave balances per leave type."""
    return employee_service.get_balances(employee_id)


@employees_router.post("/{employee_id}/balances/reset", response_model=BalanceListResponse)
async def reset_balances(employee_id: int, actor: ActorDep) -> BalanceListResponse:
    """Start a new leave year: recompute allotments and clear usage."""
    return employee_service.reset_balances(employee_id)
