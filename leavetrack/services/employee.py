# ruff: noqa: TC003
from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from leavetrack.exceptions import AppError
from leavetrack.models.employee import ContactInfo, Employee
from leavetrack.schemas.employee import (
    BalanceListResponse,
    BalanceResponse,
    EmployeeListResponse,
    EmployeeResponse,
)

if TYPE_CHECKING:
    from leavetrack.schemas.employee import CreateEmployeeRequest

logger = logging.getLogger(__name__)


@runtime_checkable
class EmployeeDirectory(Protocol):
    """Interface for looking up and registering employees."""

    def get_employee(self, employee_id: int) -> Employee | None:
        """Fetch an employee. Returns None if not found."""
        ...

    def list_employees(self) -> list[Employee]:
        """List all employees ordered by id."""
        ...

    def add_employee(self, employee: Employee) -> None:
        """Register an employee, replacing any with the same id."""
        ...


class InMemoryEmployeeDirectory:
    """Process-local employee directory."""

    def __init__(self) -> None:
        self._employees: dict[int, Employee] = {}

    def get_employee(self, employee_id: int) -> Employee | None:
        return self._employees.get(employee_id)

    def list_employees(self) -> list[Employee]:
        return [self._employees[key] for key in sorted(self._employees)]

    def add_employee(self, employee: Employee) -> None:
        self._employees[employee.employee_id] = employee


_employee_directory: EmployeeDirectory = InMemoryEmployeeDirectory()


def get_employee_directory() -> EmployeeDirectory:
    """Return the active employee directory."""
    return _employee_directory


def set_employee_directory(directory: EmployeeDirectory) -> None:
    """Override the directory (for testing or alternative wiring)."""
    global _employee_directory
    _employee_directory = directory


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        employee_id=employee.employee_id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        full_name=employee.full_name,
        email=employee.email,
        department=employee.department,
        hire_date=employee.hire_date,
        tenure_years=employee.tenure_years(),
        has_emergency_contact=employee.contact_info is not None and employee.contact_info.has_emergency_contact(),
    )


def _build_balance_response(employee: Employee) -> BalanceListResponse:
    balance = employee.leave_balance
    items = [
        BalanceResponse(
            leave_type=leave_type,
            allotted_days=allotted,
            used_days=balance.used(leave_type),
            remaining_days=remaining,
        )
        for leave_type, (remaining, allotted) in balance.summary().items()
    ]
    return BalanceListResponse(
        employee_id=employee.employee_id,
        tenure_bonus_days=balance.tenure_bonus(),
        items=items,
        total=len(items),
    )


def get_employee_or_404(employee_id: int) -> Employee:
    employee = get_employee_directory().get_employee(employee_id)
    if employee is None:
        raise AppError("Employee not found", status_code=404)
    return employee


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def create_employee(payload: CreateEmployeeRequest) -> EmployeeResponse:
    """Register a new employee with a fresh leave balance."""
    directory = get_employee_directory()
    if directory.get_employee(payload.employee_id) is not None:
        raise AppError(f"Employee {payload.employee_id} already exists", status_code=409)

    contact_info = None
    if payload.contact_info is not None:
        contact_info = ContactInfo(**payload.contact_info.model_dump())

    employee = Employee(
        employee_id=payload.employee_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        department=payload.department,
        hire_date=payload.hire_date,
        contact_info=contact_info,
    )
    directory.add_employee(employee)
    logger.info("Registered %s", employee)
    return _build_employee_response(employee)


def get_employee(employee_id: int) -> EmployeeResponse:
    return _build_employee_response(get_employee_or_404(employee_id))


def list_employees() -> EmployeeListResponse:
    items = [_build_employee_response(e) for e in get_employee_directory().list_employees()]
    return EmployeeListResponse(items=items, total=len(items))


def get_balances(employee_id: int) -> BalanceListResponse:
    return _build_balance_response(get_employee_or_404(employee_id))


def reset_balances(employee_id: int, as_of: date | None = None) -> BalanceListResponse:
    """Start a new leave year for one employee."""
    employee = get_employee_or_404(employee_id)
    employee.leave_balance.reset_annual_balances(as_of)
    return _build_balance_response(employee)
