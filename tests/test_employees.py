"""Tests for the Employee model and the employee endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

import pytest
from pydantic import ValidationError

from leavetrack.models.employee import ContactInfo, Employee

if TYPE_CHECKING:
    from httpx import AsyncClient

HEADERS = {"X-Actor": "Admin Alice"}


def _employee(**overrides: Any) -> Employee:
    data: dict[str, Any] = {
        "employee_id": 1,
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice@company.com",
        "department": "Engineering",
        "hire_date": date(2020, 3, 15),
    }
    data.update(overrides)
    return Employee(**data)


def _employee_payload(employee_id: int = 1, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "employee_id": employee_id,
        "first_name": "Bob",
        "last_name": "Smith",
        "email": "bob@company.com",
        "department": "Marketing",
        "hire_date": "2018-08-01",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


def test_employee_owns_a_leave_balance() -> None:
    employee = _employee()
    assert employee.leave_balance.hire_date == date(2020, 3, 15)
    assert employee.leave_balance.allotted("Sick") == 10


def test_each_employee_gets_its_own_balance() -> None:
    alice = _employee()
    bob = _employee(employee_id=2)
    alice.leave_balance.deduct("Vacation", 5)
    assert bob.leave_balance.used("Vacation") == 0


def test_full_name_and_str() -> None:
    employee = _employee()
    assert employee.full_name == "Alice Johnson"
    assert str(employee) == "Employee[1] Alice Johnson (Engineering)"


def test_tenure() -> None:
    employee = _employee()
    assert employee.tenure_years(date(2025, 3, 14)) == 4
    assert employee.tenure_years(date(2025, 3, 15)) == 5
    assert employee.tenure_months(date(2020, 5, 20)) == 2


def test_employee_id_is_immutable() -> None:
    employee = _employee()
    with pytest.raises(ValidationError):
        employee.employee_id = 99  # type: ignore[misc]
    assert employee.employee_id == 1


@pytest.mark.parametrize("field", ["first_name", "last_name", "email", "department"])
@pytest.mark.parametrize("value", ["", "   "])
def test_blank_text_rejected_at_construction(field: str, value: str) -> None:
    with pytest.raises(ValidationError):
        _employee(**{field: value})


@pytest.mark.parametrize(
    ("setter", "field"),
    [
        ("set_first_name", "first_name"),
        ("set_last_name", "last_name"),
        ("set_email", "email"),
        ("set_department", "department"),
    ],
)
def test_setter_accepts_valid_value(setter: str, field: str) -> None:
    employee = _employee()
    outcome = getattr(employee, setter)("Updated")
    assert outcome.ok
    assert getattr(employee, field) == "Updated"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_setter_value_is_refused_and_prior_value_kept(value: str) -> None:
    employee = _employee()
    outcome = employee.set_department(value)
    assert not outcome
    assert outcome.message == "Department cannot be empty"
    assert employee.department == "Engineering"


def test_contact_info_emergency_contact() -> None:
    contact = ContactInfo(phone="+1-555-0101", address="123 Tech Street")
    assert not contact.has_emergency_contact()
    contact.set_emergency_contact("John Johnson", "+1-555-0102")
    assert contact.has_emergency_contact()


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


async def test_create_employee(async_client: AsyncClient) -> None:
    resp = await async_client.post("/employees", json=_employee_payload(), headers=HEADERS)
    assert resp.status_code == 201
    data = resp.json()
    assert data["employee_id"] == 1
    assert data["full_name"] == "Bob Smith"
    assert data["has_emergency_contact"] is False


async def test_create_employee_with_contact_info(async_client: AsyncClient) -> None:
    payload = _employee_payload(
        contact_info={
            "phone": "+1-555-0101",
            "address": "1 Main St",
            "emergency_contact_name": "Sarah Smith",
            "emergency_contact_phone": "+1-555-0200",
        }
    )
    resp = await async_client.post("/employees", json=payload, headers=HEADERS)
    assert resp.status_code == 201
    assert resp.json()["has_emergency_contact"] is True


async def test_create_employee_requires_actor(async_client: AsyncClient) -> None:
    resp = await async_client.post("/employees", json=_employee_payload())
    assert resp.status_code == 401
    assert resp.json()["error"] == "AppError"


async def test_create_duplicate_employee_conflicts(async_client: AsyncClient) -> None:
    await async_client.post("/employees", json=_employee_payload(), headers=HEADERS)
    resp = await async_client.post("/employees", json=_employee_payload(), headers=HEADERS)
    assert resp.status_code == 409


async def test_create_employee_blank_name_is_422(async_client: AsyncClient) -> None:
    resp = await async_client.post("/employees", json=_employee_payload(first_name=""), headers=HEADERS)
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


async def test_create_employee_whitespace_text_is_422(async_client: AsyncClient) -> None:
    payload = _employee_payload(first_name="   ", last_name=" ", email="\t", department="  ")
    resp = await async_client.post("/employees", json=payload, headers=HEADERS)
    assert resp.status_code == 422
    assert (await async_client.get("/employees")).json()["total"] == 0


async def test_get_employee(async_client: AsyncClient) -> None:
    await async_client.post("/employees", json=_employee_payload(7), headers=HEADERS)
    resp = await async_client.get("/employees/7")
    assert resp.status_code == 200
    assert resp.json()["department"] == "Marketing"


async def test_get_employee_not_found(async_client: AsyncClient) -> None:
    resp = await async_client.get("/employees/404")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Employee not found"


async def test_list_employees_ordered_by_id(async_client: AsyncClient) -> None:
    await async_client.post("/employees", json=_employee_payload(3), headers=HEADERS)
    await async_client.post("/employees", json=_employee_payload(1), headers=HEADERS)
    resp = await async_client.get("/employees")
    data = resp.json()
    assert data["total"] == 2
    assert [e["employee_id"] for e in data["items"]] == [1, 3]


async def test_get_balances(async_client: AsyncClient) -> None:
    await async_client.post("/employees", json=_employee_payload(hire_date="2024-01-01"), headers=HEADERS)
    resp = await async_client.get("/employees/1/balances")
    assert resp.status_code == 200
    data = resp.json()
    by_type = {item["leave_type"]: item for item in data["items"]}
    assert by_type["Vacation"]["allotted_days"] == 15
    assert by_type["Vacation"]["remaining_days"] == 15
    assert by_type["Maternity"]["allotted_days"] == 84
    assert data["total"] == 6


async def test_reset_balances(async_client: AsyncClient) -> None:
    await async_client.post("/employees", json=_employee_payload(), headers=HEADERS)
    resp = await async_client.post("/employees/1/balances/reset", headers=HEADERS)
    assert resp.status_code == 200
    assert all(item["used_days"] == 0 for item in resp.json()["items"])
