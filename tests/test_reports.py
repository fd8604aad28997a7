"""Tests for the leave report endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from leavetrack.services.employee import InMemoryEmployeeDirectory, set_employee_directory

if TYPE_CHECKING:
    from httpx import AsyncClient

HEADERS = {"X-Actor": "Admin Alice"}
REPORT_URL = "/reports/requests"


async def _seed(client: AsyncClient) -> list[dict[str, Any]]:
    for employee_id, first, last in [(1, "Alice", "Johnson"), (2, "Bob", "Smith")]:
        await client.post(
            "/employees",
            json={
                "employee_id": employee_id,
                "first_name": first,
                "last_name": last,
                "email": f"{first.lower()}@company.com",
                "department": "Engineering",
                "hire_date": "2024-01-01",
            },
            headers=HEADERS,
        )

    payloads: list[dict[str, Any]] = [
        {"leave_type": "Sick", "employee_id": 1, "start_date": "2025-02-03", "end_date": "2025-02-04"},
        {"leave_type": "Vacation", "employee_id": 2, "start_date": "2025-07-01", "end_date": "2025-07-10"},
        {
            "leave_type": "Bereavement",
            "employee_id": 1,
            "start_date": "2025-04-07",
            "relationship_to_deceased": "cousin",
        },
    ]
    created = []
    for payload in payloads:
        resp = await client.post("/requests", json=payload, headers=HEADERS)
        created.append(resp.json())
    return created


async def test_empty_report(async_client: AsyncClient) -> None:
    resp = await async_client.get(REPORT_URL)
    assert resp.status_code == 200
    assert resp.json() == {"items": [], "total": 0, "total_days": 0}


async def test_report_rows_longest_first(async_client: AsyncClient) -> None:
    await _seed(async_client)

    data = (await async_client.get(REPORT_URL)).json()

    assert data["total"] == 3
    assert data["total_days"] == 15
    rows = [(item["employee_name"], item["leave_type"], item["days"], item["status"]) for item in data["items"]]
    assert rows == [
        ("Bob Smith", "Vacation Leave", 10, "Pending"),
        ("Alice Johnson", "Bereavement Leave", 3, "Pending"),
        ("Alice Johnson", "Sick Leave", 2, "Pending"),
    ]


async def test_report_filters(async_client: AsyncClient) -> None:
    created = await _seed(async_client)
    await async_client.post(
        f"/requests/{created[0]['request_id']}/reject",
        json={"reason": "Duplicate"},
        headers=HEADERS,
    )

    by_employee = (await async_client.get(REPORT_URL, params={"employee_id": 1})).json()
    assert by_employee["total"] == 2

    rejected = (await async_client.get(REPORT_URL, params={"status": "REJECTED"})).json()
    assert rejected["total"] == 1
    assert rejected["items"][0]["status"] == "Rejected: Duplicate"


async def test_report_names_missing_employee_by_id(async_client: AsyncClient) -> None:
    await _seed(async_client)
    set_employee_directory(InMemoryEmployeeDirectory())

    data = (await async_client.get(REPORT_URL)).json()

    assert {item["employee_name"] for item in data["items"]} == {"Employee #1", "Employee #2"}
