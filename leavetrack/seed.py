"""Seed script for development data.

Run against a running API with:  python -m leavetrack.seed
"""

from __future__ import annotations

import asyncio
import sys
from datetime import date, timedelta
from typing import Any

import httpx

BASE_URL = "http://localhost:8000"

HEADERS = {
    "Content-Type": "application/json",
    "X-Actor": "Seed Script",
}

EMPLOYEES = [
    {
        "employee_id": 1,
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice@company.com",
        "department": "Engineering",
        "hire_date": "2020-03-15",
        "contact_info": {
            "phone": "+1-555-0101",
            "address": "123 Tech Street, San Francisco",
            "emergency_contact_name": "John Johnson",
            "emergency_contact_phone": "+1-555-0102",
        },
    },
    {
        "employee_id": 2,
        "first_name": "Bob",
        "last_name": "Smith",
        "email": "bob@company.com",
        "department": "Marketing",
        "hire_date": "2018-08-01",
    },
    {
        "employee_id": 3,
        "first_name": "Carol",
        "last_name": "Williams",
        "email": "carol@company.com",
        "department": "HR",
        "hire_date": "2023-01-10",
    },
]


def _offset(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


async def _safe_post(client: httpx.AsyncClient, path: str, json: dict[str, Any] | None, label: str) -> dict | None:
    resp = await client.post(f"{BASE_URL}{path}", json=json, headers=HEADERS)
    if resp.status_code in (200, 201):
        print(f"  [OK] {label}")
        return resp.json()
    if resp.status_code == 409:
        print(f"  [SKIP] {label} ({resp.json().get('detail')})")
        return None
    print(f"  [ERROR] {label}: {resp.status_code} {resp.text[:200]}")
    return None


async def seed_employees(client: httpx.AsyncClient) -> None:
    print("\n--- Seeding employees ---")
    for emp in EMPLOYEES:
        await _safe_post(client, "/employees", emp, f"{emp['first_name']} {emp['last_name']}")


async def seed_requests(client: httpx.AsyncClient) -> None:
    print("\n--- Seeding leave requests ---")

    sick = await _safe_post(
        client,
        "/requests",
        {
            "leave_type": "Sick",
            "employee_id": 1,
            "start_date": _offset(0),
            "end_date": _offset(5),
            "illness_description": "Severe flu",
        },
        "Sick leave for Alice",
    )
    if sick:
        request_id = sick["request_id"]
        await _safe_post(
            client,
            f"/requests/{request_id}/certificate",
            {"doctor_name": "Dr. Smith", "hospital_name": "City Hospital", "diagnosis": "Influenza Type A"},
            "Medical certificate",
        )
        await _safe_post(client, f"/requests/{request_id}/approve", None, "Approve sick leave")

    vacation = await _safe_post(
        client,
        "/requests",
        {"leave_type": "Vacation", "employee_id": 2, "start_date": _offset(30), "end_date": _offset(40)},
        "Vacation for Bob",
    )
    if vacation:
        await _safe_post(
            client,
            f"/requests/{vacation['request_id']}/travel-details",
            {
                "destination": "Tokyo, Japan",
                "accommodation_type": "Hotel",
                "emergency_contact_name": "Sarah Smith",
                "emergency_contact_phone": "+1-555-0200",
                "is_international": True,
            },
            "Travel details",
        )

    unpaid = await _safe_post(
        client,
        "/requests",
        {
            "leave_type": "Unpaid",
            "employee_id": 3,
            "start_date": _offset(10),
            "end_date": _offset(20),
            "reason": "Extended family vacation abroad",
        },
        "Unpaid leave for Carol",
    )
    if unpaid:
        request_id = unpaid["request_id"]
        await _safe_post(
            client,
            f"/requests/{request_id}/approvals",
            {"role": "Manager", "approved": True, "comments": "Approved, good timing"},
            "Manager sign-off",
        )
        await _safe_post(
            client,
            f"/requests/{request_id}/approvals",
            {"role": "HR", "approved": True, "comments": "All policies met"},
            "HR sign-off",
        )
        await _safe_post(client, f"/requests/{request_id}/approve", None, "Approve unpaid leave")

    await _safe_post(
        client,
        "/requests",
        {
            "leave_type": "Bereavement",
            "employee_id": 1,
            "start_date": _offset(0),
            "relationship_to_deceased": "Parent",
            "deceased_name": "John",
        },
        "Bereavement for Alice",
    )


async def main() -> None:
    print(f"Seeding data to {BASE_URL}")
    async with httpx.AsyncClient(timeout=30.0) as client:
        resp = await client.get(f"{BASE_URL}/health")
        if resp.status_code != 200:
            print(f"API not reachable at {BASE_URL}/health: {resp.status_code}")
            sys.exit(1)

        await seed_employees(client)
        await seed_requests(client)

    print("\nDone.")


if __name__ == "__main__":
    asyncio.run(main())
