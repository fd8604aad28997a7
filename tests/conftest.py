from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from leavetrack.main import app
from leavetrack.services.employee import InMemoryEmployeeDirectory, set_employee_directory
from leavetrack.services.request import InMemoryLeaveRequestStore, set_request_store

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator


@pytest.fixture(autouse=True)
def _fresh_stores() -> Iterator[None]:
    """Give every test an empty employee directory and request store."""
    set_employee_directory(InMemoryEmployeeDirectory())
    set_request_store(InMemoryLeaveRequestStore())
    yield
    set_employee_directory(InMemoryEmployeeDirectory())
    set_request_store(InMemoryLeaveRequestStore())


@pytest.fixture
async def async_client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
