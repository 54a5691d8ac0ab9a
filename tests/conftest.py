from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.cache import InMemoryCache
from app.core.dependencies import get_employee_service
from app.main import app
from app.repositories.employee_repository import EmployeeRepository
from app.services.employee_service import EmployeeService
from tests.fakes import FakeContainer


@pytest.fixture
def fake_container():
    return FakeContainer()


@pytest.fixture
def memory_cache():
    return InMemoryCache()


@pytest.fixture
def repository(fake_container, memory_cache):
    return EmployeeRepository(container=fake_container, cache=memory_cache, cache_ttl=60)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def employee_client(repository):
    service = EmployeeService(repository)
    app.dependency_overrides[get_employee_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(repository):
    service = EmployeeService(repository)
    app.dependency_overrides[get_employee_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
