"""
Employee API - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own file-backed SQLite database (sqlite+aiosqlite),
       so EmployeeService runs the same statements it runs against
       PostgreSQL, one fresh connection per operation.

Fixture Hierarchy (all function-scoped):
    ├── engine:            AsyncEngine with EmployeeDetails created
    ├── bare_engine:       AsyncEngine on an empty database (no table)
    ├── employee_service:  EmployeeService bound to `engine`
    ├── test_client:       HTTPX AsyncClient talking to create_app(employee_service)
    ├── broken_client:     same, but bound to `bare_engine`
    ├── unreachable_client: same, but its database file cannot be opened
    └── sample_employee:   camelCase request body
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="employee_api_test_"), "default.db")
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.database import build_engine, create_tables
from app.main import create_app
from app.services.employee_service import EmployeeService


def _sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine(tmp_path):
    """AsyncEngine on a fresh database with the EmployeeDetails table."""
    test_engine = build_engine(_sqlite_url(tmp_path / "employees.db"))
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def bare_engine(tmp_path):
    """AsyncEngine on a database where EmployeeDetails was never created."""
    test_engine = build_engine(_sqlite_url(tmp_path / "empty.db"))
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def employee_service(engine):
    return EmployeeService(engine)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(employee_service):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    app = create_app(employee_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def broken_client(bare_engine):
    """Client whose database has no EmployeeDetails table, so every statement fails."""
    app = create_app(EmployeeService(bare_engine))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def unreachable_client(tmp_path):
    """Client whose database file lives in a directory that does not exist."""
    test_engine = build_engine(_sqlite_url(tmp_path / "missing" / "dir" / "employees.db"))
    app = create_app(EmployeeService(test_engine))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await test_engine.dispose()


@pytest.fixture
def sample_employee():
    return {
        "employeeId": "E1001",
        "employeeName": "Ada Lovelace",
        "department": "Engineering",
        "age": 36,
    }
