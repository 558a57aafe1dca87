"""Test configuration and fixtures."""

import os

# Settings are read at import time; configure them before the application loads
os.environ["JWT_SECRET"] = "test-signing-secret-with-at-least-32-chars"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "development"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from tourism_api.core.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from tourism_api.models import *  # noqa: E402,F403 - Import all models

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

API = "/en/api/v1"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine with foreign keys enforced."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(test_engine):
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture(scope="function")
async def test_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_app(session_factory):
    """Application with its database dependency pointed at the test engine."""
    from tourism_api.main import create_app

    app = create_app()

    # One session per request, as in production
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    # Clean up
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_user_data():
    """Sample registration data for testing."""
    return {
        "username": "aidana",
        "email": "aidana@example.com",
        "password": "correct horse battery staple",
    }


@pytest.fixture
def sample_tour_data():
    """Sample tour data for testing."""
    return {
        "name": "Song-Kul Lake Trek",
        "price": 350,
        "description": "Three days of horse riding and yurt stays around Song-Kul lake",
        "city": "Naryn",
        "category": "trekking",
        "date": "2025-07-15",
        "duration": 3,
        "maxPeople": 12,
        "images": "https://img.example.com/song-kul.jpg",
    }


@pytest.fixture
def sample_car_data():
    """Sample car data for testing."""
    return {
        "category": "suv",
        "brand": "Toyota",
        "model": "Land Cruiser",
        "price": 120,
        "capacity": 5,
        "drive": "4wd",
        "year": 2021,
        "places": 7,
        "transmission": "automatic",
        "fuelType": "diesel",
        "images": ["https://img.example.com/lc.jpg"],
    }


async def register(client: AsyncClient, username: str, email: str, password: str = "secret-password") -> dict:
    """Register an account and return the response body."""
    response = await client.post(
        f"{API}/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(test_client):
    """Factory registering accounts; returns the response body and auth headers."""

    async def _register(username: str, email: str, password: str = "secret-password"):
        body = await register(test_client, username, email, password)
        return body, bearer(body["token"])

    return _register


@pytest_asyncio.fixture
async def auth_headers(test_client, sample_user_data):
    """Authorization headers of a freshly registered user."""
    body = await register(test_client, **sample_user_data)
    return bearer(body["token"])


@pytest_asyncio.fixture
async def other_auth_headers(test_client):
    """Authorization headers of a second user."""
    body = await register(test_client, "bakyt", "bakyt@example.com")
    return bearer(body["token"])


@pytest_asyncio.fixture
async def created_tour(test_client, auth_headers, sample_tour_data):
    """A tour created through the API."""
    response = await test_client.post(f"{API}/tours", json=sample_tour_data, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()["tour"]


@pytest_asyncio.fixture
async def created_car(test_client, auth_headers, sample_car_data):
    """A car created through the API, not attached to a tour."""
    response = await test_client.post(f"{API}/cars", json=sample_car_data, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()["car"]
