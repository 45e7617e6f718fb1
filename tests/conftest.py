"""
Pytest configuration and fixtures for the Yoga API tests.

The environment is prepared before anything from ``yoga_api`` is imported:
settings, the engine and the rate limiter are all built from it on first use.
"""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient


def load_test_environment():
    """Load test environment configuration from .env files."""
    from dotenv import load_dotenv

    project_dir = Path(__file__).parent.parent

    loaded_files = []
    env_file = project_dir / ".env.test"
    if env_file.exists():
        load_dotenv(env_file)
        loaded_files.append(str(env_file))

    # Override with testing environment settings
    test_env_overrides = {
        "ENVIRONMENT": "testing",
        "LOG_LEVEL": "WARNING",
        "DATABASE_URL": "sqlite://",
        "RATE_LIMIT_ENABLED": "false",
        "BCRYPT_ROUNDS": "4",
        "JWT_EXPIRATION_HOURS": "24",
    }

    for key, value in test_env_overrides.items():
        os.environ[key] = value

    # Set defaults only if not already set
    default_test_env = {
        "JWT_SECRET_KEY": "test-secret-key-with-enough-entropy-0123456789",
    }

    for key, value in default_test_env.items():
        if key not in os.environ:
            os.environ[key] = value

    return loaded_files


# Load environment configuration
loaded_env_files = load_test_environment()

from sqlmodel import SQLModel, Session  # noqa: E402

from yoga_api.config import get_app_settings  # noqa: E402
from yoga_api.database import (  # noqa: E402
    get_engine,
    Teacher,
    TeacherRepository,
    SessionRepository,
    UserRepository,
    YogaSession,
)
from yoga_api.services import (  # noqa: E402
    AuthService,
    JWTService,
    PasswordHasher,
)

get_app_settings.cache_clear()
get_engine.cache_clear()

TEST_PASSWORD = "yoga-pass-123"


@pytest.fixture(autouse=True)
def reset_database() -> Generator[None, None, None]:
    """Give every test an empty schema."""
    engine = get_engine()
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Database session bound to the shared in-memory engine."""
    with Session(get_engine()) as session:
        yield session


@pytest.fixture(scope="session")
def password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=os.environ["JWT_SECRET_KEY"])


@pytest.fixture
def auth_service(db, password_hasher, jwt_service) -> AuthService:
    return AuthService(UserRepository(db), password_hasher, jwt_service)


@pytest.fixture
def teacher(db) -> Teacher:
    return TeacherRepository(db).save(Teacher(first_name="Margot", last_name="Delahaye"))


@pytest.fixture
def yoga_session(db, teacher) -> YogaSession:
    return SessionRepository(db).save(
        YogaSession(
            name="Morning flow",
            date=datetime(2026, 11, 2, 8, 30, tzinfo=timezone.utc),
            description="Vinyasa for all levels",
            teacher_id=teacher.id,
        )
    )


@pytest.fixture
def registered_user(auth_service):
    """A registered, non-admin account."""
    return auth_service.register(
        email="yogi@studio.com",
        password=TEST_PASSWORD,
        first_name="Yogi",
        last_name="Bhajan",
    )


@pytest.fixture(scope="session")
def test_client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    from yoga_api.main import app

    with TestClient(app) as client:
        yield client


def register_and_login(
    client: TestClient, email: str = "yogi@studio.com", first_name: str = "Yogi"
) -> Dict:
    """Register an account through the API and return its login response."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": email,
            "password": TEST_PASSWORD,
            "first_name": first_name,
            "last_name": "Tester",
        },
    )
    assert response.status_code == 200, response.text

    response = client.post(
        "/api/v1/auth/login", json={"email": email, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return response.json()


def bearer(login: Dict) -> Dict[str, str]:
    return {"Authorization": f"Bearer {login['token']}"}


@pytest.fixture
def login_as(test_client):
    """Register and log in an account through the API."""

    def _login_as(email: str = "yogi@studio.com", first_name: str = "Yogi") -> Dict:
        return register_and_login(test_client, email=email, first_name=first_name)

    return _login_as


@pytest.fixture
def auth_login(login_as) -> Dict:
    """Login response for a freshly registered account."""
    return login_as()


@pytest.fixture
def auth_headers(auth_login) -> Dict[str, str]:
    return bearer(auth_login)


class FrozenClock:
    """Settable clock for token expiry tests."""

    def __init__(self, now: datetime = None):
        self.now = now or datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()
