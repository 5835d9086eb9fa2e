"""
Shared fixtures for the test suite.

Applications are built per test with rate limiting disabled and an
in-memory repository unless a test asks for something else.
"""

from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from workshop.application.people.service import PersonService
from workshop.core.config import Settings
from workshop.infrastructure.db import SqlTransactionManager, build_engine
from workshop.infrastructure.people.schema import create_schema
from workshop.interfaces.people.dependencies import get_person_service
from workshop.main import create_app


def make_settings(**overrides) -> Settings:
    """Build settings that ignore the environment's .env file."""
    values = {"rate_limit_enabled": False, "log_level": "WARNING"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings=settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def person_service(app):
    """Replace the wired PersonService with an autospec mock."""
    service = create_autospec(PersonService, instance=True)
    app.dependency_overrides[get_person_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def engine():
    """In-memory SQLite engine with the person table created."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def transactions(engine) -> SqlTransactionManager:
    return SqlTransactionManager(engine)


@pytest.fixture
def settings_factory():
    """Return a builder for settings with per-test overrides."""
    return make_settings
