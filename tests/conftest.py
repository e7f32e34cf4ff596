"""Pytest fixtures: a testing app and a fresh in-memory schema per test.

Flask-SQLAlchemy shares one connection for ``sqlite:///:memory:``, so the
tables created here are the ones the API and CLI see. Each test gets empty
tables; committed rows never leak into the next test.
"""

from __future__ import annotations

import os

import pytest

from projectmanager.core.config import TestingConfig
from projectmanager.core.extensions import db as _db
from projectmanager.factory import create_app
from projectmanager.infra.security import WerkzeugPasswordHasher


class TestConfig(TestingConfig):
    """Testing configuration pinned to in-memory SQLite."""

    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    CORS_ORIGINS = "http://localhost:5173"


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing."""
    os.environ.pop("DATABASE_URL", None)
    application = create_app(TestConfig)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def db(app):
    """Create all tables inside an app context and drop them afterwards."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def session(db):
    """Return the Flask-scoped session bound to the test schema."""
    return db.session


@pytest.fixture()
def client(app, db):
    """Return a Flask test client sharing the test schema."""
    return app.test_client()


@pytest.fixture()
def cli_runner(app, db):
    """Return a runner for ``flask`` CLI commands."""
    return app.test_cli_runner()


@pytest.fixture(scope="session")
def hasher():
    """Cheap PBKDF2 hasher matching the testing config."""
    return WerkzeugPasswordHasher(method=TestConfig.PASSWORD_HASH_METHOD)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the test session."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
    SQLAlchemySession.set(None)
