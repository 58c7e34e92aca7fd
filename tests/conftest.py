"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- In-memory database and session fixtures
"""

import os

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_JSON"] = "true"


@pytest.fixture(scope="function")
def database():
    """
    Provide a fresh in-memory database with the schema created.

    The engine is disposed after the test.
    """
    from school.core.database import Database

    with Database("sqlite:///:memory:") as db:
        db.create_schema()
        yield db


@pytest.fixture(scope="function")
def session(database):
    """Provide a session bound to the test database."""
    with database.session() as session:
        yield session


@pytest.fixture(scope="function")
def file_database_url(tmp_path):
    """SQLite URL of a database file inside the test's temporary directory."""
    return f"sqlite:///{tmp_path / 'data' / 'School.db'}"


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
