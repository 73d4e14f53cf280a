"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- storage: In-memory key-value storage for isolated testing
- state / session: Calculator state on top of that storage, year 2025 selected
- test_client: FastAPI TestClient using the in-memory session
- db_session_factory: In-memory SQLite sessions for DatabaseStorage tests
"""

import os
import sys
import tempfile
from pathlib import Path

# Point logs and the database at a scratch directory before the app is imported.
_tmp_dir = tempfile.mkdtemp(prefix="fastlonn-tests-")
os.environ.setdefault("LOG_DIR", _tmp_dir)
os.environ.setdefault("DATABASE_URL", f"sqlite:///{Path(_tmp_dir) / 'test.db'}")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from fastlonn.core.constants import KEY_SELECTED_YEAR
from fastlonn.core.session import CalculatorSession
from fastlonn.core.state import CalculatorState
from fastlonn.core.storage import MemoryStorage
from fastlonn.database.database import Base
from fastlonn.main import app
from fastlonn.routes.shared import get_session

TEST_YEAR = 2025


@pytest.fixture(scope="function")
def storage():
    """Fresh in-memory storage with 2025 as the selected year."""
    return MemoryStorage({KEY_SELECTED_YEAR: TEST_YEAR})


@pytest.fixture(scope="function")
def state(storage):
    return CalculatorState(storage)


@pytest.fixture(scope="function")
def session(storage):
    """Calculator session (state, day store, drag controller) for 2025."""
    return CalculatorSession(storage)


@pytest.fixture(scope="function")
def test_client(session):
    """
    Create FastAPI TestClient with the session dependency overridden.

    All API calls during the test use the in-memory session instead of the
    database-backed one created at startup.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    app.dependency_overrides[get_session] = lambda: session

    with TestClient(app) as client:
        yield client

    # Clean up
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db_session_factory():
    """
    In-memory SQLite database with the key_values table.

    Yields:
        sessionmaker bound to a single shared connection
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield factory
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
