"""
Shared fixtures for the test suite.

Centralizes reusable test infrastructure so individual test files
don't need to repeat client and payload boilerplate.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.sleep import SleepProfile, SleepSession

# ---------------------------------------------------------------------------
# Sleep fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sleep_profile() -> SleepProfile:
    """Default profile: 22:00 bedtime, 8 hours preferred, no preferences."""
    return SleepProfile()


@pytest.fixture()
def sleep_session() -> SleepSession:
    """A full 8-hour night starting at 22:00, quality 70."""
    return SleepSession(start_time=datetime(2024, 3, 1, 22, 0), duration=480, quality=70)


# ---------------------------------------------------------------------------
# FastAPI test client fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def api_client():
    """FastAPI ``TestClient`` for the personalization service."""
    with TestClient(app) as c:
        yield c
