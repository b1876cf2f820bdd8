"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from datetime import datetime, timedelta, timezone

os.environ.setdefault("ENV", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from firstaid.chat.triggers import TriggerTable, get_trigger_table  # noqa: E402
from firstaid.main import app  # noqa: E402


# Fixed reference time so recency checks are reproducible
REFERENCE_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def triggers() -> TriggerTable:
    """The default chat trigger table."""
    return get_trigger_table()


@pytest.fixture
def now() -> datetime:
    """Reference 'current time' for classification tests."""
    return REFERENCE_NOW


@pytest.fixture
def screening_days_ago(now: datetime):
    """Factory for screening context records created N days before now."""

    def _make(days: float, severity_band: str, screening_type: str = "PHQ9") -> dict:
        return {
            "type": screening_type,
            "score": 0,
            "severity_band": severity_band,
            "created_at": now - timedelta(days=days),
        }

    return _make
