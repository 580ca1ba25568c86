"""Shared test fixtures for the habit tracker backend.

Every test runs against a fresh in-memory key-value store with the OpenAI
key and streak alerts switched off, so nothing touches disk or the network.

Usage:
    def test_something(make_habit):
        habit = make_habit(dates=["2024-03-14", "2024-03-15"])
        ...
"""
from datetime import datetime, timedelta
from typing import Callable, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core import dependencies
from app.core.config import settings
from app.models.habit import Habit
from app.models.mood import MoodEntry
from app.services.scheduler import jobs
from app.services.storage import KeyValueStore


# ─────────────────────────────────────────────────────────────────────────────
# Reference Dates
# ─────────────────────────────────────────────────────────────────────────────

TODAY = "2024-03-15"
YESTERDAY = "2024-03-14"


def date_range(start: str, end: str) -> List[str]:
    """Inclusive list of YYYY-MM-DD dates from start to end."""
    first = datetime.strptime(start, "%Y-%m-%d")
    last = datetime.strptime(end, "%Y-%m-%d")
    return [
        (first + timedelta(days=i)).strftime("%Y-%m-%d")
        for i in range((last - first).days + 1)
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Environment Isolation
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """No LLM key, no background alerts, local calendar."""
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    monkeypatch.setattr(settings, "ALERTS_ENABLED", False)
    monkeypatch.setattr(settings, "APP_TIMEZONE", "")


@pytest.fixture(autouse=True)
def store() -> Generator[KeyValueStore, None, None]:
    """Fresh in-memory store shared by every repository during the test."""
    memory_store = KeyValueStore()
    dependencies.set_store(memory_store)
    jobs.reset_alert_history()

    yield memory_store

    dependencies.set_store(None)
    jobs.reset_alert_history()


@pytest.fixture
def client() -> TestClient:
    """HTTP client for the FastAPI app (lifespan not started)."""
    from main import app

    return TestClient(app)


# ─────────────────────────────────────────────────────────────────────────────
# Factories
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def make_habit() -> Callable[..., Habit]:
    """Build Habit snapshots without touching the store."""
    counter = {"n": 0}

    def _make(
        name: Optional[str] = None,
        dates: Optional[List[str]] = None,
        active: bool = True,
        created_at: str = "2024-03-01",
        category: Optional[str] = None,
    ) -> Habit:
        counter["n"] += 1
        return Habit(
            id=f"habit_{counter['n']}",
            name=name or f"Habit {counter['n']}",
            created_at=created_at,
            completed_dates=dates or [],
            active=active,
            category=category,
        )

    return _make


@pytest.fixture
def make_mood() -> Callable[..., MoodEntry]:
    """Build MoodEntry snapshots; the timestamp defaults to noon on the date."""
    counter = {"n": 0}

    def _make(mood: str, date: str = TODAY, time: Optional[str] = None, note: Optional[str] = None) -> MoodEntry:
        counter["n"] += 1
        return MoodEntry(
            id=f"mood_{counter['n']}",
            date=date,
            time=time or f"{date}T12:00:00",
            mood=mood,
            note=note,
        )

    return _make
