"""Shared test fixtures for DoMotive tests.

This module provides common fixtures used across all test modules:
- Database isolation with temporary files
- A fixed clock so time-of-day and due dates are predictable
- Sample templates for the suggestion engine

Usage:
    def test_something(store):
        # store writes to a temporary database that is removed afterwards
        ...
"""

import os
import tempfile
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest

from domotive.app import Services, build_services
from domotive.config_models import DoMotiveConfig
from domotive.models import TaskTemplate
from domotive.storage.sqlite_store import SQLiteStore


# ─────────────────────────────────────────────────────────────────────────────
# Path Constants
# ─────────────────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).parent.parent

# Monday morning
FIXED_NOW = datetime(2026, 10, 19, 9, 0)


# ─────────────────────────────────────────────────────────────────────────────
# Database Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_db() -> Generator[Path, None, None]:
    """Create a temporary database file for testing.

    The database file is automatically deleted after the test completes.

    Yields:
        Path to the temporary database file
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    yield db_path

    # Cleanup
    if db_path.exists():
        os.unlink(db_path)


@pytest.fixture
def store(temp_db: Path) -> SQLiteStore:
    """SQLite store on the temporary database."""
    return SQLiteStore(temp_db)


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


class FakeClock:
    """Callable clock that tests can move forward."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ─────────────────────────────────────────────────────────────────────────────
# Service Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def services(temp_db: Path, clock: FakeClock) -> Services:
    """Fully wired, unseeded services on the temporary database."""
    return build_services(DoMotiveConfig(), db_path=temp_db, clock=clock, seed=False)


# ─────────────────────────────────────────────────────────────────────────────
# Sample Data Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def exercise_template() -> TaskTemplate:
    return TaskTemplate(
        title="Go for a Run",
        description="Get your heart pumping",
        category="Exercise",
        difficulty=4,
        estimated_duration=30,
        mood_range="7-10",
        default_labels="High Energy, Outdoors",
        created_at=FIXED_NOW,
    )


@pytest.fixture
def selfcare_template() -> TaskTemplate:
    return TaskTemplate(
        title="Take a Warm Bath",
        description="Relax and unwind",
        category="SelfCare",
        difficulty=1,
        estimated_duration=30,
        mood_range="1-5",
        default_labels="Low Energy, Home",
        created_at=FIXED_NOW,
    )
