"""
Service wiring.

Everything is constructed once here and handed to callers explicitly;
nothing in DoMotive reaches for a module-level singleton.

Usage:
    from domotive.app import build_services

    services = build_services()
    mood = services.moods.latest_today()
    services.engine.offer_suggestions(mood.value if mood else 5)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from domotive.config_models import PROJECT_ROOT, DoMotiveConfig, load_and_validate
from domotive.labels.manager import LabelManager
from domotive.mood.journal import Journal
from domotive.mood.manager import MoodLog
from domotive.storage.sqlite_store import SQLiteStore
from domotive.suggestions.engine import TaskEngine
from domotive.tasks.manager import TaskList
from domotive.templates.catalog import TemplateCatalog


@dataclass
class Services:
    config: DoMotiveConfig
    store: SQLiteStore
    catalog: TemplateCatalog
    engine: TaskEngine
    tasks: TaskList
    moods: MoodLog
    journal: Journal
    labels: LabelManager

    def seed(self) -> dict[str, int]:
        """Insert built-in templates and labels on first run."""
        return {
            "templates": self.catalog.seed_built_ins(),
            "labels": self.labels.seed_built_ins(),
        }


def resolve_db_path(db_path: str | Path) -> Path:
    path = Path(db_path).expanduser()
    return path if path.is_absolute() else PROJECT_ROOT / path


def build_services(
    config: Optional[DoMotiveConfig] = None,
    db_path: Optional[str | Path] = None,
    clock: Callable[[], datetime] = datetime.now,
    seed: bool = True,
) -> Services:
    config = config or load_and_validate()
    store = SQLiteStore(resolve_db_path(db_path or config.storage.db_path))

    labels = LabelManager(store, clock=clock)
    services = Services(
        config=config,
        store=store,
        catalog=TemplateCatalog(store, clock=clock),
        engine=TaskEngine(
            store, store, store,
            config=config.suggestions,
            tasks_config=config.tasks,
            clock=clock,
            labels=labels,
        ),
        tasks=TaskList(store, labels=labels, clock=clock),
        moods=MoodLog(store, clock=clock),
        journal=Journal(store, clock=clock),
        labels=labels,
    )
    if seed:
        services.seed()
    return services
