"""Tests for domotive/app.py"""

from pathlib import Path

from domotive.app import build_services, resolve_db_path
from domotive.config_models import PROJECT_ROOT, DoMotiveConfig
from domotive.labels import BUILT_IN_LABELS
from domotive.templates.builtin import BUILT_IN_TEMPLATES


class TestBuildServices:
    """Tests for service wiring."""

    def test_services_share_one_store(self, services):
        assert services.engine.templates is services.store
        assert services.tasks.repository is services.store
        assert services.moods.repository is services.store

    def test_seed_once(self, services):
        assert services.seed() == {
            "templates": len(BUILT_IN_TEMPLATES),
            "labels": len(BUILT_IN_LABELS),
        }
        assert services.seed() == {"templates": 0, "labels": 0}

    def test_seeds_by_default(self, temp_db, clock):
        services = build_services(DoMotiveConfig(), db_path=temp_db, clock=clock)
        assert len(services.catalog.list_all()) == len(BUILT_IN_TEMPLATES)

    def test_logged_mood_drives_suggestions(self, services):
        services.seed()
        mood = services.moods.log_mood(2)

        offered = services.engine.offer_suggestions(services.moods.latest_today().value)

        assert mood.value == 2
        assert offered
        assert all(s.template.mood_range for s in offered)


class TestResolveDbPath:
    def test_relative_paths_are_under_project_root(self):
        assert resolve_db_path("data/domotive.db") == PROJECT_ROOT / "data" / "domotive.db"

    def test_absolute_paths_unchanged(self, tmp_path):
        assert resolve_db_path(tmp_path / "x.db") == Path(tmp_path / "x.db")
