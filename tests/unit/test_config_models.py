"""Tests for domotive/config_models.py

Configuration comes from args/domotive.yaml, validated by pydantic.
Invalid files must never stop the app: they fall back to defaults.
"""

import pytest

from domotive.config_models import (
    CONFIG_PATH,
    DoMotiveConfig,
    SuggestionsConfig,
    load_and_validate,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DOMOTIVE_DB_PATH", "DOMOTIVE_LOG_LEVEL", "DOMOTIVE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for built-in defaults."""

    def test_score_weights(self):
        weights = SuggestionsConfig().weights
        assert (weights.mood, weights.time_of_day, weights.history, weights.energy) == (
            0.40, 0.20, 0.25, 0.15,
        )
        assert weights.mood + weights.time_of_day + weights.history + weights.energy == pytest.approx(1.0)

    def test_suggestion_defaults(self):
        config = SuggestionsConfig()
        assert config.max_suggestions == 5
        assert config.time_of_day_default == 0.7
        assert config.neutral_mood_score == 0.5
        assert config.neutral_history_score == 0.5
        assert config.history_mood_band == 1

    def test_shipped_yaml_matches_defaults(self, monkeypatch):
        monkeypatch.delenv("DOMOTIVE_DB_PATH", raising=False)
        shipped = load_and_validate(CONFIG_PATH)
        defaults = DoMotiveConfig()

        assert shipped.suggestions.weights == defaults.suggestions.weights
        assert shipped.suggestions.time_of_day_fit == defaults.suggestions.time_of_day_fit
        assert shipped.tasks.due_offset_days == 1


class TestLoadAndValidate:
    """Tests for loading YAML config."""

    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DOMOTIVE_DB_PATH", raising=False)
        config = load_and_validate(tmp_path / "nope.yaml")
        assert config == DoMotiveConfig()

    def test_partial_file_overrides(self, tmp_path):
        path = tmp_path / "domotive.yaml"
        path.write_text("suggestions:\n  max_suggestions: 3\n  weights:\n    mood: 0.5\n")

        config = load_and_validate(path)

        assert config.suggestions.max_suggestions == 3
        assert config.suggestions.weights.mood == 0.5
        assert config.suggestions.weights.energy == 0.15

    def test_invalid_values_fall_back_to_defaults(self, tmp_path):
        path = tmp_path / "domotive.yaml"
        path.write_text("suggestions:\n  max_suggestions: 0\n")

        config = load_and_validate(path)

        assert config.suggestions.max_suggestions == 5

    def test_malformed_yaml_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "domotive.yaml"
        path.write_text("suggestions: [unclosed\n")

        assert load_and_validate(path).suggestions.max_suggestions == 5

    def test_env_overrides_db_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOMOTIVE_DB_PATH", str(tmp_path / "env.db"))
        config = load_and_validate(tmp_path / "nope.yaml")
        assert config.storage.db_path == str(tmp_path / "env.db")

    def test_env_overrides_log_level(self, tmp_path, monkeypatch):
        path = tmp_path / "domotive.yaml"
        path.write_text("logging:\n  level: ERROR\n")
        monkeypatch.setenv("DOMOTIVE_LOG_LEVEL", "DEBUG")

        assert load_and_validate(path).logging.level == "DEBUG"

    def test_env_selects_json_logs(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOMOTIVE_LOG_FORMAT", "JSON")
        assert load_and_validate(tmp_path / "nope.yaml").logging.json_output is True

    def test_env_console_format_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "domotive.yaml"
        path.write_text("logging:\n  json_output: true\n")
        monkeypatch.setenv("DOMOTIVE_LOG_FORMAT", "console")

        assert load_and_validate(path).logging.json_output is False
