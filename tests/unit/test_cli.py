"""Tests for domotive/cli.py

Every command prints a JSON envelope and returns 0 on success, 1 on failure.
"""

import json
import logging

import pytest

from domotive.cli import main
from domotive.logging_config import HANDLER_NAME


@pytest.fixture
def run(temp_db, capsys, monkeypatch):
    """Run the CLI against the temporary database and decode its output."""
    for name in ("DOMOTIVE_DB_PATH", "DOMOTIVE_LOG_LEVEL", "DOMOTIVE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    original_level = root.level

    def _run(*argv):
        code = main(["--db", str(temp_db), *argv])
        out = capsys.readouterr().out
        return code, json.loads(out)

    yield _run

    # the CLI handler points at a captured stream that is about to close
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(original_level)


class TestBasics:
    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert json.loads(capsys.readouterr().out)["success"] is True

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()


class TestMoodCommands:
    def test_log_and_today(self, run):
        code, result = run("mood", "log", "7", "--tags", "sunny")
        assert code == 0
        assert result["label"] == "Great"

        code, result = run("mood", "today")
        assert code == 0
        assert result["data"]["value"] == 7

    def test_invalid_mood(self, run):
        code, result = run("mood", "log", "11")
        assert code == 1
        assert result["success"] is False
        assert "between 1 and 10" in result["error"]

    def test_custom_label(self, run):
        run("mood", "label", "6", "Chill", "😎")
        _, result = run("mood", "log", "6")
        assert result["label"] == "Chill"
        assert result["emoji"] == "😎"


class TestSuggestFlow:
    """Tests for suggest -> accept -> tasks."""

    def test_suggest_accept_and_list(self, run):
        code, result = run("suggest", "--mood", "9", "--time-of-day", "morning", "--count", "3")
        assert code == 0
        assert len(result["data"]) == 3
        assert result["time_of_day"] == "morning"
        totals = [s["score"]["total"] for s in result["data"]]
        assert totals == sorted(totals, reverse=True)

        suggestion_id = result["data"][0]["suggestion_id"]
        code, accepted = run("accept", suggestion_id)
        assert code == 0
        assert accepted["data"]["title"] == result["data"][0]["template"]["title"]

        _, tasks = run("tasks", "list")
        assert [t["id"] for t in tasks["data"]] == [accepted["data"]["id"]]

    def test_suggest_uses_logged_mood(self, run):
        run("mood", "log", "2")
        code, result = run("suggest", "--time-of-day", "evening", "--no-record")
        assert code == 0
        assert result["mood_value"] == 2
        assert all(s["suggestion_id"] is None for s in result["data"])

    def test_suggest_without_mood_fails(self, run):
        code, result = run("suggest")
        assert code == 1
        assert "No mood logged today" in result["error"]

    def test_accept_unknown(self, run):
        code, result = run("accept", "missing")
        assert code == 1
        assert result["details"]["suggestion_id"] == "missing"


class TestTemplateCommands:
    def test_list_seeded(self, run):
        _, result = run("templates", "list")
        assert len(result["data"]) == 20

    def test_add_and_delete(self, run):
        code, result = run("templates", "add", "--title", "Call Mum", "--mood-range", "5-10")
        assert code == 0
        template_id = result["data"]["id"]

        code, _ = run("templates", "delete", template_id)
        assert code == 0

    def test_delete_built_in_fails(self, run):
        _, result = run("templates", "list", "--category", "Exercise")
        code, result = run("templates", "delete", result["data"][0]["id"])
        assert code == 1
        assert "cannot be deleted" in result["error"]


class TestOtherCommands:
    def test_journal(self, run):
        run("journal", "add", "Felt better after lunch")
        _, result = run("journal", "list")
        assert result["data"][0]["text"] == "Felt better after lunch"

    def test_tasks_add_and_toggle(self, run):
        _, added = run("tasks", "add", "Call the bank", "--labels", "Quick")
        code, toggled = run("tasks", "toggle", added["data"]["id"])
        assert code == 0
        assert toggled["data"]["is_completed"] is True

        _, pending = run("tasks", "list")
        assert pending["data"] == []

    def test_labels_search(self, run):
        _, result = run("labels", "--search", "energy")
        assert len(result["data"]) == 3
        assert "Energy" in result["categories"]

    def test_accept_twice_fails(self, run):
        _, result = run("suggest", "--mood", "8", "--time-of-day", "morning", "--count", "1")
        suggestion_id = result["data"][0]["suggestion_id"]
        run("accept", suggestion_id)

        code, again = run("accept", suggestion_id)

        assert code == 1
        assert "already accepted" in again["error"]
        _, tasks = run("tasks", "list")
        assert len(tasks["data"]) == 1


class TestLoggingOverrides:
    """Environment variables beat the logging section of the config file."""

    def test_log_level_from_env(self, run, monkeypatch):
        monkeypatch.setenv("DOMOTIVE_LOG_LEVEL", "DEBUG")

        code, _ = run("journal", "list")

        assert code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_json_format_from_env(self, run, monkeypatch):
        monkeypatch.setenv("DOMOTIVE_LOG_FORMAT", "json")

        run("journal", "list")

        handler = next(h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME)
        assert any(
            type(p).__name__ == "JSONRenderer" for p in handler.formatter.processors
        )

    def test_config_level_without_env(self, run):
        run("journal", "list")
        assert logging.getLogger().level == logging.WARNING
