"""Tests for domotive/mood/manager.py

The mood log records self-reported moods (1-10) and names them.
Key functionality:
- Validate and store mood values with tags
- Find the latest mood logged today
- Resolve mood words/emoji: custom label, then default, then unknown
"""

from datetime import datetime, timedelta

import pytest

from domotive.exceptions import MoodValidationError
from domotive.mood.manager import MoodLog, parse_tags, validate_mood


@pytest.fixture
def moods(store, clock):
    return MoodLog(store, clock=clock)


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────


class TestValidation:
    """Tests for mood value validation."""

    @pytest.mark.parametrize("value", [1, 5, 10])
    def test_accepts_scale(self, value):
        assert validate_mood(value) == value

    @pytest.mark.parametrize("value", [0, 11, -3, 5.5, "7", None, True])
    def test_rejects_everything_else(self, value):
        with pytest.raises(MoodValidationError):
            validate_mood(value)

    def test_parse_tags(self):
        assert parse_tags(" tired,  hopeful ,,") == ["tired", "hopeful"]
        assert parse_tags(None) == []


# ─────────────────────────────────────────────────────────────────────────────
# Logging Moods
# ─────────────────────────────────────────────────────────────────────────────


class TestLogMood:
    """Tests for recording moods."""

    def test_logs_entry(self, moods, clock):
        entry = moods.log_mood(7, tags="slept well,  sunny")

        assert entry.value == 7
        assert entry.tags == "slept well, sunny"
        assert entry.recorded_at == clock.now
        assert moods.list_entries()[0].id == entry.id

    def test_invalid_value_not_stored(self, moods):
        with pytest.raises(MoodValidationError):
            moods.log_mood(12)
        assert moods.list_entries() == []

    def test_latest_today(self, moods, clock):
        moods.log_mood(4)
        clock.now = clock.now + timedelta(hours=2)
        later = moods.log_mood(6)

        assert moods.latest_today().id == later.id

    def test_yesterday_does_not_count(self, moods, clock):
        clock.now = datetime(2026, 10, 18, 23, 30)
        moods.log_mood(3)
        clock.now = datetime(2026, 10, 19, 7, 0)

        assert moods.latest_today() is None

    def test_list_newest_first_with_limit(self, moods, clock):
        ids = []
        for value in (3, 5, 8):
            ids.append(moods.log_mood(value).id)
            clock.now = clock.now + timedelta(minutes=10)

        assert [e.id for e in moods.list_entries()] == list(reversed(ids))
        assert len(moods.list_entries(limit=2)) == 2

    def test_delete(self, moods):
        entry = moods.log_mood(5)
        assert moods.delete(entry.id) is True
        assert moods.list_entries() == []


# ─────────────────────────────────────────────────────────────────────────────
# Mood Words
# ─────────────────────────────────────────────────────────────────────────────


class TestMoodWords:
    """Tests for mood labels and emoji."""

    def test_defaults(self, moods):
        assert moods.label_for(1) == "Terrible"
        assert moods.emoji_for(1) == "😭"
        assert moods.label_for(10) == "Euphoric"
        assert moods.emoji_for(10) == "🤩"

    def test_unknown_value(self, moods):
        assert moods.label_for(42) == "Unknown"
        assert moods.emoji_for(42) == "❓"

    def test_custom_label_overrides_default(self, moods):
        moods.save_custom_label(6, "Chill", "😎")

        assert moods.label_for(6) == "Chill"
        assert moods.emoji_for(6) == "😎"
        assert moods.label_for(7) == "Great"

    def test_saving_again_replaces(self, moods):
        moods.save_custom_label(6, "Chill", "😎")
        moods.save_custom_label(6, "Fine", "👍")

        assert moods.label_for(6) == "Fine"
        assert moods.emoji_for(6) == "👍"

    def test_custom_label_validates_value(self, moods):
        with pytest.raises(MoodValidationError):
            moods.save_custom_label(0, "Nope", "🚫")

    def test_static_defaults(self):
        assert MoodLog.default_label(5) == "Okay"
        assert MoodLog.default_emoji(5) == "😐"
