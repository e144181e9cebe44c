"""
Tool: Mood Log
Purpose: Record mood values and describe them in words

Usage:
    moods = MoodLog(store)
    moods.log_mood(7, tags="slept well, sunny")
    today = moods.latest_today()
    moods.label_for(today.value), moods.emoji_for(today.value)
"""

from __future__ import annotations

from datetime import datetime, time
from typing import Callable, Optional

from domotive.exceptions import MoodValidationError
from domotive.logging_config import get_logger
from domotive.models import CustomMoodLabel, MoodEntry
from domotive.mood import DEFAULT_MOOD_LABELS, MAX_MOOD, MIN_MOOD, UNKNOWN_EMOJI, UNKNOWN_LABEL
from domotive.storage.base import MoodRepository

logger = get_logger(__name__)


def parse_tags(text: Optional[str]) -> list[str]:
    if not text:
        return []
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def validate_mood(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MoodValidationError(value)
    if not MIN_MOOD <= value <= MAX_MOOD:
        raise MoodValidationError(value)
    return value


class MoodLog:
    def __init__(self, repository: MoodRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    def log_mood(self, value: int, tags: str = "") -> MoodEntry:
        entry = MoodEntry(
            value=validate_mood(value),
            tags=", ".join(parse_tags(tags)),
            recorded_at=self.clock(),
        )
        self.repository.add_mood(entry)
        logger.debug(f"Logged mood {value}")
        return entry

    def latest_today(self) -> Optional[MoodEntry]:
        """Most recent entry since local midnight, or None."""
        midnight = datetime.combine(self.clock().date(), time.min)
        entries = self.repository.moods_since(midnight)
        return entries[0] if entries else None

    def list_entries(self, limit: Optional[int] = None) -> list[MoodEntry]:
        return self.repository.list_moods(limit)

    def delete(self, entry_id: str) -> bool:
        return self.repository.delete_mood(entry_id)

    # -------------------------------------------------------------------------
    # Mood words
    # -------------------------------------------------------------------------

    def label_for(self, value: int) -> str:
        custom = self.repository.find_custom_mood_label(value)
        if custom is not None and custom.label:
            return custom.label
        return DEFAULT_MOOD_LABELS.get(value, (UNKNOWN_LABEL, UNKNOWN_EMOJI))[0]

    def emoji_for(self, value: int) -> str:
        custom = self.repository.find_custom_mood_label(value)
        if custom is not None and custom.emoji:
            return custom.emoji
        return DEFAULT_MOOD_LABELS.get(value, (UNKNOWN_LABEL, UNKNOWN_EMOJI))[1]

    def save_custom_label(self, value: int, label: str, emoji: str) -> CustomMoodLabel:
        custom = CustomMoodLabel(
            mood_value=validate_mood(value),
            label=label,
            emoji=emoji,
            created_at=self.clock(),
        )
        self.repository.save_custom_mood_label(custom)
        return custom

    @staticmethod
    def default_label(value: int) -> str:
        return DEFAULT_MOOD_LABELS.get(value, (UNKNOWN_LABEL, UNKNOWN_EMOJI))[0]

    @staticmethod
    def default_emoji(value: int) -> str:
        return DEFAULT_MOOD_LABELS.get(value, (UNKNOWN_LABEL, UNKNOWN_EMOJI))[1]
