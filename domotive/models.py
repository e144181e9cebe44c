"""DoMotive data models.

Plain dataclasses shared by the storage layer, the suggestion engine and the
surrounding mood/journal/task features:
    TaskTemplate → (suggested) SuggestionRecord → (accepted) Task
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


def generate_id() -> str:
    """Generate a short unique ID."""
    return uuid.uuid4().hex[:12]


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _parse_dt(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


class TimeOfDay(str, Enum):
    """Coarse bucket of the wall-clock hour."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @classmethod
    def from_hour(cls, hour: int) -> TimeOfDay:
        if 6 <= hour < 12:
            return cls.MORNING
        if 12 <= hour < 17:
            return cls.AFTERNOON
        if 17 <= hour < 22:
            return cls.EVENING
        return cls.NIGHT

    @classmethod
    def at(cls, moment: datetime) -> TimeOfDay:
        return cls.from_hour(moment.hour)


class EnergyTier(str, Enum):
    """Presumed energy derived from a mood value."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def for_mood(cls, mood_value: int) -> EnergyTier:
        if 1 <= mood_value <= 3:
            return cls.LOW
        if 7 <= mood_value <= 10:
            return cls.HIGH
        # 4-6 and anything outside the scale
        return cls.MEDIUM


@dataclass
class TaskTemplate:
    """A reusable task blueprint, tagged with the moods it suits."""

    title: str
    description: str = ""
    category: str | None = None
    difficulty: int = 1
    estimated_duration: int = 15  # minutes
    mood_range: str | None = None  # e.g. "1-4" or "1-3, 7-10"
    default_labels: str = ""
    is_built_in: bool = False
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "difficulty": self.difficulty,
            "estimated_duration": self.estimated_duration,
            "mood_range": self.mood_range,
            "default_labels": self.default_labels,
            "is_built_in": self.is_built_in,
            "created_at": _iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaskTemplate:
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description") or "",
            category=data.get("category"),
            difficulty=int(data.get("difficulty", 1)),
            estimated_duration=int(data.get("estimated_duration", 15)),
            mood_range=data.get("mood_range"),
            default_labels=data.get("default_labels") or "",
            is_built_in=bool(data.get("is_built_in", False)),
            created_at=_parse_dt(data.get("created_at")) or datetime.now(),
        )


@dataclass
class SuggestionRecord:
    """One template surfaced to the user, and whether they took it."""

    template_id: str
    mood_value: int
    time_of_day: TimeOfDay
    suggested_at: datetime = field(default_factory=datetime.now)
    accepted: bool = False
    responded_at: datetime | None = None
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "mood_value": self.mood_value,
            "time_of_day": self.time_of_day.value,
            "suggested_at": _iso(self.suggested_at),
            "accepted": self.accepted,
            "responded_at": _iso(self.responded_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SuggestionRecord:
        return cls(
            id=data["id"],
            template_id=data["template_id"],
            mood_value=int(data["mood_value"]),
            time_of_day=TimeOfDay(data["time_of_day"]),
            suggested_at=_parse_dt(data.get("suggested_at")) or datetime.now(),
            accepted=bool(data.get("accepted", False)),
            responded_at=_parse_dt(data.get("responded_at")),
        )


@dataclass
class Task:
    """A to-do item. Snapshot of a template when created from one."""

    title: str
    description: str = ""
    category: str | None = None
    difficulty: int = 1
    estimated_duration: int = 15
    labels: str = ""
    is_completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime = field(default_factory=datetime.now)
    due_at: datetime | None = None
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "difficulty": self.difficulty,
            "estimated_duration": self.estimated_duration,
            "labels": self.labels,
            "is_completed": self.is_completed,
            "completed_at": _iso(self.completed_at),
            "created_at": _iso(self.created_at),
            "due_at": _iso(self.due_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description") or "",
            category=data.get("category"),
            difficulty=int(data.get("difficulty", 1)),
            estimated_duration=int(data.get("estimated_duration", 15)),
            labels=data.get("labels") or "",
            is_completed=bool(data.get("is_completed", False)),
            completed_at=_parse_dt(data.get("completed_at")),
            created_at=_parse_dt(data.get("created_at")) or datetime.now(),
            due_at=_parse_dt(data.get("due_at")),
        )


@dataclass
class MoodEntry:
    value: int
    tags: str = ""
    recorded_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "tags": self.tags,
            "recorded_at": _iso(self.recorded_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MoodEntry:
        return cls(
            id=data["id"],
            value=int(data["value"]),
            tags=data.get("tags") or "",
            recorded_at=_parse_dt(data.get("recorded_at")) or datetime.now(),
        )


@dataclass
class CustomMoodLabel:
    """User override of the default word/emoji for a mood value."""

    mood_value: int
    label: str
    emoji: str
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "mood_value": self.mood_value,
            "label": self.label,
            "emoji": self.emoji,
            "created_at": _iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CustomMoodLabel:
        return cls(
            id=data["id"],
            mood_value=int(data["mood_value"]),
            label=data["label"],
            emoji=data["emoji"],
            created_at=_parse_dt(data.get("created_at")) or datetime.now(),
        )


@dataclass
class JournalEntry:
    text: str
    written_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "written_at": _iso(self.written_at)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JournalEntry:
        return cls(
            id=data["id"],
            text=data["text"],
            written_at=_parse_dt(data.get("written_at")) or datetime.now(),
        )


@dataclass
class TaskLabel:
    """A free-text tag with display metadata and usage stats."""

    name: str
    category: str
    color_hex: str = "#3498DB"
    emoji: str = ""
    is_built_in: bool = False
    usage_count: int = 0
    last_used_at: datetime | None = None
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "color_hex": self.color_hex,
            "emoji": self.emoji,
            "is_built_in": self.is_built_in,
            "usage_count": self.usage_count,
            "last_used_at": _iso(self.last_used_at),
            "created_at": _iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaskLabel:
        return cls(
            id=data["id"],
            name=data["name"],
            category=data["category"],
            color_hex=data.get("color_hex") or "#3498DB",
            emoji=data.get("emoji") or "",
            is_built_in=bool(data.get("is_built_in", False)),
            usage_count=int(data.get("usage_count", 0)),
            last_used_at=_parse_dt(data.get("last_used_at")),
            created_at=_parse_dt(data.get("created_at")) or datetime.now(),
        )
