"""
Repository Base Classes

Typed query interfaces over the DoMotive record kinds. The suggestion engine,
template catalog and the mood/journal/label/task services depend only on these
interfaces; `SQLiteStore` is the bundled implementation.

Contract shared by every implementation:
- Reads never raise for backend failures; they log and return an empty
  result (or None for single lookups).
- Writes raise `StorageError` when the backend rejects them. Callers decide
  whether a given write is best-effort.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from domotive.models import (
    CustomMoodLabel,
    JournalEntry,
    MoodEntry,
    SuggestionRecord,
    Task,
    TaskLabel,
    TaskTemplate,
)


class TemplateRepository(ABC):
    @abstractmethod
    def all_templates(self) -> list[TaskTemplate]:
        """All templates ordered by title."""

    @abstractmethod
    def find_template(self, template_id: str) -> TaskTemplate | None: ...

    @abstractmethod
    def find_by_category(self, category: str) -> list[TaskTemplate]:
        """Templates of one category ordered by title."""

    @abstractmethod
    def find_built_in(self) -> list[TaskTemplate]: ...

    @abstractmethod
    def find_by_title(self, title: str) -> TaskTemplate | None:
        """Case-insensitive exact title lookup."""

    @abstractmethod
    def add_templates(self, templates: list[TaskTemplate]) -> None:
        """Insert one or more templates in a single transaction."""

    @abstractmethod
    def update_template(self, template: TaskTemplate) -> None: ...

    @abstractmethod
    def delete_template(self, template_id: str) -> bool: ...


class SuggestionRepository(ABC):
    @abstractmethod
    def add_suggestion(self, record: SuggestionRecord) -> None: ...

    @abstractmethod
    def find_suggestion(self, suggestion_id: str) -> SuggestionRecord | None: ...

    @abstractmethod
    def update_suggestion(self, record: SuggestionRecord) -> None: ...

    @abstractmethod
    def find_for_template(self, template_id: str) -> list[SuggestionRecord]: ...

    @abstractmethod
    def find_by_mood_band(
        self, template_id: str, low: int, high: int
    ) -> list[SuggestionRecord]:
        """History rows for a template whose mood lies within [low, high]."""

    @abstractmethod
    def all_suggestions(self) -> list[SuggestionRecord]: ...


class TaskRepository(ABC):
    @abstractmethod
    def add_task(self, task: Task) -> None: ...

    @abstractmethod
    def find_task(self, task_id: str) -> Task | None: ...

    @abstractmethod
    def list_tasks(self, completed: bool | None = None) -> list[Task]:
        """Tasks by due date (undated last), optionally filtered by completion."""

    @abstractmethod
    def update_task(self, task: Task) -> None: ...

    @abstractmethod
    def delete_task(self, task_id: str) -> bool: ...


class MoodRepository(ABC):
    @abstractmethod
    def add_mood(self, entry: MoodEntry) -> None: ...

    @abstractmethod
    def moods_since(self, since: datetime) -> list[MoodEntry]:
        """Entries recorded at or after `since`, newest first."""

    @abstractmethod
    def list_moods(self, limit: int | None = None) -> list[MoodEntry]: ...

    @abstractmethod
    def delete_mood(self, entry_id: str) -> bool: ...

    @abstractmethod
    def find_custom_mood_label(self, mood_value: int) -> CustomMoodLabel | None: ...

    @abstractmethod
    def save_custom_mood_label(self, label: CustomMoodLabel) -> None:
        """Insert or replace the custom label for `label.mood_value`."""


class JournalRepository(ABC):
    @abstractmethod
    def add_journal_entry(self, entry: JournalEntry) -> None: ...

    @abstractmethod
    def list_journal_entries(self) -> list[JournalEntry]: ...

    @abstractmethod
    def delete_journal_entry(self, entry_id: str) -> bool: ...


class LabelRepository(ABC):
    @abstractmethod
    def add_labels(self, labels: list[TaskLabel]) -> None: ...

    @abstractmethod
    def find_label(self, label_id: str) -> TaskLabel | None: ...

    @abstractmethod
    def update_label(self, label: TaskLabel) -> None: ...

    @abstractmethod
    def delete_label(self, label_id: str) -> bool: ...

    @abstractmethod
    def all_labels(self) -> list[TaskLabel]:
        """Ordered by category, usage (desc), name."""

    @abstractmethod
    def find_built_in_labels(self) -> list[TaskLabel]: ...

    @abstractmethod
    def labels_by_category(self, category: str) -> list[TaskLabel]: ...

    @abstractmethod
    def most_used_labels(self, limit: int) -> list[TaskLabel]: ...

    @abstractmethod
    def search_labels(self, query: str) -> list[TaskLabel]: ...

    @abstractmethod
    def labels_by_names(self, names: list[str]) -> list[TaskLabel]: ...

    @abstractmethod
    def label_categories(self) -> list[str]: ...
