"""Free-text journal entries."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from domotive.exceptions import JournalValidationError
from domotive.models import JournalEntry
from domotive.storage.base import JournalRepository


class Journal:
    def __init__(
        self, repository: JournalRepository, clock: Callable[[], datetime] = datetime.now
    ):
        self.repository = repository
        self.clock = clock

    def add_entry(self, text: str) -> JournalEntry:
        if not text or not text.strip():
            raise JournalValidationError("text must not be empty")
        entry = JournalEntry(text=text, written_at=self.clock())
        self.repository.add_journal_entry(entry)
        return entry

    def list_entries(self) -> list[JournalEntry]:
        """Newest first."""
        return self.repository.list_journal_entries()

    def delete(self, entry_id: str) -> bool:
        return self.repository.delete_journal_entry(entry_id)
