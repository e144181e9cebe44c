"""
Tool: SQLite Store
Purpose: Local persistence for templates, suggestion history, tasks, moods,
journal entries and labels

One database file, one short-lived connection per call. Tables are created on
first connect so a fresh path is always usable.

Failure policy:
    - Reads log the sqlite error and return an empty result
    - Writes raise StorageError so the caller can decide if the write matters

Dependencies:
    - sqlite3 (stdlib)
"""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from domotive.exceptions import StorageError
from domotive.logging_config import get_logger
from domotive.models import (
    CustomMoodLabel,
    JournalEntry,
    MoodEntry,
    SuggestionRecord,
    Task,
    TaskLabel,
    TaskTemplate,
)
from domotive.storage.base import (
    JournalRepository,
    LabelRepository,
    MoodRepository,
    SuggestionRepository,
    TaskRepository,
    TemplateRepository,
)

logger = get_logger(__name__)


SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS task_templates (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        category TEXT,
        difficulty INTEGER DEFAULT 1 CHECK(difficulty BETWEEN 1 AND 5),
        estimated_duration INTEGER DEFAULT 15,
        mood_range TEXT,
        default_labels TEXT,
        is_built_in INTEGER DEFAULT 0,
        created_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS suggestions (
        id TEXT PRIMARY KEY,
        template_id TEXT NOT NULL,
        mood_value INTEGER NOT NULL,
        time_of_day TEXT CHECK(time_of_day IN ('morning', 'afternoon', 'evening', 'night')),
        suggested_at DATETIME,
        accepted INTEGER DEFAULT 0,
        responded_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        category TEXT,
        difficulty INTEGER DEFAULT 1,
        estimated_duration INTEGER,
        labels TEXT,
        is_completed INTEGER DEFAULT 0,
        completed_at DATETIME,
        created_at DATETIME,
        due_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS mood_entries (
        id TEXT PRIMARY KEY,
        value INTEGER NOT NULL,
        tags TEXT,
        recorded_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS custom_mood_labels (
        id TEXT PRIMARY KEY,
        mood_value INTEGER NOT NULL UNIQUE,
        label TEXT NOT NULL,
        emoji TEXT NOT NULL,
        created_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS journal_entries (
        id TEXT PRIMARY KEY,
        text TEXT NOT NULL,
        written_at DATETIME
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS labels (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        category TEXT NOT NULL,
        color_hex TEXT,
        emoji TEXT,
        is_built_in INTEGER DEFAULT 0,
        usage_count INTEGER DEFAULT 0,
        last_used_at DATETIME,
        created_at DATETIME
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_templates_category ON task_templates(category)",
    "CREATE INDEX IF NOT EXISTS idx_suggestions_template ON suggestions(template_id, mood_value)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_completed ON tasks(is_completed)",
    "CREATE INDEX IF NOT EXISTS idx_moods_recorded ON mood_entries(recorded_at)",
    "CREATE INDEX IF NOT EXISTS idx_labels_category ON labels(category)",
)


def _ts(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


class SQLiteStore(
    TemplateRepository,
    SuggestionRepository,
    TaskRepository,
    MoodRepository,
    JournalRepository,
    LabelRepository,
):
    """All DoMotive repositories backed by a single SQLite file."""

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)

    def get_connection(self) -> sqlite3.Connection:
        """Get database connection, creating tables if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row

        cursor = conn.cursor()
        for statement in SCHEMA:
            cursor.execute(statement)
        conn.commit()
        return conn

    def _query(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        try:
            conn = self.get_connection()
        except sqlite3.Error as e:
            logger.error(f"Cannot open {self.db_path}: {e}")
            return []
        try:
            return [dict(row) for row in conn.execute(sql, params).fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Query failed: {e}", sql=sql.strip().split("\n")[0])
            return []
        finally:
            conn.close()

    def _query_one(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        rows = self._query(sql, params)
        return rows[0] if rows else None

    def _execute(self, operation: str, statements: list[tuple[str, tuple]]) -> int:
        """Run write statements in one transaction, return affected row count."""
        try:
            conn = self.get_connection()
        except sqlite3.Error as e:
            raise StorageError(operation, str(e)) from e
        try:
            affected = 0
            for sql, params in statements:
                affected += conn.execute(sql, params).rowcount
            conn.commit()
            return affected
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Write failed during {operation}: {e}")
            raise StorageError(operation, str(e)) from e
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    @staticmethod
    def _template_params(t: TaskTemplate) -> tuple:
        return (
            t.title, t.description, t.category, t.difficulty, t.estimated_duration,
            t.mood_range, t.default_labels, int(t.is_built_in), _ts(t.created_at), t.id,
        )

    def all_templates(self) -> list[TaskTemplate]:
        rows = self._query("SELECT * FROM task_templates ORDER BY title COLLATE NOCASE, id")
        return [TaskTemplate.from_dict(r) for r in rows]

    def find_template(self, template_id: str) -> TaskTemplate | None:
        row = self._query_one("SELECT * FROM task_templates WHERE id = ?", (template_id,))
        return TaskTemplate.from_dict(row) if row else None

    def find_by_category(self, category: str) -> list[TaskTemplate]:
        rows = self._query(
            "SELECT * FROM task_templates WHERE category = ? ORDER BY title COLLATE NOCASE, id",
            (category,),
        )
        return [TaskTemplate.from_dict(r) for r in rows]

    def find_built_in(self) -> list[TaskTemplate]:
        rows = self._query(
            "SELECT * FROM task_templates WHERE is_built_in = 1 ORDER BY title COLLATE NOCASE, id"
        )
        return [TaskTemplate.from_dict(r) for r in rows]

    def find_by_title(self, title: str) -> TaskTemplate | None:
        row = self._query_one(
            "SELECT * FROM task_templates WHERE title = ? COLLATE NOCASE LIMIT 1", (title,)
        )
        return TaskTemplate.from_dict(row) if row else None

    def add_templates(self, templates: list[TaskTemplate]) -> None:
        sql = """
            INSERT INTO task_templates (title, description, category, difficulty,
                estimated_duration, mood_range, default_labels, is_built_in, created_at, id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        self._execute("save templates", [(sql, self._template_params(t)) for t in templates])

    def update_template(self, template: TaskTemplate) -> None:
        sql = """
            UPDATE task_templates SET title = ?, description = ?, category = ?, difficulty = ?,
                estimated_duration = ?, mood_range = ?, default_labels = ?, is_built_in = ?,
                created_at = ?
            WHERE id = ?
        """
        self._execute("update template", [(sql, self._template_params(template))])

    def delete_template(self, template_id: str) -> bool:
        return self._execute(
            "delete template", [("DELETE FROM task_templates WHERE id = ?", (template_id,))]
        ) > 0

    # -------------------------------------------------------------------------
    # Suggestion history
    # -------------------------------------------------------------------------

    def add_suggestion(self, record: SuggestionRecord) -> None:
        self._execute("record suggestion", [(
            """
            INSERT INTO suggestions (id, template_id, mood_value, time_of_day,
                suggested_at, accepted, responded_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                record.id, record.template_id, record.mood_value, record.time_of_day.value,
                _ts(record.suggested_at), int(record.accepted), _ts(record.responded_at),
            ),
        )])

    def find_suggestion(self, suggestion_id: str) -> SuggestionRecord | None:
        row = self._query_one("SELECT * FROM suggestions WHERE id = ?", (suggestion_id,))
        return SuggestionRecord.from_dict(row) if row else None

    def update_suggestion(self, record: SuggestionRecord) -> None:
        self._execute("update suggestion", [(
            "UPDATE suggestions SET accepted = ?, responded_at = ? WHERE id = ?",
            (int(record.accepted), _ts(record.responded_at), record.id),
        )])

    def find_for_template(self, template_id: str) -> list[SuggestionRecord]:
        rows = self._query(
            "SELECT * FROM suggestions WHERE template_id = ? ORDER BY suggested_at",
            (template_id,),
        )
        return [SuggestionRecord.from_dict(r) for r in rows]

    def find_by_mood_band(self, template_id: str, low: int, high: int) -> list[SuggestionRecord]:
        rows = self._query(
            """
            SELECT * FROM suggestions
            WHERE template_id = ? AND mood_value >= ? AND mood_value <= ?
            ORDER BY suggested_at
            """,
            (template_id, low, high),
        )
        return [SuggestionRecord.from_dict(r) for r in rows]

    def all_suggestions(self) -> list[SuggestionRecord]:
        rows = self._query("SELECT * FROM suggestions ORDER BY suggested_at")
        return [SuggestionRecord.from_dict(r) for r in rows]

    # -------------------------------------------------------------------------
    # Tasks
    # -------------------------------------------------------------------------

    @staticmethod
    def _task_params(t: Task) -> tuple:
        return (
            t.title, t.description, t.category, t.difficulty, t.estimated_duration, t.labels,
            int(t.is_completed), _ts(t.completed_at), _ts(t.created_at), _ts(t.due_at), t.id,
        )

    def add_task(self, task: Task) -> None:
        self._execute("save task", [(
            """
            INSERT INTO tasks (title, description, category, difficulty, estimated_duration,
                labels, is_completed, completed_at, created_at, due_at, id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            self._task_params(task),
        )])

    def find_task(self, task_id: str) -> Task | None:
        row = self._query_one("SELECT * FROM tasks WHERE id = ?", (task_id,))
        return Task.from_dict(row) if row else None

    def list_tasks(self, completed: bool | None = None) -> list[Task]:
        if completed is None:
            rows = self._query("SELECT * FROM tasks ORDER BY due_at IS NULL, due_at, created_at")
        else:
            rows = self._query(
                "SELECT * FROM tasks WHERE is_completed = ? ORDER BY due_at IS NULL, due_at, created_at",
                (int(completed),),
            )
        return [Task.from_dict(r) for r in rows]

    def update_task(self, task: Task) -> None:
        self._execute("update task", [(
            """
            UPDATE tasks SET title = ?, description = ?, category = ?, difficulty = ?,
                estimated_duration = ?, labels = ?, is_completed = ?, completed_at = ?,
                created_at = ?, due_at = ?
            WHERE id = ?
            """,
            self._task_params(task),
        )])

    def delete_task(self, task_id: str) -> bool:
        return self._execute("delete task", [("DELETE FROM tasks WHERE id = ?", (task_id,))]) > 0

    # -------------------------------------------------------------------------
    # Moods
    # -------------------------------------------------------------------------

    def add_mood(self, entry: MoodEntry) -> None:
        self._execute("log mood", [(
            "INSERT INTO mood_entries (id, value, tags, recorded_at) VALUES (?, ?, ?, ?)",
            (entry.id, entry.value, entry.tags, _ts(entry.recorded_at)),
        )])

    def moods_since(self, since: datetime) -> list[MoodEntry]:
        rows = self._query(
            "SELECT * FROM mood_entries WHERE recorded_at >= ? ORDER BY recorded_at DESC",
            (_ts(since),),
        )
        return [MoodEntry.from_dict(r) for r in rows]

    def list_moods(self, limit: int | None = None) -> list[MoodEntry]:
        if limit is None:
            rows = self._query("SELECT * FROM mood_entries ORDER BY recorded_at DESC")
        else:
            rows = self._query(
                "SELECT * FROM mood_entries ORDER BY recorded_at DESC LIMIT ?", (limit,)
            )
        return [MoodEntry.from_dict(r) for r in rows]

    def delete_mood(self, entry_id: str) -> bool:
        return self._execute(
            "delete mood entry", [("DELETE FROM mood_entries WHERE id = ?", (entry_id,))]
        ) > 0

    def find_custom_mood_label(self, mood_value: int) -> CustomMoodLabel | None:
        row = self._query_one(
            "SELECT * FROM custom_mood_labels WHERE mood_value = ? LIMIT 1", (mood_value,)
        )
        return CustomMoodLabel.from_dict(row) if row else None

    def save_custom_mood_label(self, label: CustomMoodLabel) -> None:
        self._execute("save mood label", [(
            """
            INSERT INTO custom_mood_labels (id, mood_value, label, emoji, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(mood_value) DO UPDATE SET
                label = excluded.label, emoji = excluded.emoji, created_at = excluded.created_at
            """,
            (label.id, label.mood_value, label.label, label.emoji, _ts(label.created_at)),
        )])

    # -------------------------------------------------------------------------
    # Journal
    # -------------------------------------------------------------------------

    def add_journal_entry(self, entry: JournalEntry) -> None:
        self._execute("save journal entry", [(
            "INSERT INTO journal_entries (id, text, written_at) VALUES (?, ?, ?)",
            (entry.id, entry.text, _ts(entry.written_at)),
        )])

    def list_journal_entries(self) -> list[JournalEntry]:
        rows = self._query("SELECT * FROM journal_entries ORDER BY written_at DESC")
        return [JournalEntry.from_dict(r) for r in rows]

    def delete_journal_entry(self, entry_id: str) -> bool:
        return self._execute(
            "delete journal entry", [("DELETE FROM journal_entries WHERE id = ?", (entry_id,))]
        ) > 0

    # -------------------------------------------------------------------------
    # Labels
    # -------------------------------------------------------------------------

    @staticmethod
    def _label_params(label: TaskLabel) -> tuple:
        return (
            label.name, label.category, label.color_hex, label.emoji, int(label.is_built_in),
            label.usage_count, _ts(label.last_used_at), _ts(label.created_at), label.id,
        )

    def add_labels(self, labels: list[TaskLabel]) -> None:
        sql = """
            INSERT INTO labels (name, category, color_hex, emoji, is_built_in, usage_count,
                last_used_at, created_at, id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        self._execute("save labels", [(sql, self._label_params(lb)) for lb in labels])

    def find_label(self, label_id: str) -> TaskLabel | None:
        row = self._query_one("SELECT * FROM labels WHERE id = ?", (label_id,))
        return TaskLabel.from_dict(row) if row else None

    def update_label(self, label: TaskLabel) -> None:
        self._execute("update label", [(
            """
            UPDATE labels SET name = ?, category = ?, color_hex = ?, emoji = ?, is_built_in = ?,
                usage_count = ?, last_used_at = ?, created_at = ?
            WHERE id = ?
            """,
            self._label_params(label),
        )])

    def delete_label(self, label_id: str) -> bool:
        return self._execute("delete label", [("DELETE FROM labels WHERE id = ?", (label_id,))]) > 0

    def all_labels(self) -> list[TaskLabel]:
        rows = self._query("SELECT * FROM labels ORDER BY category, usage_count DESC, name")
        return [TaskLabel.from_dict(r) for r in rows]

    def find_built_in_labels(self) -> list[TaskLabel]:
        rows = self._query("SELECT * FROM labels WHERE is_built_in = 1")
        return [TaskLabel.from_dict(r) for r in rows]

    def labels_by_category(self, category: str) -> list[TaskLabel]:
        rows = self._query(
            "SELECT * FROM labels WHERE category = ? ORDER BY usage_count DESC, name",
            (category,),
        )
        return [TaskLabel.from_dict(r) for r in rows]

    def most_used_labels(self, limit: int) -> list[TaskLabel]:
        rows = self._query(
            "SELECT * FROM labels ORDER BY usage_count DESC, name LIMIT ?", (limit,)
        )
        return [TaskLabel.from_dict(r) for r in rows]

    def search_labels(self, query: str) -> list[TaskLabel]:
        # LIKE is case-insensitive for ASCII in SQLite
        rows = self._query(
            "SELECT * FROM labels WHERE name LIKE ? ORDER BY usage_count DESC, name",
            (f"%{query}%",),
        )
        return [TaskLabel.from_dict(r) for r in rows]

    def labels_by_names(self, names: list[str]) -> list[TaskLabel]:
        if not names:
            return []
        placeholders = ", ".join("?" for _ in names)
        rows = self._query(
            f"SELECT * FROM labels WHERE name IN ({placeholders}) ORDER BY name",
            tuple(names),
        )
        return [TaskLabel.from_dict(r) for r in rows]

    def label_categories(self) -> list[str]:
        rows = self._query("SELECT DISTINCT category FROM labels ORDER BY category")
        return [r["category"] for r in rows]
