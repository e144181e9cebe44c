"""Tests for domotive/tasks/factory.py"""

from datetime import datetime, timedelta

import pytest

from domotive.tasks.factory import create_task


class TestCreateTask:
    """Tests for template -> task conversion."""

    def test_copies_template_fields(self, exercise_template):
        now = datetime(2026, 10, 19, 9, 0)

        task = create_task(exercise_template, now=now)

        assert task.title == exercise_template.title
        assert task.description == exercise_template.description
        assert task.category == "Exercise"
        assert task.difficulty == 4
        assert task.estimated_duration == 30
        assert task.labels == "High Energy, Outdoors"
        assert task.is_completed is False
        assert task.created_at == now
        assert task.due_at == now + timedelta(days=1)

    def test_custom_due_offset(self, exercise_template):
        now = datetime(2026, 10, 19, 9, 0)
        task = create_task(exercise_template, now=now, due_offset_days=3)
        assert task.due_at == datetime(2026, 10, 22, 9, 0)

    def test_each_task_gets_new_id(self, exercise_template):
        first = create_task(exercise_template)
        second = create_task(exercise_template)
        assert first.id != second.id
        assert first.id != exercise_template.id

    def test_later_template_edits_do_not_reach_task(self, exercise_template):
        task = create_task(exercise_template)
        exercise_template.title = "Renamed"
        assert task.title == "Go for a Run"

    def test_requires_template(self):
        with pytest.raises(ValueError):
            create_task(None)
