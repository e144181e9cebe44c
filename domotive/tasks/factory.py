"""Template -> task conversion."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from domotive.models import Task, TaskTemplate
from domotive.tasks import DEFAULT_DUE_OFFSET_DAYS


def create_task(
    template: TaskTemplate,
    now: Optional[datetime] = None,
    due_offset_days: int = DEFAULT_DUE_OFFSET_DAYS,
) -> Task:
    """
    Build a new, unsaved task from a template.

    Title, description, category, difficulty, duration and default labels
    are copied verbatim. The task is due `due_offset_days` after creation.

    Raises:
        ValueError: template is None
    """
    if template is None:
        raise ValueError("A template is required to create a task")

    now = now or datetime.now()
    return Task(
        title=template.title,
        description=template.description,
        category=template.category,
        difficulty=template.difficulty,
        estimated_duration=template.estimated_duration,
        labels=template.default_labels,
        is_completed=False,
        created_at=now,
        due_at=now + timedelta(days=due_offset_days),
    )
