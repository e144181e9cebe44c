"""
Tool: Task List
Purpose: Add, list, complete and delete tasks

Tasks come from two places: accepted suggestions (see
domotive.suggestions.engine.TaskEngine.accept_suggestion) and manual entry.

Usage:
    task_list = TaskList(store, labels=LabelManager(store))
    task = task_list.add_manual("Call the bank", due_at=datetime(2026, 10, 20, 9))
    task_list.toggle_completion(task.id)
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from domotive.exceptions import TaskNotFoundError, TaskValidationError
from domotive.labels.manager import LabelManager
from domotive.logging_config import get_logger
from domotive.models import Task
from domotive.storage.base import TaskRepository

logger = get_logger(__name__)


class TaskList:
    def __init__(
        self,
        repository: TaskRepository,
        labels: Optional[LabelManager] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repository = repository
        self.labels = labels
        self.clock = clock

    def add(self, task: Task) -> Task:
        """Store a task and count its labels as used."""
        if not task.title or not task.title.strip():
            raise TaskValidationError("title", "must not be empty")
        self.repository.add_task(task)
        if self.labels is not None and task.labels:
            self.labels.record_usage(task.labels)
        return task

    def add_manual(
        self,
        title: str,
        description: str = "",
        category: Optional[str] = None,
        difficulty: int = 1,
        estimated_duration: int = 15,
        labels: str = "",
        due_at: Optional[datetime] = None,
    ) -> Task:
        if not 1 <= difficulty <= 5:
            raise TaskValidationError("difficulty", "must be between 1 and 5")
        task = Task(
            title=title.strip() if title else title,
            description=description,
            category=category,
            difficulty=difficulty,
            estimated_duration=estimated_duration,
            labels=labels,
            created_at=self.clock(),
            due_at=due_at,
        )
        return self.add(task)

    def get(self, task_id: str) -> Task:
        task = self.repository.find_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def all(self) -> list[Task]:
        return self.repository.list_tasks()

    def pending(self) -> list[Task]:
        return self.repository.list_tasks(completed=False)

    def completed(self) -> list[Task]:
        return self.repository.list_tasks(completed=True)

    def toggle_completion(self, task_id: str) -> Task:
        task = self.get(task_id)
        task.is_completed = not task.is_completed
        task.completed_at = self.clock() if task.is_completed else None
        self.repository.update_task(task)
        logger.debug(f"Task {task_id} completed={task.is_completed}")
        return task

    def delete(self, task_id: str) -> bool:
        return self.repository.delete_task(task_id)
