"""
Tool: Template Catalog
Purpose: Manage the task templates that suggestions are drawn from

Built-in templates are seeded once (when none exist yet) and are read-only
afterwards. User templates can be created, edited and deleted.

Usage:
    catalog = TemplateCatalog(store)
    catalog.seed_built_ins()
    catalog.create(title="Call Mum", category="Social", difficulty=2,
                   estimated_duration=20, mood_range="5-10")
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

from domotive.exceptions import (
    DuplicateTemplateError,
    ProtectedTemplateError,
    TemplateNotFoundError,
    TemplateValidationError,
)
from domotive.logging_config import get_logger
from domotive.models import TaskTemplate
from domotive.storage.base import TemplateRepository
from domotive.templates import MAX_DIFFICULTY, MIN_DIFFICULTY
from domotive.templates.builtin import BUILT_IN_TEMPLATES

logger = get_logger(__name__)

EDITABLE_FIELDS = (
    "title",
    "description",
    "category",
    "difficulty",
    "estimated_duration",
    "mood_range",
    "default_labels",
)


def validate_template(template: TaskTemplate) -> None:
    if not template.title or not template.title.strip():
        raise TemplateValidationError("title", "must not be empty")
    if not MIN_DIFFICULTY <= template.difficulty <= MAX_DIFFICULTY:
        raise TemplateValidationError(
            "difficulty", f"must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}"
        )
    if template.estimated_duration <= 0:
        raise TemplateValidationError("estimated_duration", "must be a positive number of minutes")


class TemplateCatalog:
    def __init__(
        self, repository: TemplateRepository, clock: Callable[[], datetime] = datetime.now
    ):
        self.repository = repository
        self.clock = clock

    def seed_built_ins(self) -> int:
        """
        Insert the built-in templates if no built-in exists yet.

        Seeding is all-or-nothing: once any built-in is present nothing is
        merged or diffed.

        Returns:
            Number of templates inserted (0 when skipped)
        """
        if self.repository.find_built_in():
            return 0

        now = self.clock()
        templates = [
            TaskTemplate(
                title=title,
                description=description,
                category=category,
                difficulty=difficulty,
                estimated_duration=duration,
                mood_range=mood_range,
                default_labels=labels,
                is_built_in=True,
                created_at=now,
            )
            for title, description, category, difficulty, duration, mood_range, labels
            in BUILT_IN_TEMPLATES
        ]
        self.repository.add_templates(templates)
        logger.info(f"Initialized {len(templates)} built-in task templates")
        return len(templates)

    def list_all(self) -> list[TaskTemplate]:
        """Built-ins first, then by category and title."""
        templates = self.repository.all_templates()
        return sorted(
            templates,
            key=lambda t: (not t.is_built_in, (t.category or "").lower(), t.title.lower()),
        )

    def list_by_category(self, category: str) -> list[TaskTemplate]:
        return self.repository.find_by_category(category)

    def get(self, template_id: str) -> TaskTemplate:
        template = self.repository.find_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def _check_unique_title(self, title: str, exclude_id: Optional[str] = None) -> None:
        existing = self.repository.find_by_title(title.strip())
        if existing is not None and existing.id != exclude_id:
            raise DuplicateTemplateError(title, existing.id)

    def create(
        self,
        title: str,
        description: str = "",
        category: Optional[str] = None,
        difficulty: int = 1,
        estimated_duration: int = 15,
        mood_range: Optional[str] = None,
        default_labels: str = "",
    ) -> TaskTemplate:
        """
        Create a user template.

        Raises:
            TemplateValidationError: empty title, difficulty outside 1-5 or
                non-positive duration
            DuplicateTemplateError: another template has the same title
            StorageError: the template could not be saved
        """
        template = TaskTemplate(
            title=title.strip() if title else "",
            description=description,
            category=category,
            difficulty=difficulty,
            estimated_duration=estimated_duration,
            mood_range=mood_range,
            default_labels=default_labels,
            is_built_in=False,
            created_at=self.clock(),
        )
        validate_template(template)
        self._check_unique_title(template.title)

        self.repository.add_templates([template])
        logger.info(f"Created template {template.id} ({template.title})")
        return template

    def update(self, template_id: str, **fields: Any) -> TaskTemplate:
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise TemplateValidationError(", ".join(sorted(unknown)), "not an editable field")

        template = self.get(template_id)
        if template.is_built_in:
            raise ProtectedTemplateError(template_id, "edited")

        for name, value in fields.items():
            setattr(template, name, value)
        if template.title:
            template.title = template.title.strip()
        validate_template(template)
        if "title" in fields:
            self._check_unique_title(template.title, exclude_id=template_id)

        self.repository.update_template(template)
        return template

    def delete(self, template_id: str) -> bool:
        """
        Delete a user template. History rows that reference it are kept.

        Returns:
            False if no such template exists
        """
        template = self.repository.find_template(template_id)
        if template is None:
            return False
        if template.is_built_in:
            raise ProtectedTemplateError(template_id, "deleted")
        return self.repository.delete_template(template_id)
