"""
Tool: Label Manager
Purpose: Built-in and custom task labels with usage tracking

Usage:
    labels = LabelManager(store)
    labels.seed_built_ins()
    labels.record_usage("Low Energy, Home")
    labels.most_used(limit=5)
"""

from __future__ import annotations

import random
import re
from datetime import datetime
from typing import Callable, Optional

from domotive.exceptions import LabelValidationError, ProtectedLabelError, StorageError
from domotive.labels import BUILT_IN_LABELS, LABEL_COLORS
from domotive.logging_config import get_logger
from domotive.models import TaskLabel
from domotive.storage.base import LabelRepository

logger = get_logger(__name__)

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_label_string(label_string: Optional[str]) -> list[str]:
    """Split 'Home, Quick' into ['Home', 'Quick'], dropping blanks."""
    if not label_string:
        return []
    return [name.strip() for name in label_string.split(",") if name.strip()]


def labels_to_string(labels: list[TaskLabel]) -> str:
    return ", ".join(label.name for label in labels if label.name)


def random_color() -> str:
    return random.choice(LABEL_COLORS)


class LabelManager:
    def __init__(self, repository: LabelRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    def seed_built_ins(self) -> int:
        """Insert the built-in labels once. Returns how many were added."""
        if self.repository.find_built_in_labels():
            return 0
        now = self.clock()
        labels = [
            TaskLabel(name=name, category=category, color_hex=color, emoji=emoji,
                      is_built_in=True, created_at=now)
            for name, category, color, emoji in BUILT_IN_LABELS
        ]
        self.repository.add_labels(labels)
        logger.info(f"Initialized {len(labels)} built-in labels")
        return len(labels)

    def _validate(self, name: str, color_hex: str) -> None:
        if not name or not name.strip():
            raise LabelValidationError("name must not be empty")
        if not HEX_COLOR.match(color_hex):
            raise LabelValidationError(f"'{color_hex}' is not a hex colour")

    def create_label(
        self,
        name: str,
        category: str,
        color_hex: Optional[str] = None,
        emoji: str = "",
    ) -> TaskLabel:
        color_hex = color_hex or random_color()
        self._validate(name, color_hex)
        label = TaskLabel(
            name=name.strip(),
            category=category,
            color_hex=color_hex,
            emoji=emoji,
            created_at=self.clock(),
        )
        self.repository.add_labels([label])
        return label

    def update_label(
        self,
        label_id: str,
        name: Optional[str] = None,
        category: Optional[str] = None,
        color_hex: Optional[str] = None,
        emoji: Optional[str] = None,
    ) -> TaskLabel:
        label = self.repository.find_label(label_id)
        if label is None:
            raise LabelValidationError(f"label {label_id} not found")
        if name is not None:
            label.name = name.strip()
        if category is not None:
            label.category = category
        if color_hex is not None:
            label.color_hex = color_hex
        if emoji is not None:
            label.emoji = emoji
        self._validate(label.name, label.color_hex)
        self.repository.update_label(label)
        return label

    def delete_label(self, label_id: str) -> bool:
        label = self.repository.find_label(label_id)
        if label is None:
            return False
        if label.is_built_in:
            raise ProtectedLabelError(label_id)
        return self.repository.delete_label(label_id)

    def increment_usage(self, label: TaskLabel) -> None:
        """Bump the usage counter. Best effort: failures are logged and skipped."""
        label.usage_count += 1
        label.last_used_at = self.clock()
        try:
            self.repository.update_label(label)
        except StorageError as e:
            logger.warning(f"Usage of label '{label.name}' not recorded: {e.message}")

    def record_usage(self, label_string: Optional[str]) -> int:
        """Increment usage for every known label named in `label_string`."""
        labels = self.labels_from_string(label_string)
        for label in labels:
            self.increment_usage(label)
        return len(labels)

    # -------------------------------------------------------------------------
    # Retrieval
    # -------------------------------------------------------------------------

    def all(self) -> list[TaskLabel]:
        return self.repository.all_labels()

    def by_category(self, category: str) -> list[TaskLabel]:
        return self.repository.labels_by_category(category)

    def most_used(self, limit: int = 10) -> list[TaskLabel]:
        return self.repository.most_used_labels(limit)

    def search(self, query: str) -> list[TaskLabel]:
        if not query:
            return self.all()
        return self.repository.search_labels(query)

    def labels_from_string(self, label_string: Optional[str]) -> list[TaskLabel]:
        return self.repository.labels_by_names(parse_label_string(label_string))

    def categories(self) -> list[str]:
        return self.repository.label_categories()
