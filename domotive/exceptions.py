from typing import Any, Dict, Optional


class DoMotiveError(Exception):
    """Base exception for recoverable user-facing errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StorageError(DoMotiveError):
    """Raised when a write the user explicitly asked for could not be stored"""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Could not {operation}: {reason}",
            {"operation": operation, "reason": reason}
        )


class TemplateValidationError(DoMotiveError):
    """Raised when template fields are invalid"""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid template {field}: {reason}",
            {"field": field, "reason": reason}
        )


class DuplicateTemplateError(DoMotiveError):
    """Raised when a template with the same title already exists"""

    def __init__(self, title: str, existing_id: str):
        super().__init__(
            f"A template named '{title}' already exists",
            {"title": title, "existing_id": existing_id}
        )


class TemplateNotFoundError(DoMotiveError):
    def __init__(self, template_id: str):
        super().__init__(
            f"Template {template_id} not found",
            {"template_id": template_id}
        )


class ProtectedTemplateError(DoMotiveError):
    """Raised when trying to change or remove a built-in template"""

    def __init__(self, template_id: str, operation: str):
        super().__init__(
            f"Built-in template {template_id} cannot be {operation}",
            {"template_id": template_id, "operation": operation}
        )


class MoodValidationError(DoMotiveError):
    def __init__(self, value: Any):
        super().__init__(
            f"Mood value must be an integer between 1 and 10, got {value!r}",
            {"value": value}
        )


class JournalValidationError(DoMotiveError):
    def __init__(self, reason: str):
        super().__init__(f"Invalid journal entry: {reason}", {"reason": reason})


class LabelValidationError(DoMotiveError):
    def __init__(self, reason: str):
        super().__init__(f"Invalid label: {reason}", {"reason": reason})


class ProtectedLabelError(DoMotiveError):
    def __init__(self, label_id: str):
        super().__init__(
            f"Built-in label {label_id} cannot be deleted",
            {"label_id": label_id}
        )


class TaskNotFoundError(DoMotiveError):
    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found", {"task_id": task_id})


class SuggestionNotFoundError(DoMotiveError):
    def __init__(self, suggestion_id: str):
        super().__init__(
            f"Suggestion {suggestion_id} not found",
            {"suggestion_id": suggestion_id}
        )


class TaskValidationError(DoMotiveError):
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid task {field}: {reason}",
            {"field": field, "reason": reason}
        )


class SuggestionAlreadyAcceptedError(DoMotiveError):
    """Raised when a suggestion that already became a task is accepted again"""

    def __init__(self, suggestion_id: str):
        super().__init__(
            f"Suggestion {suggestion_id} was already accepted",
            {"suggestion_id": suggestion_id}
        )
