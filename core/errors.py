"""Exception hierarchy shared by the store, the services and both front-ends."""
from __future__ import annotations

from typing import Optional


class TodoError(Exception):
    """Base class for every error raised by the task core."""


class SaveError(TodoError):
    """The task collection could not be persisted.

    ``cause`` keeps the underlying exception for logging; the message is what
    front-ends show to the user.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class SerializationError(SaveError):
    """The collection could not be encoded as JSON."""


class WriteError(SaveError):
    """Writing or replacing the task file failed."""


class ClearError(TodoError):
    """The task file exists but could not be removed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class TaskNotFoundError(TodoError, LookupError):
    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class DateParseError(TodoError, ValueError):
    def __init__(self, value: object, expected: str):
        super().__init__(f"Invalid date {value!r}, expected format {expected}")
        self.value = value
        self.expected = expected


class InvalidTaskError(TodoError, ValueError):
    """Rejected task input (e.g. an empty name)."""


__all__ = [
    "ClearError",
    "DateParseError",
    "InvalidTaskError",
    "SaveError",
    "SerializationError",
    "TaskNotFoundError",
    "TodoError",
    "WriteError",
]
