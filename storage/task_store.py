"""JSON file store for the task collection."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from core.errors import ClearError, SerializationError, WriteError
from core.log import get_logger
from core.settings import TASKS_PATH
from models.task import Task

logger = get_logger("store")


@dataclass(frozen=True)
class LoadResult:
    """Snapshot returned by :meth:`TaskStore.load`.

    ``error`` is ``None`` both for a healthy file and for a missing one; it is
    only set when a file exists but cannot be used.
    """

    tasks: List[Task] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class MalformedTasksFile(ValueError):
    pass


REQUIRED_FIELDS = ("id", "name", "date", "done")


def _decode(text: str) -> List[Task]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise MalformedTasksFile(f"expected a list of tasks, got {type(data).__name__}")
    tasks = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise MalformedTasksFile(f"record {index} is a {type(item).__name__}, not an object")
        missing = [name for name in REQUIRED_FIELDS if name not in item]
        if missing:
            raise MalformedTasksFile(f"record {index} is missing {', '.join(missing)}")
        # no coercion of "1" or "yes" from the file
        tasks.append(Task.model_validate(item, strict=True))
    seen = set()
    for task in tasks:
        if task.id in seen:
            raise MalformedTasksFile(f"duplicate task id {task.id}")
        seen.add(task.id)
    return tasks


def _encode(tasks: Iterable[Task]) -> str:
    return json.dumps([task.to_record() for task in tasks], ensure_ascii=False, indent=4)


class TaskStore:
    """Owns the in-memory task list and its file."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path or TASKS_PATH)
        self.tasks: List[Task] = []

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> LoadResult:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.tasks = []
            return LoadResult()
        except (OSError, UnicodeDecodeError) as exc:
            return self._failed(f"Error loading tasks: {exc}")

        try:
            tasks = _decode(text)
        except (json.JSONDecodeError, RecursionError, ValidationError, MalformedTasksFile) as exc:
            return self._failed(f"Error loading tasks: {self.path.name} is malformed ({_summary(exc)})")

        self.tasks = tasks
        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return LoadResult(tasks=list(tasks))

    def _failed(self, message: str) -> LoadResult:
        logger.warning(message)
        self.tasks = []
        return LoadResult(error=message)

    def save(self, tasks: Optional[Iterable[Task]] = None) -> None:
        """Atomically replace the file with ``tasks`` (default: the in-memory list)."""

        items = list(self.tasks if tasks is None else tasks)
        try:
            payload = _encode(items)
        except (TypeError, ValueError) as exc:
            logger.error("Error serializing tasks: %s", exc)
            raise SerializationError(f"Error serializing tasks: {exc}", exc) from exc

        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            logger.error("Error saving tasks to %s: %s", self.path, exc)
            raise WriteError(f"Error saving tasks: {exc}", exc) from exc
        finally:
            if tmp.exists():
                try:
                    tmp.unlink()
                except OSError:
                    pass
        if tasks is not None:
            self.tasks = items
        logger.debug("Saved %d task(s) to %s", len(items), self.path)

    def delete(self) -> bool:
        """Remove the file. ``False`` when there was nothing to remove."""

        try:
            self.path.unlink()
        except FileNotFoundError:
            removed = False
        except OSError as exc:
            logger.error("Error cleaning tasks at %s: %s", self.path, exc)
            raise ClearError(f"Error cleaning tasks: {exc}", exc) from exc
        else:
            removed = True
        self.tasks = []
        return removed


def _summary(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        where = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", str(exc))
        return f"{where}: {msg}" if where else msg
    return str(exc)


__all__ = ["LoadResult", "TaskStore"]
