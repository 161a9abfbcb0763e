# services/tasks.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from core.errors import InvalidTaskError, SaveError, TaskNotFoundError
from core.log import get_logger
from core.settings import CONFIG_PATH
from models.task import Task
from storage.backup import quarantine_file
from storage.config import load_config, update_config
from storage.task_store import LoadResult, TaskStore
from utils.datetime_utils import resolve_task_date


class TaskService:
    """Task operations shared by the CLI and the GUI.

    Every operation reloads the file first: the store is the single source of
    truth and a second front-end may have written in between.
    """

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        config_path: Path | str | None = None,
    ) -> None:
        self.store = store or TaskStore()
        # the id counter lives next to the task file
        self.config_path = Path(config_path) if config_path else self.store.path.with_name(CONFIG_PATH.name)
        self.logger = get_logger("tasks")

    # ---------- queries ----------
    def refresh(self) -> LoadResult:
        return self.store.load()

    def list_tasks(self) -> List[Task]:
        return list(self.refresh().tasks)

    def get(self, task_id: int) -> Optional[Task]:
        for task in self.store.tasks:
            if task.id == task_id:
                return task
        return None

    # ---------- mutations ----------
    def add(
        self,
        name: str,
        description: Optional[str] = None,
        date: Optional[Union[str, datetime]] = None,
    ) -> Task:
        cleaned = (name or "").strip()
        if not cleaned:
            raise InvalidTaskError("Task name must not be empty")
        when = resolve_task_date(date)

        loaded = self.refresh()
        if loaded.failed:
            try:
                quarantine_file(self.store.path)
            except OSError as exc:
                raise SaveError(f"Refusing to overwrite unreadable task file: {exc}", exc) from exc

        task = Task(
            id=self._allocate_id(),
            name=cleaned,
            description=(description or "").strip() or None,
            date=when,
            done=False,
        )
        # kept in memory even if the save below fails
        self.store.tasks.append(task)
        self.store.save()
        self.logger.info("Task %s added: %s", task.id, task.name)
        return task

    def _require(self, task_id: int) -> Task:
        self.refresh()
        task = self.get(task_id)
        if task is None:
            self.logger.info("Task %s not found", task_id)
            raise TaskNotFoundError(task_id)
        return task

    def _apply_done(self, task: Task, done: bool) -> Task:
        if task.done == done:
            return task
        task.done = done
        self.store.save()
        self.logger.info("Task %s marked as %s", task.id, task.status)
        return task

    def set_done(self, task_id: int, done: bool = True) -> Task:
        return self._apply_done(self._require(task_id), done)

    def mark_done(self, task_id: int) -> Task:
        return self.set_done(task_id, True)

    def toggle_done(self, task_id: int) -> Task:
        task = self._require(task_id)
        return self._apply_done(task, not task.done)

    def clear(self) -> bool:
        removed = self.store.delete()
        self.logger.info("Tasks cleaned (%s)", "file removed" if removed else "nothing to remove")
        return removed

    # ---------- ids ----------
    def _allocate_id(self) -> int:
        """Next id from the persisted high-water mark; never reuses an id."""

        cfg = load_config(self.config_path)
        highest = max((t.id for t in self.store.tasks), default=0)
        next_id = max(cfg.last_task_id, highest) + 1
        try:
            update_config(self.config_path, last_task_id=next_id)
        except OSError as exc:
            self.logger.error("Error saving id counter: %s", exc)
            raise SaveError(f"Error saving tasks: {exc}", exc) from exc
        return next_id


__all__ = ["TaskService"]
