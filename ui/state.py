"""GUI application state and the only code path that mutates it."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.errors import ClearError, InvalidTaskError, SaveError, TaskNotFoundError
from models.task import Task
from services.tasks import TaskService


@dataclass
class AppState:
    tasks: List[Task] = field(default_factory=list)
    error_message: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.tasks


class TaskListController:
    """Runs task operations for the GUI and records their outcome in :class:`AppState`.

    Errors never escape: they end up in ``state.error_message`` so the window
    keeps working.
    """

    def __init__(self, service: Optional[TaskService] = None, state: Optional[AppState] = None):
        self.svc = service or TaskService()
        self.state = state or AppState()

    def _snapshot(self) -> None:
        self.state.tasks = list(self.svc.store.tasks)

    def refresh(self) -> AppState:
        result = self.svc.refresh()
        self.state.tasks = list(result.tasks)
        self.state.error_message = result.error or ""
        return self.state

    def add(self, name: str, description: Optional[str] = None) -> Optional[Task]:
        try:
            task = self.svc.add(name, description)
        except InvalidTaskError as e:
            self.state.error_message = str(e)
            return None
        except SaveError as e:
            self.state.error_message = str(e)
            self._snapshot()
            return None
        self.state.error_message = ""
        self._snapshot()
        return task

    def set_done(self, task_id: int, done: bool) -> None:
        try:
            self.svc.set_done(task_id, done)
        except (TaskNotFoundError, SaveError) as e:
            self.state.error_message = str(e)
        else:
            self.state.error_message = ""
        self._snapshot()

    def clear(self) -> None:
        try:
            self.svc.clear()
        except ClearError as e:
            self.state.error_message = str(e)
        else:
            self.state.error_message = ""
        self._snapshot()

    def dismiss_error(self) -> None:
        self.state.error_message = ""


__all__ = ["AppState", "TaskListController"]
