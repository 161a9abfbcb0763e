import os
import sys
import tempfile
from pathlib import Path

# must happen before core.settings is imported anywhere
os.environ.setdefault("TODO_DATA_DIR", tempfile.mkdtemp(prefix="todo-tests-"))

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from services.tasks import TaskService
from storage.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path):
    return tmp_path / "task.json"


@pytest.fixture()
def store(tasks_path):
    return TaskStore(tasks_path)


@pytest.fixture()
def service(store):
    return TaskService(store)
