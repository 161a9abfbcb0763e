# storage/bootstrap.py
from pathlib import Path
from typing import Optional

from core.log import get_logger
from core.settings import BACKUP, TASKS_PATH
from storage.backup import ensure_daily_backup

logger = get_logger("bootstrap")


def init_storage(tasks_path: Optional[Path] = None) -> Path:
    """Prepare the data directory and take today's backup of the task file."""

    path = Path(tasks_path or TASKS_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    if BACKUP.enabled:
        try:
            ensure_daily_backup(path, BACKUP.directory, keep_days=BACKUP.keep_days)
        except OSError as exc:
            logger.warning("Daily backup of %s failed: %s", path, exc)
    return path
