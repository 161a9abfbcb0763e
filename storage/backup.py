"""Dated copies of the task file."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from pathlib import Path
from shutil import copy2
from typing import Iterator, Tuple

from core.log import get_logger

logger = get_logger("backup")

DAY_FORMAT = "%Y-%m-%d"


def _holds_tasks(path: Path) -> bool:
    """False for an empty file or an empty ``[]`` list; nothing worth keeping."""

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        # unreadable as text: keep a copy so it can be inspected
        return True
    return text.strip() not in ("", "[]")


def _dated_copies(backups: Path, tasks_file: Path) -> Iterator[Tuple[date, Path]]:
    prefix = f"{tasks_file.stem}_"
    for copy in backups.glob(f"{prefix}*{tasks_file.suffix}"):
        try:
            day = datetime.strptime(copy.stem[len(prefix):], DAY_FORMAT).date()
        except ValueError:
            continue
        yield day, copy


def prune_backups(backups: Path, tasks_file: Path, today: date, keep_days: int) -> int:
    """Delete copies of ``tasks_file`` older than ``keep_days``; returns how many went."""

    if keep_days <= 0:
        return 0
    cutoff = today - timedelta(days=keep_days - 1)
    removed = 0
    for day, copy in _dated_copies(backups, tasks_file):
        if day >= cutoff:
            continue
        try:
            copy.unlink()
            removed += 1
        except OSError as exc:
            logger.warning("Could not remove old backup %s: %s", copy, exc)
    return removed


def ensure_daily_backup(
    source: str | Path,
    backup_dir: str | Path,
    *,
    keep_days: int = 7,
) -> Path | None:
    """Keep one ``task_<YYYY-MM-DD>.json`` copy of the task file per day.

    A missing file, or one with no tasks in it, is not copied. Returns the
    copy written today, or ``None``.
    """

    tasks_file = Path(source)
    if not tasks_file.exists():
        return None

    backups = Path(backup_dir)
    backups.mkdir(parents=True, exist_ok=True)
    today = datetime.now().date()

    written: Path | None = None
    target = backups / f"{tasks_file.stem}_{today.strftime(DAY_FORMAT)}{tasks_file.suffix}"
    if target.exists():
        logger.debug("Backup for %s already taken today", tasks_file.name)
    elif not _holds_tasks(tasks_file):
        logger.debug("Skipping backup of empty %s", tasks_file.name)
    else:
        copy2(tasks_file, target)
        written = target
        logger.info("Backed up %s to %s", tasks_file, target)

    prune_backups(backups, tasks_file, today, keep_days)
    return written


def quarantine_file(source: str | Path) -> Path | None:
    """Keep a timestamped copy of a file that failed to load before it gets overwritten."""

    src = Path(source)
    if not src.exists():
        return None
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    destination = src.with_name(f"{src.name}.corrupt-{stamp}")
    copy2(src, destination)
    logger.warning("Malformed %s copied to %s", src.name, destination)
    return destination


__all__ = ["ensure_daily_backup", "prune_backups", "quarantine_file"]
