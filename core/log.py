from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from core.settings import LOG_LEVEL, LOG_PATH

ROOT_LOGGER = "todo"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _ensure_root(path: Path = LOG_PATH) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``todo`` (or ``todo.<name>``) with the rotating file handler attached."""

    root = _ensure_root()
    if not name:
        return root
    return root.getChild(name)


def enable_console(level: int = logging.DEBUG) -> logging.Handler:
    """Echo log records to stderr (CLI ``--verbose``)."""

    root = _ensure_root()
    for handler in root.handlers:
        if getattr(handler, "name", None) == "todo-console":
            return handler
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name("todo-console")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    root.addHandler(handler)
    root.setLevel(min(root.level, level))
    return handler


__all__ = ["LOG_FORMAT", "ROOT_LOGGER", "enable_console", "get_logger"]
