"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``."""

    platform_id = (platform or sys.platform).lower()
    environ = dict(env or os.environ)
    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = Path(home_dir / "Library" / "Application Support")
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return (base.expanduser() / sanitized)


def resolve_data_dir(
    app_name: str,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> Path:
    """``$TODO_DATA_DIR`` wins over the platform default."""

    environ = dict(env or os.environ)
    override = (environ.get("TODO_DATA_DIR") or "").strip()
    if override:
        return Path(override).expanduser()
    return get_default_data_dir(app_name, env=environ)


APP_NAME = "ToDo"
APP_VERSION = "0.3.0"


DATA_DIR = resolve_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"
BACKUP_DIR = DATA_DIR / "backups"

for _dir in (DATA_DIR, LOG_DIR, BACKUP_DIR):
    _dir.mkdir(parents=True, exist_ok=True)


TASKS_PATH = DATA_DIR / "task.json"
CONFIG_PATH = DATA_DIR / "config.json"
LOG_PATH = LOG_DIR / "todo.log"
LOG_LEVEL = (os.environ.get("TODO_LOG_LEVEL") or "INFO").strip().upper()


@dataclass(frozen=True)
class ThemeColors:
    surface_bg: str = "#F1F5F9"
    text_subtle: str = "#6B7280"
    accent: str = "#EF4444"
    error_bg: str = "#FEE2E2"
    error_text: str = "#B91C1C"


@dataclass(frozen=True)
class UISettings:
    app_title: str = APP_NAME
    header: str = "Task list"
    theme_mode: str = "system"
    color_scheme_seed: str = "#4F46E5"
    window_width: int = 720
    window_height: int = 640
    window_min_width: int = 480
    window_min_height: int = 400
    content_width_ratio: float = 0.85
    date_display_format: str = "%d/%m/%Y %H:%M:%S"
    theme: ThemeColors = ThemeColors()


UI = UISettings()


@dataclass(frozen=True)
class BackupSettings:
    enabled: bool = True
    directory: Path = BACKUP_DIR
    keep_days: int = 7


BACKUP = BackupSettings()


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DATA_DIR",
    "LOG_DIR",
    "BACKUP_DIR",
    "TASKS_PATH",
    "CONFIG_PATH",
    "LOG_PATH",
    "LOG_LEVEL",
    "UI",
    "BACKUP",
    "get_default_data_dir",
    "resolve_data_dir",
]
