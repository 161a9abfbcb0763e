"""Helpers for the fixed task timestamp format (naive local time, second precision)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from core.errors import DateParseError

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT_HINT = "YYYY-MM-DD HH:MM:SS"


def now_local() -> datetime:
    """Current local wall-clock time without tzinfo, truncated to seconds."""

    return datetime.now().replace(microsecond=0)


def parse_task_date(value: Union[str, datetime]) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS``.

    Raises :class:`DateParseError` for anything else; the format is strict so
    that a stored timestamp always formats back to the same text.
    """

    if isinstance(value, datetime):
        return normalize_task_date(value)
    if not isinstance(value, str):
        raise DateParseError(value, DATE_FORMAT_HINT)
    text = value.strip()
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except ValueError as exc:
        raise DateParseError(value, DATE_FORMAT_HINT) from exc


def normalize_task_date(dt: datetime) -> datetime:
    """Drop tzinfo (converting to local time first) and microseconds."""

    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt.replace(microsecond=0)


def format_task_date(dt: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def resolve_task_date(value: Optional[Union[str, datetime]]) -> datetime:
    """Explicit value if given, else :func:`now_local`."""

    if value is None:
        return now_local()
    return parse_task_date(value)


__all__ = [
    "DATE_FORMAT",
    "DATE_FORMAT_HINT",
    "format_task_date",
    "normalize_task_date",
    "now_local",
    "parse_task_date",
    "resolve_task_date",
]
