# models/task.py
from typing import Any, Dict, Optional
from datetime import datetime

from pydantic import field_validator
from sqlmodel import SQLModel, Field

from utils.datetime_utils import format_task_date, parse_task_date


class Task(SQLModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    date: datetime
    done: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("name must not be blank")
        return cleaned

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        # only the fixed text format or a datetime; no unix timestamps
        return parse_task_date(value)

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict in on-disk field order."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "date": format_task_date(self.date),
            "done": self.done,
        }

    @property
    def status(self) -> str:
        return "done" if self.done else "pending"
