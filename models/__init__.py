"""Domain models exposed by the ToDo application."""
from .task import Task

__all__ = ["Task"]
