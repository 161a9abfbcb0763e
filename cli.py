# cli.py
"""Command-line front-end: ``todo add|list|done|undo|clean``."""
from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.errors import ClearError, InvalidTaskError, SaveError, TaskNotFoundError, DateParseError
from core.log import enable_console
from core.settings import APP_NAME, APP_VERSION
from models.task import Task
from services.tasks import TaskService
from storage.bootstrap import init_storage
from storage.task_store import TaskStore
from utils.datetime_utils import DATE_FORMAT_HINT, format_task_date, parse_task_date

COLUMNS = ("Id", "Name", "Description", "Date", "Done")


def eprint(*args) -> None:
    print(*args, file=sys.stderr)


def _date_arg(value: str) -> datetime:
    try:
        return parse_task_date(value)
    except DateParseError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected {DATE_FORMAT_HINT}")


def _row(task: Task) -> List[str]:
    return [
        str(task.id),
        task.name,
        task.description or "",
        format_task_date(task.date),
        "true" if task.done else "false",
    ]


def render_table(tasks: Sequence[Task]) -> str:
    rows = [list(COLUMNS)] + [_row(t) for t in tasks]
    widths = [max(len(r[i]) for r in rows) for i in range(len(COLUMNS))]

    def line(cells: List[str]) -> str:
        return "│ " + " │ ".join(c.ljust(w) for c, w in zip(cells, widths)) + " │"

    def rule(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * (w + 2) for w in widths) + right

    out = [rule("┌", "┬", "┐"), line(rows[0]), rule("├", "┼", "┤")]
    out.extend(line(r) for r in rows[1:])
    out.append(rule("└", "┴", "┘"))
    return "\n".join(out)


# ---------- commands ----------
def cmd_add(svc: TaskService, args: argparse.Namespace) -> int:
    try:
        task = svc.add(args.name, args.description, args.date)
    except InvalidTaskError as e:
        eprint(f"Error: {e}")
        return 1
    except SaveError as e:
        eprint(str(e))
        return 1
    print(f"Task {task.id} added successfully")
    return 0


def cmd_list(svc: TaskService, args: argparse.Namespace) -> int:
    result = svc.refresh()
    if result.failed:
        eprint(f"Warning: {result.error}")
    if not result.tasks:
        print("No tasks found")
        return 0
    print(render_table(result.tasks))
    return 0


def _cmd_set_done(svc: TaskService, task_id: int, done: bool) -> int:
    try:
        task = svc.set_done(task_id, done)
    except TaskNotFoundError as e:
        eprint(str(e))
        return 1
    except SaveError as e:
        eprint(str(e))
        return 1
    print(f"Task {task.id} marked as {'done' if task.done else 'pending'}")
    return 0


def cmd_done(svc: TaskService, args: argparse.Namespace) -> int:
    return _cmd_set_done(svc, args.id, True)


def cmd_undo(svc: TaskService, args: argparse.Namespace) -> int:
    return _cmd_set_done(svc, args.id, False)


def cmd_clean(svc: TaskService, args: argparse.Namespace) -> int:
    try:
        svc.clear()
    except ClearError as e:
        eprint(str(e))
        return 1
    print("Tasks cleaned successfully")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="todo", description=f"{APP_NAME} task manager")
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    ap.add_argument("--file", type=Path, default=None, help="Task file (default: task.json in the data directory)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Echo log messages to stderr")
    sub = ap.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_add = sub.add_parser("add", aliases=["a"], help="Adds a new task")
    p_add.add_argument("name", metavar="NAME", help="Task name")
    p_add.add_argument("date", metavar="DATE", nargs="?", type=_date_arg, default=None,
                       help=f"Task date ({DATE_FORMAT_HINT}); defaults to now")
    p_add.add_argument("-d", "--description", default=None, help="Optional description")
    p_add.set_defaults(func=cmd_add)

    p_list = sub.add_parser("list", aliases=["l"], help="List all tasks")
    p_list.set_defaults(func=cmd_list)

    p_done = sub.add_parser("done", aliases=["d"], help="Marks task as done")
    p_done.add_argument("id", metavar="ID", type=int, help="Task id")
    p_done.set_defaults(func=cmd_done)

    p_undo = sub.add_parser("undo", aliases=["u"], help="Marks task as pending again")
    p_undo.add_argument("id", metavar="ID", type=int, help="Task id")
    p_undo.set_defaults(func=cmd_undo)

    p_clean = sub.add_parser("clean", aliases=["c"], help="Deletes the task file")
    p_clean.set_defaults(func=cmd_clean)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        enable_console()
    try:
        path = init_storage(args.file)
    except OSError as e:
        eprint(f"Error preparing task file: {e}")
        return 1
    svc = TaskService(TaskStore(path))
    return args.func(svc, args)


if __name__ == "__main__":
    sys.exit(main())
