# ui/app_shell.py
from __future__ import annotations

import flet as ft

from core.log import get_logger
from core.settings import UI
from services.tasks import TaskService
from ui.pages.tasks import TasksPage
from ui.state import AppState, TaskListController


class AppShell:
    def __init__(self, page: ft.Page, service: TaskService | None = None):
        self.page = page
        self.logger = get_logger("gui")

        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START

        self.state = AppState()
        self.controller = TaskListController(service or TaskService(), self.state)
        self._tasks = TasksPage(self, self.controller)

        self.root = ft.Row(
            controls=[
                ft.Container(expand=1),
                ft.Container(self._tasks.view, expand=int(UI.content_width_ratio * 20)),
                ft.Container(expand=1),
            ],
            expand=True,
            spacing=0,
        )

    def mount(self):
        self.page.controls.clear()
        self.page.add(self.root)
        self._tasks.load()
        if self.state.error_message:
            self.logger.warning("GUI started with error: %s", self.state.error_message)
