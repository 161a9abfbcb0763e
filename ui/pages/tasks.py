# ui/pages/tasks.py
import flet as ft

from core.settings import UI
from models.task import Task
from ui.dialogs import confirm_dialog, show_toast
from ui.state import TaskListController


class TasksPage:
    def __init__(self, app, controller: TaskListController):
        self.app = app
        self.ctrl = controller

        # ---------- add form ----------
        self.name_tf = ft.TextField(
            label="Task name",
            hint_text="e.g. Write report",
            expand=True,
            prefix=ft.Icon(ft.Icons.TASK_ALT),
            on_submit=self.on_add,
        )
        self.description_tf = ft.TextField(
            label="Description",
            hint_text="optional",
            expand=True,
            on_submit=self.on_add,
        )
        self.add_btn = ft.FilledButton("Add task", icon=ft.Icons.ADD, on_click=self.on_add)

        add_card = ft.Card(
            content=ft.Container(
                padding=16,
                content=ft.Row(
                    [self.name_tf, self.description_tf, self.add_btn],
                    vertical_alignment=ft.CrossAxisAlignment.END,
                ),
            )
        )

        # ---------- error banner ----------
        self.error_text = ft.Text("", color=UI.theme.error_text, expand=True)
        self.error_banner = ft.Container(
            visible=False,
            bgcolor=UI.theme.error_bg,
            border_radius=8,
            padding=ft.padding.symmetric(horizontal=12, vertical=6),
            content=ft.Row(
                [
                    ft.Icon(ft.Icons.ERROR_OUTLINE, color=UI.theme.error_text),
                    self.error_text,
                    ft.IconButton(icon=ft.Icons.CLOSE, tooltip="Dismiss", on_click=self.on_dismiss_error),
                ],
            ),
        )

        self.task_list = ft.ListView(expand=True, spacing=8)
        self.clear_btn = ft.TextButton("Clear all", icon=ft.Icons.DELETE_SWEEP, on_click=self.on_clear)

        self.view = ft.Container(
            expand=True,
            padding=20,
            content=ft.Column(
                [
                    ft.Row(
                        [ft.Text(UI.header, size=24, weight=ft.FontWeight.BOLD), self.clear_btn],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    self.error_banner,
                    add_card,
                    self.task_list,
                ],
                spacing=14,
                expand=True,
            ),
        )

    # ---------- rendering ----------
    def render(self):
        state = self.ctrl.state
        if state.is_empty:
            self.task_list.controls = [self._empty_state()]
        else:
            self.task_list.controls = [self._build_item(t) for t in state.tasks]
        self.clear_btn.disabled = state.is_empty
        self.error_text.value = state.error_message
        self.error_banner.visible = bool(state.error_message)
        self.app.page.update()

    def load(self):
        self.ctrl.refresh()
        self.render()

    def _build_item(self, task: Task) -> ft.Control:
        checkbox = ft.Checkbox(
            value=task.done,
            tooltip="Mark as done",
            on_change=lambda e, tid=task.id: self._on_toggle(tid, e.control.value),
        )
        title = ft.Text(
            task.name,
            size=16,
            weight=ft.FontWeight.W_600,
            style=ft.TextStyle(decoration=ft.TextDecoration.LINE_THROUGH if task.done else None),
            color=UI.theme.text_subtle if task.done else None,
        )
        subtitle = ft.Row(
            [
                ft.Text(task.description or "", size=12, expand=True),
                ft.Text(task.date.strftime(UI.date_display_format), size=12, color=UI.theme.text_subtle),
            ],
        )
        return ft.Container(
            content=ft.Row(
                [checkbox, ft.Column([title, subtitle], spacing=4, expand=True)],
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=ft.padding.symmetric(horizontal=12, vertical=10),
            border_radius=10,
            border=ft.border.all(1, ft.Colors.with_opacity(0.05, ft.Colors.ON_SURFACE)),
        )

    def _empty_state(self) -> ft.Control:
        return ft.Row(
            [
                ft.Icon(ft.Icons.INFO_OUTLINE, color=ft.Colors.BLUE_GREY_300),
                ft.Text("No tasks yet", color=ft.Colors.BLUE_GREY_400),
            ],
            spacing=8,
        )

    # ---------- events ----------
    def _on_toggle(self, task_id: int, checked: bool):
        self.ctrl.set_done(task_id, bool(checked))
        self.render()

    def on_add(self, e):
        task = self.ctrl.add(self.name_tf.value or "", self.description_tf.value or None)
        if task is not None:
            self.name_tf.value = ""
            self.description_tf.value = ""
            show_toast(self.app.page, f"Task {task.id} added")
        self.render()

    def on_clear(self, e):
        def _do_clear():
            self.ctrl.clear()
            self.render()

        confirm_dialog(
            self.app.page,
            title="Clear all tasks?",
            message="The task file will be deleted. A daily backup is kept.",
            confirm_label="Clear",
            on_confirm=_do_clear,
        )

    def on_dismiss_error(self, e):
        self.ctrl.dismiss_error()
        self.render()
