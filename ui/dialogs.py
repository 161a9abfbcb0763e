from typing import Callable

import flet as ft


def confirm_dialog(
    page: ft.Page,
    *,
    title: str,
    message: str,
    confirm_label: str,
    on_confirm: Callable[[], None],
) -> ft.AlertDialog:
    """Modal yes/cancel dialog; ``on_confirm`` runs after the dialog is closed."""

    dlg: ft.AlertDialog

    def _confirm(_):
        page.close(dlg)
        on_confirm()

    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title),
        content=ft.Text(message),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: page.close(dlg)),
            ft.FilledButton(confirm_label, icon=ft.Icons.DELETE_OUTLINE, on_click=_confirm),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dlg)
    return dlg


def show_toast(page: ft.Page, text: str) -> None:
    page.open(ft.SnackBar(ft.Text(text)))
