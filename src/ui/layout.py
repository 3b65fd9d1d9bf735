from collections.abc import Callable

import flet as ft


class MainLayout(ft.Column):  # type: ignore
    """
    Page frame: an app bar with the title and theme toggle above the content.
    """
    def __init__(
        self,
        title: str,
        content: ft.Control,
        toggle_theme: Callable[[], None],
        dark_mode: bool = False,
    ):
        super().__init__(expand=True, spacing=0)
        self.toggle_theme = toggle_theme

        self.theme_button = ft.IconButton(
            ft.Icons.LIGHT_MODE if dark_mode else ft.Icons.DARK_MODE,
            tooltip="Toggle theme",
            on_click=self._on_toggle,
        )

        self.app_bar = ft.Container(
            content=ft.Row(
                [
                    ft.Text(title, size=28, weight=ft.FontWeight.BOLD, color="primary"),
                    self.theme_button,
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            padding=ft.padding.symmetric(horizontal=20, vertical=10),
            bgcolor="surfaceVariant",
        )

        self.content_area = ft.Container(
            content=content,
            expand=True,
            padding=20,
            alignment=ft.alignment.top_center,
        )

        self.controls = [self.app_bar, self.content_area]

    def _on_toggle(self, _: ft.ControlEvent) -> None:
        self.toggle_theme()
        self.theme_button.icon = (
            ft.Icons.DARK_MODE
            if self.theme_button.icon == ft.Icons.LIGHT_MODE
            else ft.Icons.LIGHT_MODE
        )
        self.update()
