import flet as ft


class SectionCard(ft.Container):  # type: ignore
    """
    Rounded, shadowed panel used for each block of the page.
    """
    def __init__(
        self,
        content: ft.Control,
        title: str | None = None,
        padding: float = 20,
    ):
        body: ft.Control = content
        if title:
            body = ft.Column(
                [
                    ft.Text(title, size=16, weight=ft.FontWeight.W_600),
                    content,
                ],
                spacing=12,
            )
        super().__init__(
            content=body,
            padding=padding,
            border_radius=ft.border_radius.all(12),
            bgcolor="surfaceVariant",  # Adapts to theme
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=10,
                color="#1A000000",
                offset=ft.Offset(0, 4),
            ),
        )
