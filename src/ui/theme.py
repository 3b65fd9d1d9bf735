import flet as ft


class AppTheme:
    """
    Centralized theme configuration for the application.
    Gray panels with an indigo accent; red for destructive actions and errors.
    """

    # Fonts
    font_family = "Roboto Mono"

    # Colors - Light
    primary_light = "#4f46e5"  # Indigo 600
    on_primary_light = "#ffffff"
    secondary_light = "#6366f1"
    surface_light = "#f9fafb"
    error_light = "#dc2626"  # Red 600

    # Colors - Dark
    primary_dark = "#6366f1"  # Indigo 500
    on_primary_dark = "#ffffff"
    secondary_dark = "#818cf8"
    surface_dark = "#111827"  # Gray 900
    error_dark = "#ef4444"  # Red 500

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                on_primary=cls.on_primary_light,
                secondary=cls.secondary_light,
                surface=cls.surface_light,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                on_primary=cls.on_primary_dark,
                secondary=cls.secondary_dark,
                surface=cls.surface_dark,
                error=cls.error_dark,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )
