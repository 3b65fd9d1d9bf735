import logging

import flet as ft

from src.app_shell.config import AppConfig, configure_logging
from src.rules.loader import load_rules
from src.ui.layout import MainLayout
from src.ui.state import AppState
from src.ui.theme import AppTheme
from src.ui.views.meeting import MeetingView

logger = logging.getLogger(__name__)


def build_page(page: ft.Page, config: AppConfig) -> None:
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.DARK

    logger.info(f"Rules path: {config.rules_path}")
    try:
        rules = load_rules(config.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Cannot start calculator: {e}")
        page.title = "Meeting Cost Calculator"
        page.add(ft.Text(str(e), color="red", size=20))
        return

    page.title = rules.project.title

    # One state per page session
    state = AppState(rules=rules)

    def toggle_theme() -> None:
        if page.theme_mode == ft.ThemeMode.LIGHT:
            page.theme_mode = ft.ThemeMode.DARK
        else:
            page.theme_mode = ft.ThemeMode.LIGHT
        page.update()

    page.padding = 0
    page.add(
        MainLayout(
            title=rules.project.title,
            content=MeetingView(state),
            toggle_theme=toggle_theme,
            dark_mode=page.theme_mode == ft.ThemeMode.DARK,
        )
    )


def run() -> None:
    config = AppConfig.from_env()
    configure_logging(config.log_level)

    view = ft.AppView.WEB_BROWSER if config.view == "web" else ft.AppView.FLET_APP
    ft.app(target=lambda page: build_page(page, config), view=view, port=config.port)


if __name__ == "__main__":
    run()
