import logging

import flet as ft

from celestius.config.settings import settings
from celestius.core.logger import configure_logging
from celestius.state.app_state import AppState
from celestius.ui.views.calculator_view import build_calculator_view


logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    page.title = settings.app_title
    page.views.clear()
    page.views.append(build_calculator_view(page, AppState()))
    page.update()


def run() -> None:
    configure_logging()
    mode = "web" if settings.web_mode else "desktop"
    logger.info("Starting %s (%s mode, port %d)", settings.app_title, mode, settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
