import flet as ft
from config import config
from services.router import Router
from utils.logger import log_info


async def main(page: ft.Page):
    page.title = config.APP_TITLE

    page.theme_mode = ft.ThemeMode.LIGHT

    page.padding = 0
    page.spacing = 0

    config.validate()
    log_info(f"Session started ({config.APP_TITLE})")

    router = Router(page)
    await router.start()


if __name__ == "__main__":
    ft.app(
        target=main,
        port=config.PORT,
        view=ft.AppView.WEB_BROWSER,
    )
