import flet as ft
from components.user_card import UserCard
from config import config
from repositories.user_repository import user_repository
from utils.logger import log_debug
from views.components.app_header import AppHeader
from views.styles import AppColors, AppTextStyles, AppLayout

FEATURED_USER_ID = 202


async def get_user_list_controls(page: ft.Page, router, entry):
    log_debug(f"Entering User List View ({entry})")

    async def open_user(user_id: int):
        # Only the id travels; the detail screen fetches the record itself.
        await router.navigate_to(config.Routes.user_detail(user_id))

    async def go_back(e):
        await router.go_back()

    cards = [
        UserCard(user, on_open=lambda uid: page.run_task(open_user, uid), highlighted=user.id == FEATURED_USER_ID)
        for user in user_repository.list_users()
    ]

    can_go_back = router.nav.previous_entry is not None

    return [
        ft.SafeArea(
            expand=True,
            content=ft.Container(
                expand=True,
                bgcolor=AppColors.background(page),
                content=ft.Column([
                    AppHeader("User List", on_back_click=(lambda e: page.run_task(go_back, e)) if can_go_back else None),
                    ft.Container(
                        padding=AppLayout.MD,
                        expand=True,
                        content=ft.ListView(
                            controls=[ft.Text("Tap a user to open their details", style=AppTextStyles.CAPTION), *cards],
                            spacing=AppLayout.SM,
                            expand=True,
                        ),
                    ),
                ], spacing=0),
            )
        )
    ]
