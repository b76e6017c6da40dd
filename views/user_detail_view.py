import flet as ft
from components.status_message import StatusMessage
from utils.logger import log_debug
from viewmodels.user_detail_view_model import Found, Loading, UserDetailViewModel
from views.components.app_header import AppHeader
from views.styles import AppColors, AppTextStyles, AppLayout


def _loading_content():
    return ft.Column([
        ft.ProgressRing(),
        ft.Container(height=AppLayout.MD),
        ft.Text("Loading user data...", style=AppTextStyles.TITLE_MEDIUM),
    ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, alignment=ft.MainAxisAlignment.CENTER)


def _user_card(user):
    return ft.Card(
        content=ft.Container(
            padding=AppLayout.LG,
            content=ft.Column([
                ft.Text("User Details", style=AppTextStyles.HEADLINE_MEDIUM),
                ft.Container(height=AppLayout.MD),
                ft.Text(f"ID: {user.id}", style=AppTextStyles.BODY_LARGE),
                ft.Text(f"Name: {user.name}", style=AppTextStyles.BODY_LARGE),
                ft.Text(f"Email: {user.email}", style=AppTextStyles.BODY_LARGE),
            ], spacing=AppLayout.XS),
        )
    )


async def get_user_detail_controls(page: ft.Page, router, entry):
    log_debug(f"Entering User Detail View ({entry})")
    vm = UserDetailViewModel(entry.saved_state)
    entry.add_on_destroy(vm.close)

    body = ft.Container(expand=True, alignment=ft.Alignment(0, 0), padding=AppLayout.LG)
    mounted = False

    def render(state):
        if isinstance(state, Loading):
            body.content = _loading_content()
        elif isinstance(state, Found):
            body.content = _user_card(state.user)
        else:
            body.content = StatusMessage("Error: User not found.")
        if mounted:
            page.update()

    vm.state.subscribe(render)
    mounted = True
    if isinstance(vm.state.value, Loading):
        page.run_task(vm.load)

    async def go_back(e):
        await router.go_back()

    return [
        ft.SafeArea(
            expand=True,
            content=ft.Container(
                expand=True,
                bgcolor=AppColors.background(page),
                content=ft.Column([
                    AppHeader("User Detail", on_back_click=lambda e: page.run_task(go_back, e)),
                    body,
                ], spacing=0),
            )
        )
    ]
