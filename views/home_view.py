import flet as ft
from config import config
from viewmodels.home_view_model import HomeViewModel
from utils.logger import log_debug
from views.styles import AppColors, AppTextStyles, AppLayout


async def get_home_controls(page: ft.Page, router, entry):
    log_debug(f"Entering Home View ({entry})")
    vm = HomeViewModel(entry)
    state = vm.state.value

    swatch = ft.Container(
        width=AppLayout.SWATCH_SIZE,
        height=AppLayout.SWATCH_SIZE,
        bgcolor=state.applied_color,
        border_radius=AppLayout.BORDER_RADIUS_MD,
    )
    result_text = ft.Text(state.result_text, style=AppTextStyles.BODY_LARGE)

    def render(new_state):
        swatch.bgcolor = new_state.applied_color
        result_text.value = new_state.result_text
        page.update()

    vm.state.subscribe(render, emit_current=False)

    async def go_to_picker(e):
        await router.navigate_to(config.Routes.COLOR_PICKER)

    async def go_to_users(e):
        await router.navigate_to(config.Routes.USER_LIST)

    return [
        ft.SafeArea(
            expand=True,
            content=ft.Container(
                expand=True,
                padding=AppLayout.LG,
                bgcolor=AppColors.background(page),
                content=ft.Column([
                    ft.Text("Home Screen", style=AppTextStyles.HEADLINE_LARGE),
                    ft.Container(height=AppLayout.MD),
                    swatch,
                    ft.Container(height=AppLayout.MD),
                    result_text,
                    ft.Container(height=AppLayout.XL),
                    ft.Button(
                        content=ft.Text("Go Pick a Color"),
                        on_click=lambda e: page.run_task(go_to_picker, e),
                    ),
                    ft.TextButton(
                        content=ft.Text("Browse users"),
                        on_click=lambda e: page.run_task(go_to_users, e),
                    ),
                ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, alignment=ft.MainAxisAlignment.CENTER),
            )
        )
    ]
