import flet as ft
from models import COLOR_OPTIONS, ColorOption
from services.result_channel import color_result_channel
from utils.logger import log_debug
from views.components.app_header import AppHeader
from views.styles import AppColors, AppTextStyles, AppLayout


async def get_color_picker_controls(page: ft.Page, router, entry):
    log_debug(f"Entering Color Picker View ({entry})")

    async def select(option: ColorOption):
        # Write onto the caller's entry, then leave.
        color_result_channel.send(router.nav, option.hex_value)
        await router.go_back()

    async def cancel(e=None):
        await router.go_back()

    def option_button(option: ColorOption):
        return ft.Button(
            content=ft.Text(f"Select {option.name}", color=AppColors.ON_PRIMARY),
            on_click=lambda e, o=option: page.run_task(select, o),
            width=float("inf"),
            height=48,
            style=ft.ButtonStyle(
                bgcolor=option.hex_value,
                shape=ft.RoundedRectangleBorder(radius=AppLayout.BORDER_RADIUS_SM),
            ),
        )

    return [
        ft.SafeArea(
            expand=True,
            content=ft.Container(
                expand=True,
                bgcolor=AppColors.background(page),
                content=ft.Column([
                    AppHeader("Color Picker", on_back_click=lambda e: page.run_task(cancel, e)),
                    ft.Container(
                        padding=AppLayout.LG,
                        expand=True,
                        content=ft.Column([
                            ft.Text("Select a Color", style=AppTextStyles.HEADLINE_MEDIUM),
                            ft.Container(height=AppLayout.MD),
                            *[option_button(o) for o in COLOR_OPTIONS],
                            ft.Container(height=AppLayout.LG),
                            ft.OutlinedButton(
                                content=ft.Text("Cancel"),
                                on_click=lambda e: page.run_task(cancel, e),
                            ),
                        ], spacing=AppLayout.SM, horizontal_alignment=ft.CrossAxisAlignment.CENTER),
                    ),
                ], spacing=0),
            )
        )
    ]
