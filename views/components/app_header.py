import flet as ft
from views.styles import AppColors, AppTextStyles, AppLayout


def AppHeader(title_text: str, on_back_click=None):
    """
    Standard screen header. Shows a back button when `on_back_click` is given.
    """
    left_content = ft.Container(width=40)
    if on_back_click:
        left_content = ft.IconButton(
            ft.Icons.ARROW_BACK_IOS_NEW,
            icon_color=AppColors.TEXT_MAIN,
            on_click=on_back_click,
            tooltip="Back",
        )

    header_row = ft.Row([
        left_content,
        ft.Text(title_text, style=AppTextStyles.HEADER_TITLE, color=AppColors.TEXT_MAIN),
        ft.Container(width=40),
    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, vertical_alignment=ft.CrossAxisAlignment.CENTER)

    return ft.Container(
        content=header_row,
        padding=AppLayout.HEADER_PADDING,
        border=ft.Border(bottom=ft.BorderSide(1, AppColors.BORDER_LIGHT)),
        height=72,
    )
