import flet as ft
from views.styles import AppColors, AppLayout


class StatusMessage(ft.Container):
    """
    Centered icon + message, used for "not found" and other terminal states.
    """
    def __init__(self, message: str, icon=ft.Icons.ERROR_OUTLINE_ROUNDED, color=AppColors.ERROR):
        super().__init__()
        self.expand = True
        self.alignment = ft.Alignment(0, 0)
        self.padding = AppLayout.XL

        self.content = ft.Column(
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            alignment=ft.MainAxisAlignment.CENTER,
            spacing=AppLayout.SM,
            controls=[
                ft.Icon(icon, color=color, size=48),
                ft.Text(message, color=color, size=16, text_align=ft.TextAlign.CENTER),
            ]
        )
