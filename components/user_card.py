import flet as ft
from models import User
from views.styles import AppColors, AppLayout, AppShadows, AppTextStyles


class UserCard(ft.Container):
    """
    Tappable row for one user in the list; only the id is handed to `on_open`.
    """
    def __init__(self, user: User, on_open, highlighted: bool = False):
        super().__init__()
        self.user_id = user.id
        self.padding = AppLayout.MD
        self.border_radius = AppLayout.BORDER_RADIUS_MD
        self.bgcolor = AppColors.SURFACE_LIGHT
        self.shadow = AppShadows.SMALL
        if highlighted:
            side = ft.BorderSide(2, AppColors.PRIMARY)
            self.border = ft.Border(top=side, right=side, bottom=side, left=side)
        self.on_click = lambda e: on_open(self.user_id)
        self.on_hover = self._handle_hover

        self.content = ft.Row([
            ft.Icon(ft.Icons.PERSON_ROUNDED, color=AppColors.PRIMARY),
            ft.Column([
                ft.Text(f"View {user.name} (ID {user.id})", style=AppTextStyles.TITLE_MEDIUM),
                ft.Text(user.email, style=AppTextStyles.CAPTION),
            ], spacing=0),
        ], spacing=AppLayout.SM)

    def _handle_hover(self, e):
        self.shadow = AppShadows.MEDIUM if e.data in (True, "true") else AppShadows.SMALL
        self.update()
