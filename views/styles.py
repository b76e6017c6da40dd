import flet as ft

# Design tokens shared by every screen


class AppColors:
    PRIMARY = ft.Colors.BLUE_700
    ERROR = ft.Colors.RED_ACCENT_700
    ON_PRIMARY = ft.Colors.WHITE

    BG_LIGHT = "#F8FAFC"
    BG_DARK = "#121212"
    SURFACE_LIGHT = "#FFFFFF"
    SURFACE_DARK = "#1E1E1E"

    BORDER_LIGHT = ft.Colors.with_opacity(0.1, ft.Colors.GREY)

    # Adaptive text colors
    TEXT_MAIN = ft.Colors.ON_SURFACE
    TEXT_MUTE = ft.Colors.ON_SURFACE_VARIANT

    @staticmethod
    def background(page: ft.Page):
        return AppColors.BG_DARK if page.theme_mode == ft.ThemeMode.DARK else AppColors.BG_LIGHT

    @staticmethod
    def surface(page: ft.Page):
        return AppColors.SURFACE_DARK if page.theme_mode == ft.ThemeMode.DARK else AppColors.SURFACE_LIGHT


class AppShadows:
    SMALL = ft.BoxShadow(
        spread_radius=1,
        blur_radius=10,
        color=ft.Colors.with_opacity(0.05, ft.Colors.BLACK),
        offset=ft.Offset(0, 2),
    )
    MEDIUM = ft.BoxShadow(
        spread_radius=1,
        blur_radius=20,
        color=ft.Colors.with_opacity(0.1, ft.Colors.BLACK),
        offset=ft.Offset(0, 4),
    )


class AppTextStyles:
    HEADLINE_LARGE = ft.TextStyle(size=32, weight=ft.FontWeight.BOLD, color=AppColors.TEXT_MAIN)
    HEADLINE_MEDIUM = ft.TextStyle(size=26, weight=ft.FontWeight.BOLD, color=AppColors.TEXT_MAIN)
    HEADER_TITLE = ft.TextStyle(size=20, weight=ft.FontWeight.BOLD)
    TITLE_MEDIUM = ft.TextStyle(size=16, weight=ft.FontWeight.W_500, color=AppColors.TEXT_MAIN)
    BODY_LARGE = ft.TextStyle(size=16, color=AppColors.TEXT_MAIN)
    CAPTION = ft.TextStyle(size=12, color=AppColors.TEXT_MUTE)


class AppLayout:
    # Spacing Tokens (Step of 4 or 8)
    XS = 4
    SM = 8
    MD = 16
    LG = 24
    XL = 32

    HEADER_PADDING = 16
    SWATCH_SIZE = 100

    BORDER_RADIUS_SM = 8
    BORDER_RADIUS_MD = 12
