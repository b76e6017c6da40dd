"""
Application Configuration
Centralized configuration management for the navigation handoff demo.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration with environment variable support."""

    # === App ===
    APP_TITLE: str = os.getenv("APP_TITLE", "Navigation Handoff")
    PORT: int = int(os.getenv("PORT", "8888"))
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    # === Simulated backing store ===
    USER_FETCH_DELAY: float = float(os.getenv("USER_FETCH_DELAY", "0.5"))

    # === Routes ===
    class Routes:
        HOME = "home"
        COLOR_PICKER = "color_picker"
        USER_LIST = "user_list"
        USER_DETAIL = "user_detail/{itemId}"

        @staticmethod
        def user_detail(user_id: int) -> str:
            return f"user_detail/{user_id}"

    # === Saved-state keys ===
    class Keys:
        SELECTED_COLOR = "selected_color_key"
        USER_ID_ARG = "itemId"

    START_ROUTE: str = os.getenv("START_ROUTE", Routes.HOME)

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration values."""
        from utils.logger import log_error

        errors = []
        if cls.USER_FETCH_DELAY < 0:
            errors.append("USER_FETCH_DELAY must not be negative")
        if cls.START_ROUTE not in (cls.Routes.HOME, cls.Routes.USER_LIST):
            errors.append(f"START_ROUTE must be '{cls.Routes.HOME}' or '{cls.Routes.USER_LIST}'")

        for err in errors:
            log_error(f"CONFIG ERROR: {err}")
        return not errors


# Singleton instance
config = Config()
