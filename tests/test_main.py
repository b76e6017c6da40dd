import flet as ft
import pytest
from unittest.mock import MagicMock

from config import config
from main import main


@pytest.mark.asyncio
async def test_main_sets_up_page_and_opens_start_route():
    page = MagicMock()
    page.views = []

    await main(page)

    assert page.title == config.APP_TITLE
    assert page.theme_mode == ft.ThemeMode.LIGHT
    assert page.padding == 0
    assert page.shared_preferences.get.call_count == 0
    assert [v.route for v in page.views] == [config.START_ROUTE]
