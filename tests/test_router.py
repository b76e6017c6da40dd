import flet as ft
import pytest
from unittest.mock import MagicMock

from config import config
from services.router import DEFAULT_ROUTES, Router


def make_page():
    page = MagicMock()
    page.views = []
    page.theme_mode = ft.ThemeMode.LIGHT
    return page


def stub_routes(built, failing=()):
    def builder_for(pattern):
        async def build(page, router, entry):
            built.append(entry.route)
            if pattern in failing:
                raise RuntimeError("boom")
            return [ft.Text(entry.route)]
        return build

    return {
        pattern: (builder_for(pattern), arg_types)
        for pattern, (_, arg_types) in DEFAULT_ROUTES.items()
    }


@pytest.mark.asyncio
async def test_start_renders_start_route():
    page = make_page()
    router = Router(page, routes=stub_routes([]))
    await router.start()
    assert [v.route for v in page.views] == [config.START_ROUTE]
    assert page.route == config.START_ROUTE
    page.update.assert_called()


@pytest.mark.asyncio
async def test_views_are_built_once_per_entry():
    built = []
    page = make_page()
    router = Router(page, routes=stub_routes(built))
    await router.navigate_to("home")
    await router.navigate_to("user_list")
    await router.navigate_to("user_detail/202")
    assert [v.route for v in page.views] == ["home", "user_list", "user_detail/202"]

    await router.go_back()
    assert [v.route for v in page.views] == ["home", "user_list"]
    assert built == ["home", "user_list", "user_detail/202"]


@pytest.mark.asyncio
async def test_unknown_route_shows_not_found_without_touching_stack():
    page = make_page()
    router = Router(page, routes=stub_routes([]))
    await router.navigate_to("home")
    await router.navigate_to("nowhere")
    assert page.views[-1].route == "nowhere"
    assert [e.route for e in router.nav.back_stack] == ["home"]

    # System back on the transient view only re-renders
    await router._handle_view_pop(MagicMock(view=page.views[-1]))
    assert [v.route for v in page.views] == ["home"]


@pytest.mark.asyncio
async def test_builder_failure_renders_error_and_retry_rebuilds():
    built = []
    page = make_page()
    router = Router(page, routes=stub_routes(built, failing={config.Routes.USER_LIST}))
    await router.navigate_to("home")
    await router.navigate_to("user_list")
    assert len(page.views) == 2

    await router.retry(router.nav.current_entry)
    assert built.count("user_list") == 2


@pytest.mark.asyncio
async def test_view_pop_goes_back():
    page = make_page()
    router = Router(page, routes=stub_routes([]))
    await router.navigate_to("home")
    await router.navigate_to("color_picker")
    await router._handle_view_pop(MagicMock(view=page.views[-1]))
    assert [e.route for e in router.nav.back_stack] == ["home"]


@pytest.mark.asyncio
async def test_route_change_event_navigates():
    page = make_page()
    router = Router(page, routes=stub_routes([]))
    await router.navigate_to("home")
    await router._handle_route_change_event(MagicMock(route="/user_list"))
    assert router.nav.current_entry.route == "user_list"


@pytest.mark.asyncio
async def test_real_screens_build():
    page = make_page()
    router = Router(page)
    await router.navigate_to("home")
    await router.navigate_to("color_picker")
    await router.go_back()
    await router.navigate_to("user_list")
    await router.navigate_to("user_detail/202")
    assert [v.route for v in page.views] == ["home", "user_list", "user_detail/202"]
    for view in page.views:
        assert isinstance(view.controls[0], ft.SafeArea)
    # The detail screen kicked off its fetch
    page.run_task.assert_called()


@pytest.mark.asyncio
async def test_picker_result_reaches_home_screen_through_router():
    from services.result_channel import color_result_channel

    page = make_page()
    router = Router(page)
    await router.navigate_to("home")
    await router.navigate_to("color_picker")
    home = router.nav.previous_entry

    color_result_channel.send(router.nav, "#4CAF50")
    await router.go_back()
    assert config.Keys.SELECTED_COLOR not in home.saved_state
    assert [v.route for v in page.views] == ["home"]


@pytest.mark.asyncio
async def test_browser_back_to_lower_route_pops_instead_of_pushing():
    from services.result_channel import color_result_channel

    built = []
    page = make_page()
    router = Router(page, routes=stub_routes(built))
    await router.navigate_to("home")
    home = router.nav.current_entry
    await router.navigate_to("color_picker")
    color_result_channel.send(router.nav, "#2196F3")

    await router._handle_route_change_event(MagicMock(route="/home"))

    assert [e.route for e in router.nav.back_stack] == ["home"]
    assert router.nav.current_entry is home
    assert color_result_channel.peek(home) == "#2196F3"
    assert [v.route for v in page.views] == ["home"]
    assert built == ["home", "color_picker"]


@pytest.mark.asyncio
async def test_browser_back_across_several_entries():
    page = make_page()
    router = Router(page, routes=stub_routes([]))
    await router.navigate_to("home")
    await router.navigate_to("user_list")
    await router.navigate_to("user_detail/202")
    await router._handle_route_change_event(MagicMock(route="home"))
    assert [e.route for e in router.nav.back_stack] == ["home"]
