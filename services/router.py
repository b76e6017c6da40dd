from typing import Any, Callable, Dict, Optional, Tuple

import flet as ft
from config import config
from services.navigation import NavController, NavigationEntry, RouteNotFoundError
from utils.logger import log_debug, log_error, log_info, log_warning
from components.status_message import StatusMessage
from views.components.app_header import AppHeader
from views.styles import AppColors

# View Imports
# Views never import the router; they receive it as an argument.
from views.home_view import get_home_controls
from views.color_picker_view import get_color_picker_controls
from views.user_list_view import get_user_list_controls
from views.user_detail_view import get_user_detail_controls

# pattern -> (builder, argument types)
DEFAULT_ROUTES = {
    config.Routes.HOME: (get_home_controls, {}),
    config.Routes.COLOR_PICKER: (get_color_picker_controls, {}),
    config.Routes.USER_LIST: (get_user_list_controls, {}),
    config.Routes.USER_DETAIL: (get_user_detail_controls, {config.Keys.USER_ID_ARG: int}),
}


class Router:
    """
    Renders the NavController's back stack as Flet views, one per entry.
    Views are built once per entry and dropped when the entry is popped.
    """

    def __init__(self, page: ft.Page, nav: Optional[NavController] = None,
                 routes: Optional[Dict[str, Tuple[Callable, Dict[str, Callable[[str], Any]]]]] = None):
        self.page = page
        self.nav = nav or NavController()
        self.routes = {}
        self._views = {}

        for pattern, (builder, arg_types) in (routes or DEFAULT_ROUTES).items():
            self.nav.register(pattern, arg_types)
            self.routes[pattern] = builder

        self.page.on_route_change = self._handle_route_change_event
        self.page.on_view_pop = self._handle_view_pop

        # Helper for back button
        self.page.go_back = self.go_back

    async def _handle_route_change_event(self, e):
        """Browser URL changes (deep links, manual edits)."""
        route = (e.route or "").strip("/")
        current = self.nav.current_entry
        if not route or (current and current.route == route):
            return
        # Browser Back lands on a route already lower on the stack.
        if self.nav.pop_back_stack_to(route):
            await self._render()
            return
        await self.navigate_to(route)

    async def _handle_view_pop(self, e):
        """Handle system back button or view pop."""
        current = self.nav.current_entry
        popped_route = getattr(getattr(e, "view", None), "route", None)
        if current is not None and popped_route not in (None, current.route):
            # A transient "not found" view; the stack itself is unchanged.
            await self._render()
            return
        await self.go_back()

    async def start(self):
        """Initial startup logic."""
        log_info(f"Router start: {config.START_ROUTE}")
        await self.navigate_to(config.START_ROUTE)

    async def go_back(self, e=None):
        """Pops the current entry and shows the one below it."""
        if self.nav.pop_back_stack():
            await self._render()

    async def navigate_to(self, route):
        """
        Main navigation logic.
        Args:
            route (str): Concrete route (e.g., "home", "user_detail/202").
        """
        try:
            self.nav.navigate(route)
        except RouteNotFoundError as e:
            log_warning(str(e))
            self._show_not_found(e.route)
            return
        await self._render()

    async def retry(self, entry: NavigationEntry):
        """Rebuild a screen whose builder failed."""
        self._views.pop(entry.id, None)
        await self._render()

    async def _render(self):
        page = self.page
        stack = self.nav.back_stack
        live_ids = {entry.id for entry in stack}
        for entry_id in list(self._views):
            if entry_id not in live_ids:
                del self._views[entry_id]

        views = []
        for entry in stack:
            view = self._views.get(entry.id)
            if view is None:
                view = await self._build_view(entry)
                self._views[entry.id] = view
            views.append(view)

        page.views.clear()
        page.views.extend(views)
        if stack:
            page.route = stack[-1].route
        page.update()
        log_debug(f"Rendered stack: {[entry.route for entry in stack]}")

    async def _build_view(self, entry: NavigationEntry) -> ft.View:
        builder = self.routes[entry.destination.pattern]
        try:
            controls = await builder(self.page, self, entry)
        except Exception as e:
            log_error(f"Navigation Error ({entry.route}): {e}", exc_info=True)
            controls = self._error_controls(entry, e)
        return ft.View(
            route=entry.route,
            controls=controls,
            padding=0,
            bgcolor=AppColors.background(self.page),
        )

    def _error_controls(self, entry: NavigationEntry, error: Exception):
        return [
            StatusMessage(f"System error: {error}"),
            ft.Button(
                content=ft.Text("Retry"),
                on_click=lambda _: self.page.run_task(self.retry, entry),
            ),
        ]

    def _show_not_found(self, route: str):
        page = self.page
        page.views.append(ft.View(
            route=route,
            padding=0,
            controls=[
                AppHeader("Not Found", on_back_click=lambda _: page.run_task(self._render)),
                StatusMessage(f"Page {route} not found", icon=ft.Icons.SEARCH_OFF_ROUNDED),
            ],
        ))
        page.update()
