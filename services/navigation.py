import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from services.saved_state import SavedStateHandle
from utils.logger import log_debug, log_info, log_warning

# Integer route arguments: optional minus sign, ASCII digits only.
INT_ARG_PATTERN = re.compile(r"-?[0-9]+")


class RouteNotFoundError(LookupError):
    """Raised when a route matches no registered destination."""

    def __init__(self, route: str):
        super().__init__(f"No destination registered for route '{route}'")
        self.route = route


@dataclass(frozen=True)
class Destination:
    """A registered route pattern, e.g. `user_detail/{itemId}`."""
    pattern: str
    arg_types: Dict[str, Callable[[str], Any]] = field(default_factory=dict)

    @property
    def segments(self) -> List[str]:
        return self.pattern.strip("/").split("/")

    def match(self, route: str) -> Optional[Dict[str, Any]]:
        """
        Return the coerced arguments if `route` fits this pattern, else None.
        An argument that fails coercion is left out rather than rejected.
        """
        parts = route.strip("/").split("/")
        if len(parts) != len(self.segments):
            return None

        args = {}
        for segment, part in zip(self.segments, parts):
            if segment.startswith("{") and segment.endswith("}"):
                name = segment[1:-1]
                convert = self.arg_types.get(name, str)
                try:
                    if convert is int and not INT_ARG_PATTERN.fullmatch(part):
                        raise ValueError(part)
                    args[name] = convert(part)
                except (TypeError, ValueError):
                    log_warning(f"Malformed argument '{name}'={part!r} for route '{route}'")
            elif segment != part:
                return None
        return args


class NavigationEntry:
    """One screen instance on the back stack, with its own saved state."""

    def __init__(self, destination: Destination, route: str, arguments: Dict[str, Any]):
        self.id = uuid.uuid4().hex
        self.destination = destination
        self.route = route
        self.arguments = dict(arguments)
        self.saved_state = SavedStateHandle(arguments)
        self.destroyed = False
        self._on_destroy: List[Callable[[], Any]] = []

    def add_on_destroy(self, callback: Callable[[], Any]):
        self._on_destroy.append(callback)

    def destroy(self):
        if self.destroyed:
            return
        self.destroyed = True
        for callback in self._on_destroy:
            callback()
        self._on_destroy.clear()
        self.saved_state.clear()

    def __repr__(self):
        return f"NavigationEntry(route={self.route!r}, id={self.id[:8]})"


class NavController:
    """
    Back stack of navigation entries.

    Entries are created on `navigate` and destroyed on `pop_back_stack`; the
    start entry is never popped.
    """

    def __init__(self):
        self._destinations: List[Destination] = []
        self._stack: List[NavigationEntry] = []
        self._listeners: List[Callable[["NavController"], Any]] = []

    def register(self, pattern: str, arg_types: Optional[Dict[str, Callable[[str], Any]]] = None) -> Destination:
        destination = Destination(pattern, dict(arg_types or {}))
        self._destinations.append(destination)
        return destination

    def resolve(self, route: str) -> Tuple[Destination, Dict[str, Any]]:
        clean_route = route.strip("/")
        for destination in self._destinations:
            args = destination.match(clean_route)
            if args is not None:
                return destination, args
        raise RouteNotFoundError(clean_route)

    @property
    def back_stack(self) -> Tuple[NavigationEntry, ...]:
        return tuple(self._stack)

    @property
    def current_entry(self) -> Optional[NavigationEntry]:
        return self._stack[-1] if self._stack else None

    @property
    def previous_entry(self) -> Optional[NavigationEntry]:
        return self._stack[-2] if len(self._stack) > 1 else None

    def navigate(self, route: str) -> NavigationEntry:
        destination, args = self.resolve(route)
        clean_route = route.strip("/")

        current = self.current_entry
        if current is not None and current.route == clean_route:
            log_debug(f"Already at '{clean_route}', ignoring navigate")
            return current

        entry = NavigationEntry(destination, clean_route, args)
        self._stack.append(entry)
        log_info(f"Navigated to: {clean_route} (depth {len(self._stack)})")
        self._notify()
        return entry

    def pop_back_stack(self) -> bool:
        if len(self._stack) <= 1:
            log_debug("pop_back_stack ignored: start entry stays on the stack")
            return False
        entry = self._stack.pop()
        entry.destroy()
        log_info(f"Popped: {entry.route} (depth {len(self._stack)})")
        self._notify()
        return True

    def pop_back_stack_to(self, route: str) -> bool:
        """Pop until the nearest entry below the top with `route` is current."""
        clean_route = route.strip("/")
        below = self._stack[:-1]
        if not any(entry.route == clean_route for entry in below):
            return False
        while self.current_entry.route != clean_route:
            self.pop_back_stack()
        return True

    def add_listener(self, callback: Callable[["NavController"], Any]) -> Callable[[], None]:
        self._listeners.append(callback)

        def remove():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return remove

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)
