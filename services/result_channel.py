from typing import Callable, Generic, Optional, TypeVar

from config import config
from services.navigation import NavController, NavigationEntry
from utils.logger import log_info, log_warning

T = TypeVar("T")


class ResultChannel(Generic[T]):
    """
    Hands a value from a screen back to the screen below it.

    The producer writes into the previous entry's saved state under `key`;
    the consumer observes that slot and the value is removed as soon as it
    has been delivered, so a recreated consumer never sees it twice.
    Only one producer per key is expected.
    """

    def __init__(self, key: str):
        self.key = key

    def send(self, nav: NavController, value: T) -> Optional[NavigationEntry]:
        """Store `value` on the entry below the current one. Does not pop."""
        target = nav.previous_entry
        if target is None:
            log_warning(f"Result for '{self.key}' dropped: no previous entry")
            return None
        target.saved_state.set(self.key, value)
        log_info(f"Result '{self.key}' sent to {target.route}")
        return target

    def peek(self, entry: NavigationEntry) -> Optional[T]:
        return entry.saved_state.get(self.key)

    def consume(self, entry: NavigationEntry) -> Optional[T]:
        """Take the pending value, if any, and clear the slot."""
        return entry.saved_state.remove(self.key)

    def observe(self, entry: NavigationEntry, on_result: Callable[[T], None]) -> Callable[[], None]:
        """
        Deliver each non-empty value to `on_result`, then clear the slot.
        Returns the unsubscribe function.
        """
        def handle(value):
            if value is None:
                return
            on_result(value)
            entry.saved_state.remove(self.key)

        return entry.saved_state.observe(self.key, handle)


color_result_channel: "ResultChannel[str]" = ResultChannel(config.Keys.SELECTED_COLOR)
