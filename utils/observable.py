from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """
    Holds a single value and pushes every change to its subscribers.

    Subscribing is sticky: the callback is invoked right away with the
    current value, then again on each `set`.
    """

    def __init__(self, value: Optional[T] = None):
        self._value = value
        self._subscribers: List[Callable[[Optional[T]], Any]] = []

    @property
    def value(self) -> Optional[T]:
        return self._value

    def set(self, value: Optional[T]):
        self._value = value
        # Copy: subscribers may unsubscribe or write back while being notified.
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[Optional[T]], Any], emit_current: bool = True) -> Callable[[], None]:
        """Register `callback` and return a function that removes it."""
        self._subscribers.append(callback)
        if emit_current:
            callback(self._value)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def clear_subscribers(self):
        self._subscribers.clear()
