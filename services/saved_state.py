from typing import Any, Callable, Dict, Iterator, Optional

from utils.observable import ObservableValue


class SavedStateHandle:
    """
    Key/value store owned by a single navigation entry.

    Each key can be observed independently. Writes and removals notify the
    key's subscribers synchronously; a removed key reads as `None`.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})
        self._live: Dict[str, ObservableValue] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def contains(self, key: str) -> bool:
        return key in self._values

    def keys(self) -> Iterator[str]:
        return iter(list(self._values))

    def set(self, key: str, value: Any):
        self._values[key] = value
        live = self._live.get(key)
        if live is not None:
            live.set(value)

    def remove(self, key: str) -> Any:
        """Remove `key` and return its previous value (or None)."""
        previous = self._values.pop(key, None)
        live = self._live.get(key)
        if live is not None and live.value is not None:
            live.set(None)
        return previous

    def get_live_value(self, key: str) -> ObservableValue:
        live = self._live.get(key)
        if live is None:
            live = ObservableValue(self._values.get(key))
            self._live[key] = live
        return live

    def observe(self, key: str, callback: Callable[[Any], Any]) -> Callable[[], None]:
        """Subscribe to `key`; the current value is delivered immediately."""
        return self.get_live_value(key).subscribe(callback)

    def clear(self):
        """Drop every value and subscriber. Called when the owning entry is destroyed."""
        self._values.clear()
        for live in self._live.values():
            live.clear_subscribers()
        self._live.clear()
