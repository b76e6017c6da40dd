from dataclasses import dataclass

from services.navigation import NavigationEntry
from services.result_channel import ResultChannel, color_result_channel
from utils.logger import log_info
from utils.observable import ObservableValue

DEFAULT_COLOR = "#D3D3D3"
DEFAULT_RESULT_TEXT = "No color selected yet."


@dataclass(frozen=True)
class HomeState:
    applied_color: str = DEFAULT_COLOR
    result_text: str = DEFAULT_RESULT_TEXT


class HomeViewModel:
    """Applies the color picked on the picker screen to the home screen."""

    def __init__(self, entry: NavigationEntry, channel: ResultChannel = color_result_channel):
        self.entry = entry
        self.channel = channel
        self.state: ObservableValue[HomeState] = ObservableValue(HomeState())
        self._unsubscribe = channel.observe(entry, self._apply_color)
        entry.add_on_destroy(self.close)

    def _apply_color(self, hex_value: str):
        log_info(f"Applying selected color {hex_value}")
        self.state.set(HomeState(
            applied_color=hex_value,
            result_text=f"Successfully applied color: {hex_value}",
        ))

    def close(self):
        self._unsubscribe()
        self.state.clear_subscribers()
