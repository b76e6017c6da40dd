from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ColorOption:
    """A selectable color: display name plus `#RRGGBB` value."""
    name: str
    hex_value: str


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


COLOR_OPTIONS: Tuple[ColorOption, ...] = (
    ColorOption("Blue", "#2196F3"),
    ColorOption("Green", "#4CAF50"),
    ColorOption("Red", "#F44336"),
)
