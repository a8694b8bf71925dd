"""huesync: keeps HSL, RGB and HEX views of a color in sync."""

__version__ = "0.1.0"

from .core import ColorEngine
from .models import HSL, Color, ColorSnapshot, EngineConfig
from .protocols import ColorObserver, CopyFormat, EditEvent

__all__ = [
    "ColorEngine",
    "Color",
    "ColorObserver",
    "ColorSnapshot",
    "CopyFormat",
    "EditEvent",
    "EngineConfig",
    "HSL",
]
