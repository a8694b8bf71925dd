"""Data models for huesync."""

from .color import HSL, Color, ColorSnapshot
from .config import DEFAULT_CONFIG_PATH, DEFAULT_PRESETS, EngineConfig

__all__ = [
    # Models
    "Color",
    "ColorSnapshot",
    "HSL",
    # Config
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_PRESETS",
    "EngineConfig",
]
