"""CLI commands for huesync."""

from .config import config
from .presets import presets
from .show import show

__all__ = ["config", "presets", "show"]
