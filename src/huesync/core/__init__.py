"""Core color engine."""

from .engine import RGB_CHANNELS, ColorEngine

__all__ = ["ColorEngine", "RGB_CHANNELS"]
