"""Color-related exceptions.

User edits never raise: malformed HEX text is ignored and bad channel
text degrades to 0. These exceptions cover inputs that are expected to
be valid already (presets, config values, CLI arguments, channel names).
"""

from typing import Any

from .base import HueSyncError


class ColorError(HueSyncError):
    """A color value could not be interpreted."""
    pass


class InvalidHexColorError(ColorError):
    """A string is not a complete '#RRGGBB' color."""

    def __init__(self, value: Any):
        """
        Initialize invalid hex color error.

        Args:
            value: The rejected input
        """
        super().__init__(
            f"'{value}' is not a valid HEX color",
            technical_message=f"Expected '#RRGGBB' (6 hex digits), got {value!r}",
            recovery_hint="Use a value like '#667eea' (the leading '#' is optional)",
        )
        self.value = value


class InvalidChannelError(ColorError):
    """An RGB channel name is not one of r, g or b."""

    recoverable = False

    def __init__(self, channel: Any):
        super().__init__(
            f"Unknown RGB channel '{channel}'",
            technical_message=f"Channel must be one of 'r', 'g', 'b', got {channel!r}",
        )
        self.channel = channel
