"""Named color constants - 8-bit RGB (0-255).

The default engine color and the preset swatch palette, as ``Color``
objects with human-readable names for display.

Example:
    ```python
    from huesync.colors import COLORS, preset_name

    COLORS.DEFAULT.to_hex()      # '#667eea'
    preset_name("#4ECDC4")       # 'Turquoise'
    ```

The engine itself works with the HEX strings in ``EngineConfig.presets``;
names are only a presentation aid and unknown presets simply have none.
"""

from typing import Optional

from huesync.models import Color


class COLORS:
    """Standard color constants."""

    DEFAULT: Color = Color(r=102, g=126, b=234)
    """Engine start color (#667eea)"""

    BLACK: Color = Color(r=0, g=0, b=0)
    WHITE: Color = Color(r=255, g=255, b=255)

    # ============================================================================
    # PRESET SWATCHES
    # ============================================================================

    CORAL_RED: Color = Color(r=255, g=107, b=107)
    TURQUOISE: Color = Color(r=78, g=205, b=196)
    SKY_BLUE: Color = Color(r=69, g=183, b=209)
    LIGHT_SALMON: Color = Color(r=255, g=160, b=122)
    MINT: Color = Color(r=152, g=216, b=200)
    MUSTARD: Color = Color(r=247, g=220, b=111)
    LAVENDER: Color = Color(r=187, g=143, b=206)
    LIGHT_BLUE: Color = Color(r=133, g=193, b=226)
    ROSE: Color = Color(r=241, g=148, b=138)
    EMERALD: Color = Color(r=82, g=190, b=128)
    ORANGE: Color = Color(r=243, g=156, b=18)
    PURPLE: Color = Color(r=142, g=68, b=173)


PRESET_COLORS: dict[str, Color] = {
    "Coral Red": COLORS.CORAL_RED,
    "Turquoise": COLORS.TURQUOISE,
    "Sky Blue": COLORS.SKY_BLUE,
    "Light Salmon": COLORS.LIGHT_SALMON,
    "Mint": COLORS.MINT,
    "Mustard": COLORS.MUSTARD,
    "Lavender": COLORS.LAVENDER,
    "Light Blue": COLORS.LIGHT_BLUE,
    "Rose": COLORS.ROSE,
    "Emerald": COLORS.EMERALD,
    "Orange": COLORS.ORANGE,
    "Purple": COLORS.PURPLE,
}

_NAMES_BY_HEX = {color.to_hex(): name for name, color in PRESET_COLORS.items()}


def preset_name(hex_text: str) -> Optional[str]:
    """Return the display name of a preset swatch, or None if it has none."""
    return _NAMES_BY_HEX.get(hex_text.lower())


__all__ = ["COLORS", "PRESET_COLORS", "preset_name"]
