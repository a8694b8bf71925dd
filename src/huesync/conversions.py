"""Color model conversions between HSL, RGB and HEX.

Every function here is pure and works on plain ints and strings so that
models, the engine and the CLI can share them without import cycles.

Integer results must match the reference color picker exactly, which
means two things that differ from the obvious Python spelling:

- Rounding is half-up (``floor(x + 0.5)``), not the banker's rounding
  of the built-in ``round``.
- Hues outside ``[0, 360)`` match no sextant in ``hsl_to_rgb`` and keep
  the chroma components at zero, leaving only the lightness offset.
  They are not wrapped.

Example:
    >>> hsl_to_rgb(300, 100, 50)
    (255, 0, 255)
    >>> rgb_to_hsl(*hex_to_rgb("#ff00ff"))
    (300, 100, 50)
"""

import math
import re
from typing import Any, Optional

RGBTuple = tuple[int, int, int]
HSLTuple = tuple[int, int, int]

CHANNEL_MAX = 255

# ASCII only: \d would also accept non-ASCII digits
HEX_COLOR_PATTERN = re.compile(
    r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})"
)
HEX_TEXT_PATTERN = re.compile(r"#[0-9a-fA-F]{0,6}")
COMPLETE_HEX_TEXT_LENGTH = 7

_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?)([0-9]+)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with ties going up."""
    return math.floor(value + 0.5)


def hsl_to_rgb(h: int, s: int, l: int) -> RGBTuple:
    """
    Convert integer HSL to 8-bit RGB.

    Args:
        h: Hue in degrees. Values outside [0, 360) are not wrapped.
        s: Saturation in percent (0-100)
        l: Lightness in percent (0-100)

    Returns:
        (r, g, b) with each channel in 0-255
    """
    s_unit = s / 100
    l_unit = l / 100
    c = (1 - abs(2 * l_unit - 1)) * s_unit
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = l_unit - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    elif 300 <= h < 360:
        r, g, b = c, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return (
        round_half_up((r + m) * CHANNEL_MAX),
        round_half_up((g + m) * CHANNEL_MAX),
        round_half_up((b + m) * CHANNEL_MAX),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit RGB as lowercase '#rrggbb'."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(text: str) -> Optional[RGBTuple]:
    """
    Parse a 6-digit HEX color.

    The leading '#' is optional and digits are case-insensitive.

    Returns:
        (r, g, b), or None if the text is not exactly a 6-digit color
    """
    match = HEX_COLOR_PATTERN.fullmatch(text)
    if match is None:
        return None
    return (
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def rgb_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """
    Convert 8-bit RGB to integer HSL.

    Returns:
        (h, s, l): hue in degrees (0-360), saturation and lightness in
        percent (0-100)
    """
    r_unit = r / CHANNEL_MAX
    g_unit = g / CHANNEL_MAX
    b_unit = b / CHANNEL_MAX
    max_c = max(r_unit, g_unit, b_unit)
    min_c = min(r_unit, g_unit, b_unit)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        hue = saturation = 0.0
    else:
        d = max_c - min_c
        if lightness > 0.5:
            saturation = d / (2 - max_c - min_c)
        else:
            saturation = d / (max_c + min_c)

        # Channel order matters when two channels share the maximum
        if max_c == r_unit:
            hue = ((g_unit - b_unit) / d + (6 if g_unit < b_unit else 0)) / 6
        elif max_c == g_unit:
            hue = ((b_unit - r_unit) / d + 2) / 6
        else:
            hue = ((r_unit - g_unit) / d + 4) / 6

    return (
        round_half_up(hue * 360),
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def is_hex_text(text: Any) -> bool:
    """Check whether text is a partial or complete HEX entry ('#' plus 0-6 hex digits)."""
    return isinstance(text, str) and HEX_TEXT_PATTERN.fullmatch(text) is not None


def is_complete_hex_text(text: str) -> bool:
    """Check whether accepted HEX text holds a full '#RRGGBB' color."""
    return len(text) == COMPLETE_HEX_TEXT_LENGTH


def parse_channel_text(raw: Any) -> int:
    """
    Leniently parse user text for an RGB channel.

    Reads optional leading whitespace, an optional sign and the leading run
    of decimal digits; everything after it is ignored. Input without
    leading digits gives 0. Runs of more than three significant digits
    give +/-256, which ``clamp_channel`` maps to the nearest bound.

    Examples:
        >>> parse_channel_text("12abc")
        12
        >>> parse_channel_text("3.7")
        3
        >>> parse_channel_text("abc")
        0
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0

    match = _LEADING_INT_PATTERN.match(str(raw))
    if match is None:
        return 0

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # Anything past three digits is out of range; int() rejects very long runs
    if len(digits) > 3:
        value = CHANNEL_MAX + 1
    else:
        value = int(digits)
    return -value if sign == "-" else value


def clamp_channel(value: int) -> int:
    """Clamp a channel value to 0-255."""
    return max(0, min(CHANNEL_MAX, value))
