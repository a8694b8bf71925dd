"""Domain events for the color engine.

- Edit events: semantic edits coming in from the presentation layer
- Copy formats: the text representations offered for copying
"""

from enum import Enum


class EditEvent(Enum):
    """Edits the presentation layer can send to the engine."""

    HUE_CHANGED = "hue_changed"                  # Hue slider moved (int degrees)
    SATURATION_CHANGED = "saturation_changed"    # Saturation slider moved (int percent)
    LIGHTNESS_CHANGED = "lightness_changed"      # Lightness slider moved (int percent)
    HEX_TEXT_CHANGED = "hex_text_changed"        # HEX text field edited (raw string)
    RGB_CHANNEL_CHANGED = "rgb_channel_changed"  # One RGB field edited (channel + raw text)
    PRESET_SELECTED = "preset_selected"          # Preset swatch clicked ('#RRGGBB')


class CopyFormat(Enum):
    """Text formats the presentation layer can copy to the clipboard."""

    HEX = "hex"  # '#667eea'
    RGB = "rgb"  # 'rgb(102, 126, 234)'
    HSL = "hsl"  # 'hsl(229, 76%, 66%)'
