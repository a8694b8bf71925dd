"""Example: drive the color engine the way a picker UI would.

This example demonstrates:
- Registering an observer for color changes
- Typing a HEX value one character at a time (partial text is not broadcast)
- Slider, RGB field and preset edits keeping all three views in sync
"""

import logging

from huesync import ColorEngine, CopyFormat, EditEvent
from huesync.colors import preset_name

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


class PrintingObserver:
    """Prints every committed color with all three views."""

    def __init__(self, engine: ColorEngine):
        self.engine = engine

    def on_color_changed(self, hex_value: str) -> None:
        snapshot = self.engine.get_canonical()
        name = preset_name(hex_value) or ""
        print(f"{snapshot.display_hex}  {snapshot.css_rgb():<20} {snapshot.css_hsl():<20} {name}")


def main():
    engine = ColorEngine()
    engine.register_observer(PrintingObserver(engine))

    print("Typing #123456:")
    for text in ["#", "#1", "#12", "#123", "#1234", "#12345", "#123456"]:
        engine.handle_event(EditEvent.HEX_TEXT_CHANGED, text)

    print("\nDragging the hue slider:")
    for hue in range(0, 360, 60):
        engine.handle_event(EditEvent.HUE_CHANGED, hue)

    print("\nTyping into the red field:")
    engine.handle_event(EditEvent.RGB_CHANNEL_CHANGED, "999", channel="r")

    print("\nClicking presets:")
    for preset in engine.presets[:3]:
        engine.handle_event(EditEvent.PRESET_SELECTED, preset)

    print(f"\nCopied: {engine.copy_text(CopyFormat.HSL)}")


if __name__ == "__main__":
    main()
