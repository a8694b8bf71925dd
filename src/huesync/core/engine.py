"""Color state engine: the single source of truth for the current color."""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any, Optional

from huesync.conversions import (
    clamp_channel,
    hex_to_rgb,
    hsl_to_rgb,
    is_complete_hex_text,
    is_hex_text,
    parse_channel_text,
)
from huesync.exceptions import InvalidChannelError, InvalidHexColorError
from huesync.models import HSL, Color, ColorSnapshot, EngineConfig
from huesync.protocols import CallbackColorObserver, ColorObserver, CopyFormat, EditEvent
from huesync.utils import ObserverManager

logger = logging.getLogger(__name__)

RGB_CHANNELS = ("r", "g", "b")


class ColorEngine:
    """
    Holds the current color and keeps its HSL, RGB and HEX views in sync.

    RGB is the canonical form. Each edit recomputes the other views from
    the one that was edited:

    - HSL edit: RGB = hsl_to_rgb(HSL), HEX = rgb_to_hex(RGB)
    - HEX edit: RGB = hex_to_rgb(HEX), HSL = rgb_to_hsl(RGB)
    - RGB edit: HSL = rgb_to_hsl(RGB), HEX = rgb_to_hex(RGB)

    User edits never raise. Malformed HEX text is ignored, bad channel
    text becomes 0, and out-of-range channels are clamped. Partial HEX
    text ('#', '#4', ... '#12345') is kept as the display value without
    touching RGB/HSL or notifying anyone.

    Event-Driven Architecture:
        After every complete update, registered ColorObservers receive
        ``on_color_changed(hex_value)`` with the new canonical HEX.

    Threading:
        Designed for one editing session on one thread. Each operation
        swaps in its new state under ``_lock`` so ``get_canonical()`` never
        sees a half-applied edit. Observers are notified after the lock is
        released. Concurrent editors still need their own serialization.

    Example:
        ```python
        engine = ColorEngine(on_color_change=print)
        engine.set_hex("#ff00ff")            # prints '#ff00ff'
        engine.get_canonical().hsl.to_tuple()  # (300, 100, 50)
        ```
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        on_color_change: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the engine with the configured default color.

        Args:
            config: Engine configuration (defaults to EngineConfig())
            on_color_change: Optional callback receiving the new HEX after
                each complete update. Construction itself does not notify.
        """
        self.config = config or EngineConfig()
        self._lock = Lock()
        self._observers = ObserverManager[ColorObserver](observer_type_name="color")

        default = Color.from_hex(self.config.default_color)
        self._rgb = default
        self._hsl = default.to_hsl()
        self._hex = default.to_hex()

        if on_color_change is not None:
            self.register_observer(CallbackColorObserver(on_color_change))

        logger.info(f"ColorEngine initialized with {self._hex}")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        """
        Register an observer to receive color changes.

        Args:
            observer: Object implementing ColorObserver protocol
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        """
        Unregister an observer.

        Args:
            observer: Previously registered observer
        """
        self._observers.unregister(observer)

    def _notify_observers(self, hex_value: str) -> None:
        self._observers.notify("on_color_changed", hex_value)

    def handle_event(self, event: EditEvent, value: Any, channel: Optional[str] = None) -> None:
        """
        Apply an edit event from the presentation layer.

        Args:
            event: The kind of edit
            value: Event payload (int for HSL sliders, text for HEX/RGB fields,
                   '#RRGGBB' for presets)
            channel: RGB channel name, required for RGB_CHANNEL_CHANGED

        Raises:
            InvalidChannelError: If RGB_CHANNEL_CHANGED has no valid channel
            InvalidHexColorError: If PRESET_SELECTED carries a malformed color
        """
        if event is EditEvent.HUE_CHANGED:
            self.set_hue(value)
        elif event is EditEvent.SATURATION_CHANGED:
            self.set_saturation(value)
        elif event is EditEvent.LIGHTNESS_CHANGED:
            self.set_lightness(value)
        elif event is EditEvent.HEX_TEXT_CHANGED:
            self.set_hex(value)
        elif event is EditEvent.RGB_CHANNEL_CHANGED:
            self.set_rgb_component(channel, value)
        elif event is EditEvent.PRESET_SELECTED:
            self.set_preset(value)
        else:
            raise ValueError(f"Unsupported edit event: {event!r}")

    # =================================================================
    # State
    # =================================================================

    def _commit(self, rgb: Color, hsl: HSL) -> str:
        """Swap in a complete, consistent color and return its HEX."""
        hex_value = rgb.to_hex()
        with self._lock:
            self._rgb = rgb
            self._hsl = hsl
            self._hex = hex_value
        return hex_value

    def get_canonical(self) -> ColorSnapshot:
        """
        Get the current HSL, RGB and HEX views together.

        Returns:
            Immutable snapshot of the current color
        """
        with self._lock:
            return ColorSnapshot(hsl=self._hsl, rgb=self._rgb, hex=self._hex)

    @property
    def presets(self) -> list[str]:
        """Configured preset swatches."""
        return list(self.config.presets)

    def copy_text(self, fmt: CopyFormat = CopyFormat.HEX) -> str:
        """
        Get the current color as text for the clipboard.

        Args:
            fmt: HEX ('#667eea'), RGB ('rgb(102, 126, 234)') or HSL ('hsl(229, 76%, 66%)')

        Returns:
            Formatted text. For HEX this is the current display text,
            which may be partial while the user is typing.
        """
        snapshot = self.get_canonical()
        if fmt is CopyFormat.HEX:
            return snapshot.hex
        if fmt is CopyFormat.RGB:
            return snapshot.css_rgb()
        if fmt is CopyFormat.HSL:
            return snapshot.css_hsl()
        raise ValueError(f"Unsupported copy format: {fmt!r}")

    # =================================================================
    # HSL edits
    # =================================================================

    def set_hsl(self, h: int, s: int, l: int) -> ColorSnapshot:  # noqa: E741
        """
        Set the color from HSL.

        The HSL values are stored as given; hue is not wrapped and
        saturation/lightness are not clamped. Saturation or lightness
        outside 0-100 can push the converted channels past 0-255; those are
        clamped so the RGB view stays a valid color.

        Args:
            h: Hue in degrees
            s: Saturation in percent (0-100)
            l: Lightness in percent (0-100)

        Returns:
            Snapshot after the update
        """
        hsl = HSL(h=h, s=s, l=l)
        r, g, b = hsl_to_rgb(h, s, l)
        rgb = Color(r=clamp_channel(r), g=clamp_channel(g), b=clamp_channel(b))
        hex_value = self._commit(rgb, hsl)

        logger.debug(f"HSL set to {hsl.to_tuple()} -> {hex_value}")
        self._notify_observers(hex_value)
        return self.get_canonical()

    def set_hue(self, h: int) -> ColorSnapshot:
        """Set hue, keeping saturation and lightness."""
        current = self.get_canonical().hsl
        return self.set_hsl(h, current.s, current.l)

    def set_saturation(self, s: int) -> ColorSnapshot:
        """Set saturation, keeping hue and lightness."""
        current = self.get_canonical().hsl
        return self.set_hsl(current.h, s, current.l)

    def set_lightness(self, l: int) -> ColorSnapshot:  # noqa: E741
        """Set lightness, keeping hue and saturation."""
        current = self.get_canonical().hsl
        return self.set_hsl(current.h, current.s, l)

    # =================================================================
    # HEX edits
    # =================================================================

    def set_hex(self, text: Any) -> bool:
        """
        Apply HEX text typed by the user.

        Text must be '#' followed by 0-6 hex digits, otherwise it is
        ignored. Partial text is stored for display only. A complete
        color updates RGB and HSL and notifies observers.

        Args:
            text: Raw text from the HEX field

        Returns:
            True if the text was accepted (partial or complete), False if ignored
        """
        if not is_hex_text(text):
            logger.debug(f"Ignored HEX text {text!r}")
            return False

        if not is_complete_hex_text(text):
            with self._lock:
                self._hex = text
            logger.debug(f"Partial HEX text {text!r}")
            return True

        self._apply_complete_hex(text)
        return True

    def set_preset(self, hex_text: str) -> ColorSnapshot:
        """
        Apply a preset swatch.

        Args:
            hex_text: Complete '#RRGGBB' color

        Returns:
            Snapshot after the update

        Raises:
            InvalidHexColorError: If hex_text is not a complete color
                (state is left unchanged)
        """
        if not isinstance(hex_text, str) or hex_to_rgb(hex_text) is None:
            raise InvalidHexColorError(hex_text)

        self._apply_complete_hex(hex_text)
        return self.get_canonical()

    def _apply_complete_hex(self, hex_text: str) -> None:
        rgb = Color.from_hex(hex_text)
        hex_value = self._commit(rgb, rgb.to_hsl())

        logger.debug(f"HEX set to {hex_text!r} -> {hex_value}")
        self._notify_observers(hex_value)

    # =================================================================
    # RGB edits
    # =================================================================

    def set_rgb_component(self, channel: str, raw_value: Any) -> ColorSnapshot:
        """
        Apply text typed into one RGB field.

        The text is parsed leniently (non-numeric gives 0) and clamped to
        0-255. The other two channels keep their values.

        Args:
            channel: 'r', 'g' or 'b' (case-insensitive)
            raw_value: Raw field text (or a number)

        Returns:
            Snapshot after the update

        Raises:
            InvalidChannelError: If channel is not r, g or b
        """
        key = channel.lower() if isinstance(channel, str) else channel
        if key not in RGB_CHANNELS:
            raise InvalidChannelError(channel)

        value = clamp_channel(parse_channel_text(raw_value))
        with self._lock:
            rgb = self._rgb.model_copy(update={key: value})
        hex_value = self._commit(rgb, rgb.to_hsl())

        logger.debug(f"RGB channel {key} set to {value} from {raw_value!r} -> {hex_value}")
        self._notify_observers(hex_value)
        return self.get_canonical()

    # =================================================================
    # Lifecycle
    # =================================================================

    def reset(self) -> ColorSnapshot:
        """Return to the configured default color and notify observers."""
        return self.set_preset(self.config.default_color)
