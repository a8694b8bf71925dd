"""Observer protocol for color change notifications."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives the new canonical color after each complete edit.

    This protocol allows loose coupling between the color engine and the
    components that display the current color.
    """

    def on_color_changed(self, hex_value: str) -> None:
        """
        Handle a color change.

        Args:
            hex_value: The new canonical color as lowercase '#rrggbb'

        Threading:
            Called synchronously on the thread that made the edit, after
            the engine state has been updated. Call ``get_canonical()`` on
            the engine for the full HSL/RGB/HEX snapshot.

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            engine. They do not propagate to the caller, ensuring one
            failing observer doesn't break others.

        Note:
            Never called for partial HEX text or rejected edits.
        """
        ...


class CallbackColorObserver:
    """Adapts a plain ``callback(hex_value)`` function to ColorObserver."""

    def __init__(self, callback: Callable[[str], None]):
        self.callback = callback

    def on_color_changed(self, hex_value: str) -> None:
        self.callback(hex_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CallbackColorObserver):
            return NotImplemented
        return self.callback == other.callback

    def __hash__(self) -> int:
        return hash(self.callback)

    def __repr__(self) -> str:
        return f"CallbackColorObserver({self.callback!r})"
