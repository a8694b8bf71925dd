"""Protocol definitions for the color engine's inbound and outbound interfaces.

- Events: semantic edit events and copy formats
- Observers: protocol for components that react to color changes
"""

from .events import CopyFormat, EditEvent
from .observers import CallbackColorObserver, ColorObserver

__all__ = [
    # Events
    "CopyFormat",
    "EditEvent",
    # Observers
    "CallbackColorObserver",
    "ColorObserver",
]
