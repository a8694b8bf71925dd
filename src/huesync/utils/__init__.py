"""Generic utilities that are not specific to colors.

- observer: ObserverManager for observer lists
- persistence: PydanticPersistence for JSON model files
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
