"""Observer list management.

ObserverManager keeps an ordered list of observers and calls a named
callback on each of them, isolating the caller from observer failures.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered, duplicate-free observer list with safe notification.

    Type Parameters:
        T: The observer protocol type (e.g., ColorObserver)

    Observers are notified in registration order. The list is copied under
    the lock and callbacks run without it, so an observer may register or
    unregister observers (or read the subject) while being notified.

    Example:
        ```python
        class Subject:
            def __init__(self):
                self._observers = ObserverManager[ColorObserver](observer_type_name="color")

            def _changed(self, hex_value):
                self._observers.notify("on_color_changed", hex_value)
        ```
    """

    def __init__(self, lock: Lock | None = None, observer_type_name: str = "observer"):
        """
        Initialize the observer manager.

        Args:
            lock: Optional lock guarding the list. If None, creates a new lock.
            observer_type_name: Name used in log messages (e.g., "color")
        """
        self._observers: list[T] = []
        self._lock = lock or Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer. Registering twice is a no-op."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                logger.info(f"Registered {self._observer_type_name} observer: {observer}")
            else:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer. Unknown observers are logged and ignored."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
                logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
            else:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call ``callback_name`` on every registered observer.

        Args:
            callback_name: Observer method to call (e.g., 'on_color_changed')
            *args: Positional arguments for the callback
            **kwargs: Keyword arguments for the callback

        Error Handling:
            Exceptions from one observer are logged and the remaining
            observers are still notified.
        """
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            try:
                callback = getattr(observer, callback_name)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'"
                )
                continue

            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        with self._lock:
            count = len(self._observers)
            self._observers.clear()
            if count > 0:
                logger.info(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __bool__(self) -> bool:
        with self._lock:
            return len(self._observers) > 0

