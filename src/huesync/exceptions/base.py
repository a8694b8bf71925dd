"""Base exception class for huesync.

Every error carries two messages: ``str(error)`` is written for the person
at the terminal, ``technical_message`` for the log. ``recovery_hint`` says
what to change, and the class-level ``recoverable`` flag tells callers
whether retrying with different input can help.
"""

from typing import Optional


class HueSyncError(Exception):
    """
    Base exception for all huesync errors.

    Attributes:
        user_message: Message shown to users
        technical_message: Message written to the log
        recovery_hint: What the user can change, if anything
        recoverable: False for errors that indicate a bug in the caller
    """

    recoverable: bool = True

    def __init__(
        self,
        user_message: str,
        *,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
