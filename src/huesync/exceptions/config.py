"""Configuration-related exceptions.

- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file cannot be read as JSON
- ConfigValidationError: Config values fail validation
"""

import re
from typing import Any, Optional

from .base import HueSyncError

# Position suffix of JSON parser messages, e.g. "trailing comma at line 3 column 1"
_POSITION_PATTERN = re.compile(r"line (\d+) column (\d+)")

RESET_HINT = "Run 'huesync config reset' to start over from the defaults"


class ConfigurationError(HueSyncError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """
    Configuration file cannot be read as JSON.

    Attributes:
        file_path: The file that failed to parse
        reason: Parser message (e.g. 'trailing comma at line 3 column 1')
        line: 1-based line of the problem, if the parser reported one
        column: 1-based column of the problem, if the parser reported one
    """

    def __init__(self, file_path: str, reason: str):
        position = _POSITION_PATTERN.search(reason)
        self.line = int(position.group(1)) if position else None
        self.column = int(position.group(2)) if position else None

        where = f" (line {self.line}, column {self.column})" if position else ""
        super().__init__(
            f"Configuration file is not valid JSON{where}",
            technical_message=f"Cannot parse {file_path}: {reason}",
            recovery_hint=f"Check {file_path}: {reason}\n{RESET_HINT}",
        )
        self.file_path = file_path
        self.reason = reason


class ConfigValidationError(ConfigurationError):
    """A configuration value fails validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: Dotted location of the failing field (e.g. 'presets.2')
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        hint_lines = [f"Update '{field}' in {file_path or 'your configuration'}"]
        if field.startswith(("default_color", "presets")):
            hint_lines.append("Colors must be written as '#RRGGBB', e.g. '#667eea'")
        hint_lines.append(RESET_HINT)

        super().__init__(
            f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
