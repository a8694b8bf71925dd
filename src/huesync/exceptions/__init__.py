"""
Custom exception hierarchy for huesync.

## Exception Hierarchy

```
HueSyncError (base)
├── ColorError
│   ├── InvalidHexColorError
│   └── InvalidChannelError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Interactive edits (HEX typing, RGB channel text) never raise; they are
ignored or coerced by the engine. These exceptions are for inputs that
must already be valid: presets, configuration files, CLI arguments.

## Usage

```python
from huesync.exceptions import InvalidHexColorError

raise InvalidHexColorError("#12")

# User sees: "'#12' is not a valid HEX color"
# Recovery hint: "Use a value like '#667eea' (the leading '#' is optional)"
```
"""

from .base import HueSyncError
from .color import ColorError, InvalidChannelError, InvalidHexColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "HueSyncError",
    # Color
    "ColorError",
    "InvalidChannelError",
    "InvalidHexColorError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
