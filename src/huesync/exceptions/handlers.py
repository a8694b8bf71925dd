"""
Error conversion and display helpers.

| Scenario | Use This |
|----------|----------|
| Pydantic error while loading a config file | `wrap_pydantic_error(e, path)` |
| Showing any exception in the CLI | `format_error_for_display(e)` |

Example:

```python
from huesync.exceptions import wrap_pydantic_error

try:
    config = EngineConfig.model_validate_json(path.read_text())
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```
"""

from typing import Optional

from pydantic import ValidationError

from .base import HueSyncError
from .config import ConfigFileInvalidError, ConfigValidationError


def _location(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "configuration"


def wrap_pydantic_error(error: ValidationError, file_path: str) -> HueSyncError:
    """
    Convert a Pydantic validation error raised while loading a config file.

    JSON syntax errors become ConfigFileInvalidError (with the parser's line
    and column). Value errors become ConfigValidationError; several of them
    are reported together under the field name 'multiple fields'.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation
    """
    errors = error.errors()

    for err in errors:
        if err.get("type") == "json_invalid":
            reason = err.get("ctx", {}).get("error") or err.get("msg", "invalid JSON")
            return ConfigFileInvalidError(file_path, str(reason))

    if len(errors) == 1:
        err = errors[0]
        return ConfigValidationError(
            field=_location(err),
            value=err.get("input"),
            error_msg=err.get("msg", "validation failed"),
            file_path=file_path,
        )

    error_lines = [f"  - {_location(err)}: {err.get('msg', 'validation failed')}" for err in errors]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HueSyncError):
        return error.user_message, error.recovery_hint

    return f"{type(error).__name__}: {error}", None
