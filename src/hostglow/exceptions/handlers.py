"""
Centralized error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Logs once, formats user_message  │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────────┘
                  ↑
                  │ HostGlowError
                  │
┌─────────────────────────────────────────┐
│  APPLICATION LAYER (monitor)        │
│  - Catches low-level exceptions     │
│  - Converts to HostGlowError        │
└─────────────────────────────────────────┘
                  ↑
                  │ psutil.Error, OSError, ValidationError
                  │
┌─────────────────────────────────────────┐
│  LOW LEVEL (psutil, openrgb, I/O)   │
└─────────────────────────────────────────┘
```

| Scenario | Use This |
|----------|----------|
| Config file failed to parse/validate | `wrap_pydantic_error(e, path)` |
| Show an error on the terminal | `format_error_for_display(e)` |
"""

from typing import Optional

from .base import HostGlowError
from .config import ConfigFileInvalidError, ConfigValidationError


def wrap_pydantic_error(error: Exception, file_path: str) -> HostGlowError:
    """
    Convert Pydantic validation errors to hostglow exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HostGlowError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
