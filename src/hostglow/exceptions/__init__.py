"""
Custom exception hierarchy for hostglow.

## Exception Hierarchy

```
HostGlowError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── SensorError
└── LightingServiceError
    ├── LightingConnectionError
    └── LedUpdateError
```

All custom exceptions inherit from `HostGlowError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Only `LightingConnectionError` is retried, and only while the monitor is
starting up. Sensor and LED update failures end the process; an external
supervisor (systemd, a service manager) is expected to restart it.

### Example: Sensor failure

```python
from hostglow.exceptions import SensorError

try:
    times = psutil.cpu_times()
except psutil.Error as e:
    raise SensorError("cpu", original_error=str(e)) from e
```
"""

from .base import HostGlowError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error
from .lighting import LedUpdateError, LightingConnectionError, LightingServiceError
from .sensor import SensorError

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    # Base
    "HostGlowError",
    # Lighting
    "LedUpdateError",
    "LightingConnectionError",
    "LightingServiceError",
    # Sensors
    "SensorError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
