"""
Custom exception hierarchy for huepicker.

## Exception Hierarchy

```
HuePickerError (base)
├── ColorParseError
│   ├── InvalidColorError
│   └── UnresolvableColorError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `HuePickerError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Strict Parsing

```python
from huepicker.codec import require_rgb
from huepicker.exceptions import ColorParseError

try:
    rgb = require_rgb(user_text)
except ColorParseError as e:
    logger.warning(e.technical_message)
    show(e.get_full_message())
```

The interactive codec entry points (`parse_to_rgb`, `parse_color`) never
raise these; they return `None` or fall back to opaque black.
"""

from .base import HuePickerError
from .color import ColorParseError, InvalidColorError, UnresolvableColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Color parsing
    "ColorParseError",
    "InvalidColorError",
    "UnresolvableColorError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Base
    "HuePickerError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
