"""
Centralized error handling utilities.

1. **Error Translation** - Convert low-level Pydantic errors into configuration errors
2. **Display Formatting** - Show friendly messages to users, keep details for logs
3. **Error Isolation** - One failing input in a batch shouldn't stop the others

## Handling Patterns

| Pattern | Code |
|---------|------|
| Pydantic error to config error | `raise wrap_pydantic_error(e, str(path)) from e` |
| Show an error to the user | `message, hint = format_error_for_display(e)` |
| Try many inputs, report all failures | `collector = collect_errors("convert colors"); with collector.try_operation(...): ...` |

## Example: Batch Conversion

```python
from huepicker.exceptions import collect_errors

collector = collect_errors("convert colors")
for raw in inputs:
    with collector.try_operation(raw):
        print(format_color(build_color_value(require_rgb(raw)), "rgb"))

if collector.has_errors:
    print(collector.get_summary())
```
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import HuePickerError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error handling.

    HuePickerError is logged, reported through ``user_notification`` and
    then either re-raised or replaced by ``fallback_value``. Any other
    exception is logged with its traceback and always re-raised.

    Args:
        operation_name: Name of the operation for logging (e.g., "apply typed color")
        user_notification: Optional callback to notify the user
        fallback_value: Value to return if a HuePickerError occurs and re_raise=False
        re_raise: Whether to re-raise HuePickerError after handling
        log_level: Logging level for the error (default: ERROR)

    Example:
        ```python
        @handle_errors(
            operation_name="apply typed color",
            re_raise=False,
            fallback_value=False,
            log_level=logging.WARNING,
        )
        def submit(self, raw: str) -> bool:
            rgb = require_rgb(raw)
            ...
        ```
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except HuePickerError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")

                if user_notification:
                    user_notification(e.get_full_message())

                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )
                raise

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("load configuration", re_raise=False) as ctx:
            config = PickerConfig.load_or_default(path)

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise HuePickerError
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Record and log a failure.

        Returns:
            True if the exception should be suppressed, False otherwise.
            Only HuePickerError is ever suppressed.
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, HuePickerError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
            return not self.re_raise

        self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return False


def wrap_pydantic_error(error: Exception, file_path: str) -> HuePickerError:
    """
    Convert Pydantic validation errors to huepicker exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Valid JSON is a precondition for field validation
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
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
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

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

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HuePickerError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Args:
        operation: Description of the overall operation

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        """
        Initialize error collector.

        Args:
            operation: Description of the overall operation
        """
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Only HuePickerError is collected; anything else is a bug and
        propagates.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            if isinstance(error, HuePickerError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, HuePickerError):
                return False

            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val.technical_message}")
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
