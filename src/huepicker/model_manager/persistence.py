"""Loading Pydantic models from JSON files.

Stateless helpers used by the configuration layer. Low-level Pydantic and
I/O errors are converted into HuePickerError subclasses with recovery
hints (see ``huepicker.exceptions.handlers``).

Nothing here writes: picker state is never persisted.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from huepicker.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Utility class providing shared Pydantic loading operations.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json(
            path=Path("config.json"),
            model_type=PickerConfig
        )
        ```

    Thread-Safety:
        All methods are thread-safe as they operate on function parameters
        and do not access shared mutable state.
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid or the file is empty
            ConfigValidationError: If the JSON content fails Pydantic validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not json_content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(json_content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[T], default_factory: Callable[[], T] | None = None
    ) -> T:
        """
        Load a model from JSON, or return a default if the file doesn't exist.

        Args:
            path: Path to the JSON file
            model_type: The Pydantic model class
            default_factory: Optional callable that returns a default instance.
                           If None, calls model_type() to get defaults.

        Raises:
            ConfigFileInvalidError: If the file exists but has invalid JSON syntax
            ConfigValidationError: If the file exists but has invalid values

        Notes:
            Does not write the default to disk.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, using default {model_type.__name__}")
            if default_factory:
                return default_factory()
            return model_type()
