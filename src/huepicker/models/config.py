"""Picker configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from huepicker.model_manager.persistence import PydanticPersistence

from .enums import ColorFormat

DEFAULT_CONFIG_PATH = Path.home() / ".huepicker" / "config.json"


class PickerConfig(BaseModel):
    """Picker configuration and settings."""

    display_format: ColorFormat = Field(
        default=ColorFormat.HEX,
        description="Format used to render the current color in text fields",
    )
    cache_size: int = Field(
        default=256,
        ge=1,
        description="Maximum number of parsed colors kept in the LRU cache",
    )
    initial_color: str = Field(
        default="#ff0000",
        description="Color a new picker starts from (any parseable color string)",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.huepicker/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)
