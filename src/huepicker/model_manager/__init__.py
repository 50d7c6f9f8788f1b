"""Generic plumbing shared by huepicker services.

- **ObserverManager**: thread-safe observer registration and notification,
  used by the picker state machine to publish state changes
- **PydanticPersistence**: loading and validating Pydantic models from JSON,
  used by the configuration layer
"""

from huepicker.model_manager.observer import ObserverManager
from huepicker.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
