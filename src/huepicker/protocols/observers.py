"""Protocol definitions for the picker's collaborators.

- Picker observers: react to picker state changes (swatches, indicators)
- Color name resolvers: turn CSS color names into hex strings
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from huepicker.models import PickerState

from .events import PickerEvent


@runtime_checkable
class PickerObserver(Protocol):
    """
    Observer that receives picker state change events.

    Rendering collaborators implement this to repaint swatches, gradients
    and indicators without polling the state machine.
    """

    def on_picker_event(self, event: PickerEvent, state: "PickerState") -> None:
        """
        Handle a picker state change.

        Args:
            event: Which part of the triple changed
            state: Snapshot of the complete triple after the change

        Threading:
            Called synchronously from the thread that mutated the picker,
            after its lock is released. Observers may read the picker or
            call its setters.

        Error Handling:
            Exceptions raised by observers are caught and logged. They do
            not propagate to the caller and don't affect other observers.
        """
        ...


@runtime_checkable
class ColorNameResolver(Protocol):
    """
    Resolves color names (e.g. 'dodgerblue') to hex strings.

    This is the seam to a platform color engine. The codec only calls it
    for strings that are neither hex nor functional notation, and
    ``parse_color`` caches whatever it returns.
    """

    def resolve(self, name: str) -> str | None:
        """
        Resolve a color name.

        Args:
            name: Raw color string as typed by the user

        Returns:
            A hex color string ('#rrggbb' or '#rrggbbaa'), or None if the
            name is unknown
        """
        ...
