"""State machine for the interactive color picker."""

import logging
import math
from threading import Lock
from typing import Optional

from huepicker.codec import ColorCache, parse_color
from huepicker.model_manager import ObserverManager
from huepicker.models import ColorValue, HsvColor, PickerState
from huepicker.protocols import ColorNameResolver, PickerEvent, PickerObserver
from huepicker.utils import clamp01, round_half_up

logger = logging.getLogger(__name__)


def _is_finite_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class PickerStateMachine:
    """
    Owns the picker triple and keeps it consistent.

    The triple is:
    - ``hsv``: live HSV reference that drives the drag surfaces
    - ``color``: the displayed color
    - ``preview_color``: full-saturation, full-value color of the current hue

    There are two ways in. ``set_hsv`` is the internal path used by drag
    surfaces; it derives ``color`` from the edited HSV. ``set_color`` is the
    external path (typed text, presets, the host application); it replaces
    ``color`` and resynchronizes ``hsv`` without losing the hue when the new
    color is gray or black.

    No operation raises for bad values: non-numeric or non-finite
    components are ignored, everything else is clamped.
    """

    def __init__(
        self,
        initial: object = "#ff0000",
        cache: Optional[ColorCache] = None,
        resolver: Optional[ColorNameResolver] = None,
    ) -> None:
        """
        Initialize the picker.

        Args:
            initial: Starting color (any input ``parse_color`` accepts)
            cache: Parse cache; a private one is created when omitted
            resolver: Named-color resolver for text input
        """
        self._lock = Lock()
        self._cache = cache if cache is not None else ColorCache()
        self._resolver = resolver
        # ObserverManager has its own lock; never notify while holding _lock
        self._observers = ObserverManager[PickerObserver](observer_type_name="picker")

        self._color = self.parse(initial)
        self._hsv = self._color.hsv
        self._preview = self._preview_for(self._hsv.h)

    def register_observer(self, observer: PickerObserver) -> None:
        """
        Register an observer to receive picker events.

        Args:
            observer: Object implementing PickerObserver protocol
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: PickerObserver) -> None:
        """
        Unregister an observer.

        Args:
            observer: Previously registered observer
        """
        self._observers.unregister(observer)

    @property
    def cache(self) -> ColorCache:
        return self._cache

    @property
    def resolver(self) -> Optional[ColorNameResolver]:
        return self._resolver

    @property
    def state(self) -> PickerState:
        """Consistent snapshot of the whole triple."""
        with self._lock:
            return self._snapshot()

    @property
    def hsv(self) -> HsvColor:
        with self._lock:
            return self._hsv

    @property
    def color(self) -> ColorValue:
        with self._lock:
            return self._color

    @property
    def preview_color(self) -> ColorValue:
        with self._lock:
            return self._preview

    def parse(self, value: object) -> ColorValue:
        """Parse a color with this picker's cache and resolver."""
        return parse_color(value, cache=self._cache, resolver=self._resolver)

    def set_hsv(
        self,
        h: Optional[float] = None,
        s: Optional[float] = None,
        v: Optional[float] = None,
        a: Optional[float] = None,
    ) -> None:
        """
        Merge components into the live HSV and derive the displayed color.

        ``h`` is rounded to a whole degree and clamped into [0, 360]; ``s``,
        ``v`` and ``a`` are clamped into [0, 1]. The preview only follows
        when ``h`` is given, so saturation/value drags never repaint the
        hue-dependent backgrounds.

        Args:
            h: Hue in degrees
            s: Saturation (0-1)
            v: Value (0-1)
            a: Alpha (0-1)
        """
        updates: dict[str, float] = {}
        for name, value in (("h", h), ("s", s), ("v", v), ("a", a)):
            if value is None:
                continue
            if not _is_finite_number(value):
                logger.warning(f"Ignoring invalid {name}={value!r} in set_hsv")
                continue
            if name == "h":
                updates[name] = float(min(360, max(0, round_half_up(value))))
            else:
                updates[name] = clamp01(float(value))

        if not updates:
            return

        with self._lock:
            new_hsv = self._hsv.model_copy(update=updates)
            color = self.parse(new_hsv)
            preview = self._preview_for(new_hsv.h) if "h" in updates else self._preview
            events, state = self._transition(new_hsv, color, preview)

        # Notify observers AFTER releasing lock to avoid deadlock
        self._publish(events, state)

    def set_color(self, new_color: object) -> None:
        """
        Replace the displayed color from outside the drag surfaces.

        The live HSV is resynchronized from the new color. A color whose hue
        is meaningful (``s > 0`` and ``v > 0``) is adopted as is; for gray
        or black only value and alpha are taken and the tracked hue and
        saturation are kept, so dragging back out of the gray edge restores
        the previous hue.

        Args:
            new_color: ColorValue, or any input ``parse_color`` accepts
        """
        color = new_color if isinstance(new_color, ColorValue) else self.parse(new_color)
        incoming = color.hsv

        with self._lock:
            if incoming.is_degenerate:
                new_hsv = self._hsv.model_copy(update={"v": incoming.v, "a": incoming.a})
            else:
                new_hsv = incoming

            if new_hsv.h != self._hsv.h:
                preview = self._preview_for(new_hsv.h)
            else:
                preview = self._preview
            events, state = self._transition(new_hsv, color, preview)

        self._publish(events, state)

    def set_preview_color(self, new_color: object) -> None:
        """
        Override the preview color directly (e.g. when applying a preset).

        Args:
            new_color: ColorValue, or any input ``parse_color`` accepts
        """
        preview = new_color if isinstance(new_color, ColorValue) else self.parse(new_color)

        with self._lock:
            events, state = self._transition(self._hsv, self._color, preview)

        self._publish(events, state)

    def _preview_for(self, hue: float) -> ColorValue:
        return self.parse(HsvColor(h=hue, s=1.0, v=1.0, a=1.0))

    def _snapshot(self) -> PickerState:
        return PickerState(hsv=self._hsv, color=self._color, preview_color=self._preview)

    def _transition(
        self, hsv: HsvColor, color: ColorValue, preview: ColorValue
    ) -> tuple[list[PickerEvent], PickerState]:
        """
        Apply a new triple. Must be called with ``_lock`` held.

        Returns:
            The events for the fields that changed, and the new snapshot
        """
        events = []
        if hsv != self._hsv:
            self._hsv = hsv
            events.append(PickerEvent.HSV_CHANGED)
        if color != self._color:
            self._color = color
            events.append(PickerEvent.COLOR_CHANGED)
        if preview != self._preview:
            self._preview = preview
            events.append(PickerEvent.PREVIEW_CHANGED)

        if events:
            logger.debug(
                f"Picker transition {[e.value for e in events]}: "
                f"hsv=({hsv.h:g}, {hsv.s:.3f}, {hsv.v:.3f}, {hsv.a:.3f}) color={color.hex}"
            )
        return events, self._snapshot()

    def _publish(self, events: list[PickerEvent], state: PickerState) -> None:
        """
        Notify observers of each changed field.

        Note:
            Called AFTER releasing self._lock so observers may read the
            picker or call its setters while handling the event.
        """
        for event in events:
            self._observers.notify("on_picker_event", event, state)
