"""Picker state snapshot model."""

from pydantic import BaseModel, ConfigDict

from .color import ColorValue, HsvColor


class PickerState(BaseModel):
    """Immutable snapshot of the picker triple.

    Attributes:
        hsv: The live HSV reference driving the drag surfaces. Its hue is
            preserved across gray and black colors.
        color: The displayed color.
        preview_color: Fully saturated, fully bright version of ``hsv.h``,
            used to paint hue-dependent backgrounds.
    """

    model_config = ConfigDict(frozen=True)

    hsv: HsvColor
    color: ColorValue
    preview_color: ColorValue
