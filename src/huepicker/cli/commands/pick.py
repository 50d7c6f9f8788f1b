"""Pick command implementation.

Drives a picker headlessly: seed it with a color, apply surface moves as
a pointer would, and print the result.
"""

import logging
import sys
from typing import Optional

import click

from huepicker.codec import ColorCache, format_color, require_rgb
from huepicker.core import AlphaStrip, HueStrip, PickerStateMachine, SaturationValueSurface, TextEntry
from huepicker.exceptions import ColorParseError, format_error_for_display
from huepicker.models import PickerConfig

from .convert import FORMAT_CHOICES

logger = logging.getLogger(__name__)


@click.command(name="pick")
@click.argument("color", required=False)
@click.option(
    "--sv",
    nargs=2,
    type=click.FloatRange(0, 1),
    default=None,
    metavar="X Y",
    help="Pointer position on the saturation/value surface (0-1, Y down)",
)
@click.option("--hue", type=click.FloatRange(0, 1), default=None, help="Pointer position on the hue strip (0-1)")
@click.option("--alpha", type=click.FloatRange(0, 1), default=None, help="Pointer position on the alpha strip (0-1)")
@click.option(
    "--format", "-f", "fmt",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Output format (default: display_format from the config)",
)
@click.pass_obj
def pick(
    config: PickerConfig,
    color: Optional[str],
    sv: Optional[tuple[float, float]],
    hue: Optional[float],
    alpha: Optional[float],
    fmt: Optional[str],
):
    """
    Seed a picker with COLOR and move its surfaces.

    Moves are applied hue strip first, then the saturation/value surface,
    then the alpha strip. COLOR defaults to initial_color from the config.

    \b
    Examples:
      huepicker pick "#336699" --hue 0.5
      huepicker pick gray --hue 0.33 --sv 1 0
    """
    raw = color if color is not None else config.initial_color

    try:
        require_rgb(raw)
    except ColorParseError as e:
        logger.error(e.technical_message)
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)

    machine = PickerStateMachine(raw, cache=ColorCache(config.cache_size))
    entry = TextEntry(machine, fmt.lower() if fmt else config.display_format)

    if hue is not None:
        HueStrip(machine).move(hue)
    if sv is not None:
        SaturationValueSurface(machine).move(*sv)
    if alpha is not None:
        AlphaStrip(machine).move(alpha)

    state = machine.state
    hsv = state.hsv
    click.echo(f"color    {entry.text}")
    click.echo(f"preview  {format_color(state.preview_color, entry.display_format)}")
    click.echo(f"hsv      h={hsv.h:g} s={hsv.s:.3f} v={hsv.v:.3f} a={hsv.a:.3f}")
