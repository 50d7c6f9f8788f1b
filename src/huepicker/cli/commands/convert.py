"""Convert command implementation."""

import sys

import click

from huepicker.codec import build_color_value, format_color, require_rgb
from huepicker.exceptions import collect_errors, format_error_for_display
from huepicker.models import ColorFormat, ColorValue

FORMAT_CHOICES = [fmt.value for fmt in ColorFormat]


def _echo_color(raw: str, color: ColorValue, fmt: str) -> None:
    if fmt != "all":
        click.echo(format_color(color, fmt))
        return

    click.echo(raw)
    for each in ColorFormat:
        click.echo(f"  {each.value:<6} {format_color(color, each)}")


@click.command(name="convert")
@click.argument("colors", nargs=-1, required=True)
@click.option(
    "--format", "-f", "fmt",
    type=click.Choice(FORMAT_CHOICES + ["all"], case_sensitive=False),
    default="all",
    show_default=True,
    help="Output format",
)
def convert(colors: tuple[str, ...], fmt: str):
    """
    Parse COLORS and print them in another format.

    Every color is converted even if some fail; the exit code is 1 when any
    of them could not be parsed.

    \b
    Examples:
      huepicker convert "#336699"
      huepicker convert rebeccapurple "hsv(210, 67%, 60%)" -f rgb
    """
    fmt = fmt.lower()
    collector = collect_errors("convert colors")

    for raw in colors:
        with collector.try_operation(raw):
            _echo_color(raw, build_color_value(require_rgb(raw)), fmt)

    if not collector.has_errors:
        return

    click.echo(f"ERROR: {collector.get_summary()}", err=True)
    _, recovery_hint = format_error_for_display(collector.errors[-1][1])
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)
