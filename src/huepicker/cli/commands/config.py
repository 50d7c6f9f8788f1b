"""Config command implementations.

The configuration is read-only from the CLI's point of view: edit the
JSON file by hand, then check it with ``huepicker config validate``.
"""

import sys
from pathlib import Path

import click

from huepicker.codec import require_rgb
from huepicker.exceptions import ConfigurationError, ErrorContext, format_error_for_display
from huepicker.model_manager import PydanticPersistence
from huepicker.models import PickerConfig
from huepicker.models.config import DEFAULT_CONFIG_PATH


def _config_path(ctx: click.Context) -> Path:
    return ctx.meta.get("config_path") or DEFAULT_CONFIG_PATH


def _echo_error(error: Exception, prefix: str = "ERROR") -> None:
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"{prefix}: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)


@click.group(name="config")
def config():
    """Inspect huepicker settings."""
    pass


@config.command(name="show")
@click.pass_context
def show(ctx: click.Context):
    """Display the effective configuration."""
    path = _config_path(ctx)

    try:
        current = PickerConfig.load_or_default(path)
    except ConfigurationError as e:
        _echo_error(e)
        sys.exit(1)

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    click.echo(f"Config file: {source}")
    for name, value in current.model_dump(mode="json").items():
        click.echo(f"  {name}: {value}")


@config.command(name="validate")
@click.pass_context
def validate(ctx: click.Context):
    """Check the config file's syntax and values."""
    path = _config_path(ctx)

    if not path.exists():
        click.echo(f"No config file at {path}; defaults are in use.")
        return

    with ErrorContext(f"validate {path}", re_raise=False) as check:
        loaded = PydanticPersistence.load_json(path, PickerConfig)
        require_rgb(loaded.initial_color)

    if check.error:
        _echo_error(check.error, prefix="[FAIL]")
        sys.exit(1)

    click.echo(f"[OK] {path}")
