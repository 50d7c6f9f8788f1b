"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from huepicker import __version__

from .commands import config, convert, pick

logger = logging.getLogger(__name__)

_installed_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Output goes to stderr so it never mixes with converted colors on
    stdout, or to a rotating file when ``log_file`` is given.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level regardless of verbosity
        log_file: Log file path (optional)
    """
    global _installed_handler

    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps the last 3 files, max 1MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Repeated invocations in one process replace our handler
    if _installed_handler is not None:
        root_logger.removeHandler(_installed_handler)
        _installed_handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _installed_handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file or 'stderr'}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="huepicker")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.huepicker/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
def cli(ctx, config_path: Optional[Path], verbose: int, debug: bool, log_file: Optional[Path]):
    """
    Huepicker - color conversion and picking from the command line.

    \b
    Examples:
      # Show a color in every format
      huepicker convert "#336699"

      # Convert several colors to OKLCH
      huepicker convert red "rgb(0, 128, 255)" -f oklch

      # Start from a color, drag the hue strip to 1/3 and the SV surface
      huepicker pick "#336699" --hue 0.33 --sv 0.8 0.1

      # Show the active configuration
      huepicker config show
    """
    setup_logging(verbose, debug, log_file)

    from huepicker.exceptions import ConfigurationError, format_error_for_display
    from huepicker.models import PickerConfig

    ctx.meta["config_path"] = config_path

    # The config group loads (and reports on) the file itself
    if ctx.invoked_subcommand == "config":
        return

    try:
        ctx.obj = PickerConfig.load_or_default(config_path)
    except ConfigurationError as e:
        logger.error(e.technical_message)
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)


cli.add_command(config)
cli.add_command(convert)
cli.add_command(pick)

if __name__ == "__main__":
    cli()
