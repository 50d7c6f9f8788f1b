"""Allow running as ``python -m huepicker``."""

from huepicker.cli.main import cli

if __name__ == "__main__":
    cli()
