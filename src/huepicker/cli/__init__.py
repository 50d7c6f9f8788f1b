"""Command-line interface for huepicker."""
