"""Command-line interface for bemgen."""

from bemgen.cli.main import cli

__all__ = ["cli"]
