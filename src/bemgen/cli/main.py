"""bemgen CLI entry point: Click group with subcommands."""

import logging

import click

from bemgen import __version__


@click.group()
@click.version_option(version=__version__, prog_name="bemgen")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """bemgen - generate React components from BEM stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from bemgen.cli.build import build  # noqa: E402
from bemgen.cli.check import check  # noqa: E402
from bemgen.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(inspect)
