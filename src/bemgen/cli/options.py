"""Options shared by the bemgen subcommands."""

from __future__ import annotations

from typing import Any, Callable

import click

from bemgen.config import GeneratorConfig
from bemgen.naming.conventions import CONVENTIONS

_DEFAULTS = GeneratorConfig()


def generator_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach ``--suffix`` and ``--naming`` to *command*."""
    command = click.option(
        "--naming",
        type=click.Choice(sorted(CONVENTIONS)),
        default=_DEFAULTS.naming,
        show_default=True,
        help="BEM naming convention of the stylesheet file names.",
    )(command)
    command = click.option(
        "--suffix",
        default=_DEFAULTS.suffix,
        show_default=True,
        help="File name suffix that marks a compiled stylesheet.",
    )(command)
    return command
