"""CLI command: bemgen check -- validate stylesheet names without generating."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bemgen.cli.options import generator_options
from bemgen.config import GeneratorConfig
from bemgen.model.diagnostic import Severity
from bemgen.validation import validate


@click.command()
@click.argument("source", type=click.Path(exists=True, file_okay=False, path_type=Path))
@generator_options
def check(source: Path, suffix: str, naming: str) -> None:
    """Validate the stylesheets of SOURCE.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    diagnostics = validate(source, GeneratorConfig(suffix=suffix, naming=naming))

    if not diagnostics:
        click.echo(f"OK: {source.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix and diag.is_error:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
