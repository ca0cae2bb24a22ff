"""CLI command: bemgen build -- regenerate the component tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bemgen.cli.options import generator_options
from bemgen.config import GeneratorConfig
from bemgen.events import types as events
from bemgen.events.bus import EventBus
from bemgen.generator import Generator
from bemgen.naming.errors import NamingError


def _echo_written(event: events.BlockWritten) -> None:
    click.echo(
        f"  {event.component_name} <- {event.block} "
        f"({event.stylesheet_count} stylesheet(s))"
    )


@click.command()
@click.argument("source", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("output", type=click.Path(file_okay=False, path_type=Path))
@generator_options
@click.option(
    "--index-name",
    default="index.js",
    show_default=True,
    help="File name of the generated component module.",
)
def build(source: Path, output: Path, suffix: str, naming: str, index_name: str) -> None:
    """Generate one React component per block of SOURCE into OUTPUT.

    OUTPUT is deleted and recreated. A badly named stylesheet stops the run;
    blocks generated before it are kept.
    """
    config = GeneratorConfig(suffix=suffix, naming=naming, index_filename=index_name)
    event_bus = EventBus()
    event_bus.subscribe(events.BlockWritten, _echo_written)
    generator = Generator(config, event_bus=event_bus)

    source_root = source.resolve()
    output_root = output.resolve()
    click.echo(f"Generating components: {source_root} -> {output_root}")

    try:
        generated = generator.run(source_root, output_root)
    except NamingError as exc:
        click.echo(f"Naming error: {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"I/O error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Generated {len(generated)} component(s)")
