"""CLI command: bemgen inspect -- display descriptor trees."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bemgen.cli.options import generator_options
from bemgen.config import GeneratorConfig
from bemgen.generator import Generator
from bemgen.model.descriptor import Descriptor
from bemgen.naming.errors import NamingError


def _describe_props(descriptor: Descriptor, indent: str) -> None:
    for mod_name, values in descriptor.props.items():
        for mod_val, style in values.items():
            click.echo(f"{indent}{mod_name}={mod_val}  .{style.class_name}  {style.css_path}")


def _describe(descriptor: Descriptor, indent: str = "  ") -> None:
    css = descriptor.css_path or "(no stylesheet)"
    click.echo(f"{indent}{descriptor.name}  .{descriptor.class_name}  {css}")
    _describe_props(descriptor, indent + "  ")
    for child in descriptor.children.values():
        _describe(child, indent + "  ")


@click.command()
@click.argument("source", type=click.Path(exists=True, file_okay=False, path_type=Path))
@generator_options
def inspect(source: Path, suffix: str, naming: str) -> None:
    """Parse the stylesheets of SOURCE and display each block's structure.

    Nothing is written.
    """
    generator = Generator(GeneratorConfig(suffix=suffix, naming=naming))
    try:
        descriptors = generator.describe(source)
    except NamingError as exc:
        click.echo(f"Naming error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Blocks: {len(descriptors)}")
    for block, descriptor in descriptors.items():
        click.echo()
        click.echo(f"Block: {block}")
        _describe(descriptor)
