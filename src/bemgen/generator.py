"""Generation run: copy, discover, build and emit one block at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bemgen.builder.merge import build_descriptor
from bemgen.config import GeneratorConfig
from bemgen.discovery import find_stylesheets, list_blocks
from bemgen.emit.emitter import render_component
from bemgen.events import types as events
from bemgen.events.bus import EventBus
from bemgen.model.descriptor import Descriptor
from bemgen.naming.identifiers import to_component_name
from bemgen.naming.parser import EntityParser, get_parser
from bemgen.workspace import copy_block_styles, reset_output, write_component

logger = logging.getLogger("bemgen.generator")


@dataclass(frozen=True)
class GeneratedComponent:
    """Result of generating one block."""

    block: str
    descriptor: Descriptor
    path: Path


class Generator:
    """Turns a source root of BEM stylesheets into React components.

    Blocks are processed strictly one after another. Any failure propagates
    immediately; blocks written before it stay on disk.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        parser: EntityParser | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.parser = parser or get_parser(self.config.naming)
        self.event_bus = event_bus or EventBus()

    def run(self, source_root: Path, output_root: Path) -> list[GeneratedComponent]:
        """Regenerate *output_root* from *source_root*."""
        blocks = list_blocks(source_root)
        reset_output(output_root)
        self.event_bus.emit(
            events.RunStarted(
                source_root=str(source_root),
                output_root=str(output_root),
                block_count=len(blocks),
            )
        )

        generated: list[GeneratedComponent] = []
        for block in blocks:
            try:
                generated.append(self._generate_block(source_root, output_root, block))
            except Exception as exc:
                logger.debug("Generation failed on block %s: %s", block, exc)
                self.event_bus.emit(events.RunFailed(block=block, error=str(exc)))
                raise

        self.event_bus.emit(
            events.RunCompleted(output_root=str(output_root), component_count=len(generated))
        )
        return generated

    def describe(self, source_root: Path) -> dict[str, Descriptor]:
        """Build every block's Descriptor from the source tree without writing."""
        descriptors: dict[str, Descriptor] = {}
        for block in list_blocks(source_root):
            stylesheets = find_stylesheets(
                source_root / block, self.config.suffix, prefix=self.config.css_dirname
            )
            descriptors[block] = build_descriptor(
                block, stylesheets, self.parser, self.config.suffix
            )
        return descriptors

    def _generate_block(
        self, source_root: Path, output_root: Path, block: str
    ) -> GeneratedComponent:
        component_name = to_component_name(block)
        component_dir = output_root / (component_name or block)
        css_dir = component_dir / self.config.css_dirname
        self.event_bus.emit(events.BlockStarted(block=block, component_name=component_name))

        copy_block_styles(source_root / block, css_dir)
        stylesheets = find_stylesheets(
            css_dir, self.config.suffix, prefix=self.config.css_dirname
        )
        logger.debug("Block %s: %d stylesheet(s)", block, len(stylesheets))

        descriptor = build_descriptor(block, stylesheets, self.parser, self.config.suffix)
        text = render_component(descriptor)
        path = write_component(component_dir, self.config.index_filename, text)

        self.event_bus.emit(
            events.BlockWritten(
                block=block,
                component_name=component_name,
                path=str(path),
                stylesheet_count=len(stylesheets),
            )
        )
        logger.info("Wrote %s", path)
        return GeneratedComponent(block=block, descriptor=descriptor, path=path)
