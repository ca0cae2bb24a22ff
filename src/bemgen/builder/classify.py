"""Classification of stylesheet files into BEM cases."""

from __future__ import annotations

from dataclasses import dataclass

from bemgen.discovery import StylesheetFile
from bemgen.model.descriptor import StyleRef
from bemgen.model.entity import BemEntity, EntityKind
from bemgen.naming.errors import NamingError
from bemgen.naming.parser import EntityParser


@dataclass(frozen=True)
class Classification:
    """One stylesheet file reduced to the data the model builder needs."""

    entity: BemEntity
    style: StyleRef
    path: str

    @property
    def kind(self) -> EntityKind:
        return self.entity.kind


def strip_suffix(filename: str, suffix: str) -> str:
    """Return *filename* without *suffix* (unchanged if it does not end with it)."""
    if suffix and filename.endswith(suffix):
        return filename[: -len(suffix)]
    return filename


def classify(stylesheet: StylesheetFile, parser: EntityParser, suffix: str) -> Classification:
    """Parse a stylesheet's identifier and pair it with its StyleRef.

    Raises:
        NamingError: if the identifier does not follow the BEM grammar.
    """
    identifier = strip_suffix(stylesheet.basename, suffix)
    entity = parser.parse(identifier)
    if entity is None:
        raise NamingError(str(stylesheet.path), identifier=identifier)
    return Classification(
        entity=entity,
        style=StyleRef(class_name=identifier, css_path=stylesheet.css_path),
        path=str(stylesheet.path),
    )
