"""Validation rules for a stylesheet source tree.

Each rule is a function taking a BlockSource and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from dataclasses import dataclass

from bemgen.builder.classify import Classification, classify
from bemgen.discovery import StylesheetFile
from bemgen.model.diagnostic import Diagnostic, Severity
from bemgen.naming.errors import NamingError
from bemgen.naming.parser import EntityParser


@dataclass(frozen=True)
class BlockSource:
    """A block directory with its stylesheets, parsed but not yet merged."""

    name: str
    stylesheets: list[StylesheetFile]
    parser: EntityParser
    suffix: str

    def classifications(self) -> list[Classification]:
        """Classify every well-formed stylesheet, skipping malformed names."""
        return [record for record in self._classify_all() if isinstance(record, Classification)]

    def malformed(self) -> list[StylesheetFile]:
        """Stylesheets whose names do not follow the BEM grammar."""
        return [record for record in self._classify_all() if isinstance(record, StylesheetFile)]

    def _classify_all(self) -> list[Classification | StylesheetFile]:
        records: list[Classification | StylesheetFile] = []
        for stylesheet in self.stylesheets:
            try:
                records.append(classify(stylesheet, self.parser, self.suffix))
            except NamingError:
                records.append(stylesheet)
        return records


# ---------------------------------------------------------------------------
# Naming rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_file_names(source: BlockSource) -> list[Diagnostic]:
    """Every stylesheet name must parse as a BEM identifier."""
    diagnostics: list[Diagnostic] = []
    for stylesheet in source.malformed():
        diagnostics.append(
            Diagnostic(
                rule="check_file_names",
                severity=Severity.ERROR,
                message=f"'{stylesheet.basename}' is not a BEM name.",
                block=source.name,
                path=str(stylesheet.path),
                fix="Rename the file to block[__elem][_mod_val]" + source.suffix + ".",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Consistency rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_block_matches_directory(source: BlockSource) -> list[Diagnostic]:
    """Stylesheets should belong to the block their directory names."""
    diagnostics: list[Diagnostic] = []
    for record in source.classifications():
        if record.entity.block != source.name:
            diagnostics.append(
                Diagnostic(
                    rule="check_block_matches_directory",
                    severity=Severity.WARNING,
                    message=(
                        f"Block '{record.entity.block}' is styled inside directory "
                        f"'{source.name}'."
                    ),
                    block=source.name,
                    path=record.path,
                    fix=f"Move the file into a '{record.entity.block}' directory.",
                )
            )
    return diagnostics


def check_duplicate_modifiers(source: BlockSource) -> list[Diagnostic]:
    """A modifier value defined twice is overwritten by the later file."""
    diagnostics: list[Diagnostic] = []
    seen: dict[tuple[str | None, str, str], str] = {}
    for record in source.classifications():
        entity = record.entity
        if entity.mod_name is None or entity.mod_val is None:
            continue
        key = (entity.elem, entity.mod_name, entity.mod_val)
        first = seen.get(key)
        if first is None:
            seen[key] = record.path
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_duplicate_modifiers",
                severity=Severity.WARNING,
                message=(
                    f"Modifier '{entity.mod_name}={entity.mod_val}' of "
                    f"'{record.style.class_name}' is already defined by {first}; "
                    "this file wins."
                ),
                block=source.name,
                path=record.path,
                fix="Keep a single stylesheet per modifier value.",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Informational rules
# ---------------------------------------------------------------------------


def check_block_has_styles(source: BlockSource) -> list[Diagnostic]:
    if source.stylesheets:
        return []
    return [
        Diagnostic(
            rule="check_block_has_styles",
            severity=Severity.INFO,
            message=f"Block '{source.name}' has no stylesheets; an empty component is generated.",
            block=source.name,
        )
    ]


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_file_names,
    check_block_matches_directory,
    check_duplicate_modifiers,
    check_block_has_styles,
]
