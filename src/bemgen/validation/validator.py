"""Source validator: runs all rules over every block and reports diagnostics."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from bemgen.config import GeneratorConfig
from bemgen.discovery import find_stylesheets, list_blocks
from bemgen.model.diagnostic import Diagnostic
from bemgen.naming.parser import EntityParser, get_parser
from bemgen.validation.rules import ALL_RULES, BlockSource


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[BlockSource], list[Diagnostic]]


def collect_sources(
    source_root: Path, config: GeneratorConfig, parser: EntityParser
) -> list[BlockSource]:
    return [
        BlockSource(
            name=block,
            stylesheets=find_stylesheets(
                source_root / block, config.suffix, prefix=config.css_dirname
            ),
            parser=parser,
            suffix=config.suffix,
        )
        for block in list_blocks(source_root)
    ]


def validate(
    source_root: Path,
    config: GeneratorConfig | None = None,
    *,
    parser: EntityParser | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against every block under *source_root*.

    Returns the full list of diagnostics (errors, warnings, info), grouped by
    block in listing order.
    """
    config = config or GeneratorConfig()
    parser = parser or get_parser(config.naming)
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for source in collect_sources(source_root, config, parser):
        for rule in rules:
            diagnostics.extend(rule(source))
    return diagnostics


def validate_or_raise(
    source_root: Path,
    config: GeneratorConfig | None = None,
    *,
    parser: EntityParser | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(source_root, config, parser=parser, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
