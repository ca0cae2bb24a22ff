"""Conversion of BEM identifiers into component names."""

from __future__ import annotations

import re

# Upper-case runs, capitalised or lower-case words, and digit runs.
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def split_words(identifier: str) -> list[str]:
    """Split *identifier* on delimiters, case changes and digit boundaries."""
    return _WORD_RE.findall(identifier)


def to_component_name(identifier: str) -> str:
    """Convert ``my-block`` style identifiers to ``MyBlock``.

    Total over any string; inputs with no letters or digits give ``""``.
    """
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(identifier))
