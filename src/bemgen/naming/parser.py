"""Lark-based parser for BEM identifiers such as ``block__elem_mod_val``."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Protocol

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from bemgen.model.entity import BemEntity
from bemgen.naming.conventions import NamingConvention, get_convention

# Delimiters are spliced in as string literals; literals are dropped from
# the tree, so the transformer only ever sees NAME tokens.
_GRAMMAR_TEMPLATE = """
start: block elem? mod?

block: NAME
elem: {elem} NAME
mod: {mod} NAME ({val} NAME)?

NAME: /{word}/
"""

_BOOLEAN_MOD_VALUE = "true"


class EntityParser(Protocol):
    """Capability that turns an identifier string into a BemEntity.

    Returns ``None`` when the string does not follow the grammar.
    """

    def parse(self, text: str) -> BemEntity | None: ...


class _Elem:
    def __init__(self, name: str) -> None:
        self.name = name


class _Mod:
    def __init__(self, name: str, val: str) -> None:
        self.name = name
        self.val = val


class EntityTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a BemEntity."""

    def block(self, items: list[Token]) -> str:
        return str(items[0])

    def elem(self, items: list[Token]) -> _Elem:
        return _Elem(str(items[0]))

    def mod(self, items: list[Token]) -> _Mod:
        val = str(items[1]) if len(items) > 1 else _BOOLEAN_MOD_VALUE
        return _Mod(str(items[0]), val)

    def start(self, items: list[object]) -> BemEntity:
        block = str(items[0])
        elem: str | None = None
        mod_name: str | None = None
        mod_val: str | None = None
        for item in items[1:]:
            if isinstance(item, _Elem):
                elem = item.name
            elif isinstance(item, _Mod):
                mod_name, mod_val = item.name, item.val
        return BemEntity(block=block, elem=elem, mod_name=mod_name, mod_val=mod_val)


def build_grammar(convention: NamingConvention) -> str:
    """Render the Lark grammar for *convention*."""
    return _GRAMMAR_TEMPLATE.format(
        elem=json.dumps(convention.elem_delim),
        mod=json.dumps(convention.mod_delim),
        val=json.dumps(convention.val_delim),
        word=convention.word_pattern,
    )


class LarkEntityParser:
    """Default EntityParser backed by an LALR grammar."""

    def __init__(self, convention: NamingConvention) -> None:
        self.convention = convention
        self._lark = Lark(build_grammar(convention), parser="lalr", start="start")
        self._transformer = EntityTransformer()

    def parse(self, text: str) -> BemEntity | None:
        try:
            tree = self._lark.parse(text)
        except LarkError:
            return None
        return self._transformer.transform(tree)


@lru_cache(maxsize=None)
def get_parser(convention_name: str = "origin") -> LarkEntityParser:
    """Return a shared parser for a registered convention."""
    return LarkEntityParser(get_convention(convention_name))


def parse_entity(text: str, convention_name: str = "origin") -> BemEntity | None:
    """Parse *text* with the parser for *convention_name*."""
    return get_parser(convention_name).parse(text)
