"""BEM entity model: the parsed form of a stylesheet identifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntityKind(Enum):
    """The four shapes a BEM identifier can take."""

    BLOCK = "block"
    BLOCK_MOD = "block_mod"
    ELEM = "elem"
    ELEM_MOD = "elem_mod"


@dataclass(frozen=True)
class BemEntity:
    """A parsed BEM identifier such as ``my-block__icon_size_big``.

    ``mod_name`` and ``mod_val`` are either both set or both ``None``.
    Boolean modifiers (``my-block_disabled``) carry ``mod_val == "true"``.
    """

    block: str
    elem: str | None = None
    mod_name: str | None = None
    mod_val: str | None = None

    def __post_init__(self) -> None:
        if not self.block:
            raise ValueError("BemEntity block must be a non-empty string")
        if (self.mod_name is None) != (self.mod_val is None):
            raise ValueError("BemEntity mod_name and mod_val must be set together")

    @property
    def has_mod(self) -> bool:
        return self.mod_name is not None

    @property
    def kind(self) -> EntityKind:
        if self.elem is None:
            return EntityKind.BLOCK_MOD if self.has_mod else EntityKind.BLOCK
        return EntityKind.ELEM_MOD if self.has_mod else EntityKind.ELEM
