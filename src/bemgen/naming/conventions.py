"""Naming conventions: the delimiters that separate BEM name parts."""

from __future__ import annotations

from dataclasses import dataclass

from bemgen.naming.errors import UnknownConventionError


@dataclass(frozen=True)
class NamingConvention:
    """Delimiters and word pattern for one BEM naming flavour.

    ``block{elem_delim}elem{mod_delim}mod{val_delim}val``
    """

    name: str
    elem_delim: str = "__"
    mod_delim: str = "_"
    val_delim: str = "_"
    word_pattern: str = r"[a-z0-9]+(?:-[a-z0-9]+)*"

    def __post_init__(self) -> None:
        if not self.elem_delim or not self.mod_delim or not self.val_delim:
            raise ValueError(f"Convention {self.name!r} has an empty delimiter")


ORIGIN = NamingConvention(name="origin")
TWO_DASHES = NamingConvention(name="two-dashes", mod_delim="--")

CONVENTIONS: dict[str, NamingConvention] = {
    ORIGIN.name: ORIGIN,
    TWO_DASHES.name: TWO_DASHES,
}


def get_convention(name: str) -> NamingConvention:
    """Look up a registered convention by name."""
    try:
        return CONVENTIONS[name]
    except KeyError:
        known = ", ".join(sorted(CONVENTIONS))
        raise UnknownConventionError(
            f"Unknown naming convention {name!r} (known: {known})"
        ) from None
