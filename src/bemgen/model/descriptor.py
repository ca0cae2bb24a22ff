"""Component descriptor tree: Descriptor and StyleRef dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StyleRef:
    """A BEM class name paired with the relative path to its stylesheet."""

    class_name: str
    css_path: str


@dataclass(frozen=True)
class Descriptor:
    """In-memory model of one block or element prior to code emission.

    Attributes:
        name: Component name (converted identifier).
        class_name: BEM class applied to the rendered root element.
        css_path: Root stylesheet reference, ``None`` when there is none.
        props: modifier name -> modifier value -> StyleRef, insertion ordered.
        children: element name -> element Descriptor. Always empty on elements.
    """

    name: str = ""
    class_name: str = ""
    css_path: str | None = None
    props: dict[str, dict[str, StyleRef]] = field(default_factory=dict)
    children: dict[str, Descriptor] = field(default_factory=dict)

