"""Merge policy: fold classification records into a block Descriptor.

Every function takes the previous snapshot and returns a new one; inputs are
never mutated.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable

from bemgen.builder.classify import Classification, classify
from bemgen.discovery import StylesheetFile
from bemgen.model.descriptor import Descriptor, StyleRef
from bemgen.model.entity import EntityKind
from bemgen.naming.identifiers import to_component_name
from bemgen.naming.parser import EntityParser


def _with_prop(
    props: dict[str, dict[str, StyleRef]], name: str, val: str, style: StyleRef
) -> dict[str, dict[str, StyleRef]]:
    """Copy *props* with ``props[name][val] = style`` (later writes win)."""
    updated = {mod: dict(values) for mod, values in props.items()}
    updated.setdefault(name, {})[val] = style
    return updated


def _with_child(descriptor: Descriptor, elem: str, child: Descriptor) -> Descriptor:
    children = dict(descriptor.children)
    children[elem] = child
    return replace(descriptor, children=children)


def apply_block_root(descriptor: Descriptor, record: Classification) -> Descriptor:
    """Block file without element or modifier: set the block's own fields."""
    return replace(
        descriptor,
        name=to_component_name(record.entity.block),
        class_name=record.style.class_name,
        css_path=record.style.css_path,
    )


def apply_block_mod(descriptor: Descriptor, record: Classification) -> Descriptor:
    entity = record.entity
    assert entity.mod_name is not None and entity.mod_val is not None
    props = _with_prop(descriptor.props, entity.mod_name, entity.mod_val, record.style)
    return replace(descriptor, props=props)


def apply_elem_mod(descriptor: Descriptor, record: Classification) -> Descriptor:
    """Element modifier: the element is created on first touch with defaults."""
    entity = record.entity
    assert entity.elem is not None
    assert entity.mod_name is not None and entity.mod_val is not None
    child = descriptor.children.get(entity.elem, Descriptor())
    child = replace(
        child,
        name=child.name or to_component_name(entity.elem),
        class_name=child.class_name or f"{entity.block}__{entity.elem}",
        props=_with_prop(child.props, entity.mod_name, entity.mod_val, record.style),
    )
    return _with_child(descriptor, entity.elem, child)


def apply_elem_root(descriptor: Descriptor, record: Classification) -> Descriptor:
    """Element file: overwrite name, class and stylesheet, keep props."""
    entity = record.entity
    assert entity.elem is not None
    child = descriptor.children.get(entity.elem, Descriptor())
    child = replace(
        child,
        name=to_component_name(entity.elem),
        class_name=record.style.class_name,
        css_path=record.style.css_path,
    )
    return _with_child(descriptor, entity.elem, child)


_APPLIERS: dict[EntityKind, Callable[[Descriptor, Classification], Descriptor]] = {
    EntityKind.BLOCK: apply_block_root,
    EntityKind.BLOCK_MOD: apply_block_mod,
    EntityKind.ELEM_MOD: apply_elem_mod,
    EntityKind.ELEM: apply_elem_root,
}


def apply(descriptor: Descriptor, record: Classification) -> Descriptor:
    """Return the next snapshot after merging *record* into *descriptor*."""
    return _APPLIERS[record.kind](descriptor, record)


def start_descriptor(block_dir_name: str) -> Descriptor:
    """Empty block Descriptor named after its directory."""
    return Descriptor(name=to_component_name(block_dir_name))


def finalize(descriptor: Descriptor, block_dir_name: str) -> Descriptor:
    """Default an unset class name to the raw block directory name."""
    if descriptor.class_name:
        return descriptor
    return replace(descriptor, class_name=block_dir_name)


def build_descriptor(
    block_dir_name: str,
    stylesheets: Iterable[StylesheetFile],
    parser: EntityParser,
    suffix: str,
) -> Descriptor:
    """Classify *stylesheets* in order and fold them into a finalized Descriptor.

    The first malformed file name raises NamingError; nothing is skipped.
    """
    descriptor = start_descriptor(block_dir_name)
    for stylesheet in stylesheets:
        descriptor = apply(descriptor, classify(stylesheet, parser, suffix))
    return finalize(descriptor, block_dir_name)
