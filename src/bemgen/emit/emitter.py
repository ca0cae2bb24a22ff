"""Render a finalized Descriptor tree into component source text."""

from __future__ import annotations

from bemgen.emit.templates import elem_template, main_template, switch_prop_template
from bemgen.model.descriptor import Descriptor, StyleRef


def render_mods(props: dict[str, dict[str, StyleRef]]) -> str:
    """One dispatch block per modifier, in insertion order."""
    return "\n".join(
        switch_prop_template(prop_name, values) for prop_name, values in props.items()
    )


def render_elems(children: dict[str, Descriptor], owner_name: str) -> str:
    parts = [
        elem_template(
            owner_name,
            child.name,
            child.class_name,
            child.css_path,
            render_mods(child.props),
        )
        for child in children.values()
    ]
    return "\n".join(parts)


def render_component(descriptor: Descriptor) -> str:
    """Return the module text for a block Descriptor.

    Pure and deterministic: equal descriptors render byte-identical text.
    """
    return main_template(
        descriptor.name,
        descriptor.class_name,
        descriptor.css_path,
        render_mods(descriptor.props),
        render_elems(descriptor.children, descriptor.name),
    )
