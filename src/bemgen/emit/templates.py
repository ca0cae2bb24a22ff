"""Source templates for generated React components.

Each template is a plain function returning text; the emitter composes them.
"""

from __future__ import annotations

from bemgen.model.descriptor import StyleRef

INDENT = "  "


def js_string(value: str) -> str:
    """Single-quoted JavaScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def _template_text(value: str) -> str:
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def class_name_line(class_name: str, mutable: bool) -> str:
    """Declare ``className``, appending a caller-supplied ``props.className``."""
    keyword = "let" if mutable else "const"
    joined = f"`{_template_text(class_name)} ${{props.className}}`"
    return f"{INDENT}{keyword} className = props.className ? {joined} : {js_string(class_name)};"


def _render_body(class_name: str, css_path: str | None, mods_part: str) -> list[str]:
    lines: list[str] = []
    if css_path:
        lines.append(f"{INDENT}require({js_string(css_path)});")
    lines.append(class_name_line(class_name, mutable=bool(mods_part)))
    if mods_part:
        lines.append(mods_part.rstrip("\n"))
    lines.extend([
        "",
        f"{INDENT}return (",
        f"{INDENT * 2}<div className={{className}}>",
        f"{INDENT * 3}{{props.children}}",
        f"{INDENT * 2}</div>",
        f"{INDENT});",
    ])
    return lines


def main_template(
    component_name: str,
    class_name: str,
    css_path: str | None = None,
    mods_part: str = "",
    elems_part: str = "",
) -> str:
    """Module text for a block component with its elements attached."""
    lines = ["import React from 'react';"]
    if css_path:
        lines.append(f"import {js_string(css_path)};")
    lines.extend([
        "",
        "/**",
        f" * {component_name} component.",
        " * @param {Object} props Component properties",
        " * @returns {React.ReactElement}",
        " */",
        f"const {component_name} = (props) => {{",
    ])
    lines.extend(_render_body(class_name, None, mods_part))
    lines.append("};")
    if elems_part:
        lines.append("")
        lines.append(elems_part.rstrip("\n"))
    lines.extend(["", f"export default {component_name};", ""])
    return "\n".join(lines)


def switch_prop_template(prop_name: str, values: dict[str, StyleRef]) -> str:
    """A ``switch`` selecting on one modifier; unmatched values are a no-op."""
    lines = [f"{INDENT}switch (props[{js_string(prop_name)}]) {{"]
    for value, style in values.items():
        lines.append(f"{INDENT * 2}case {js_string(value)}: {{")
        if style.css_path:
            lines.append(f"{INDENT * 3}require({js_string(style.css_path)});")
        lines.append(f"{INDENT * 3}className += {js_string(' ' + style.class_name)};")
        lines.append(f"{INDENT * 3}break;")
        lines.append(f"{INDENT * 2}}}")
    lines.append(f"{INDENT * 2}default:")
    lines.append(f"{INDENT * 3}break;")
    lines.append(f"{INDENT}}}")
    return "\n".join(lines) + "\n"


def elem_template(
    owner_name: str,
    elem_name: str,
    class_name: str,
    css_path: str | None = None,
    mods_part: str = "",
) -> str:
    """An element sub-component attached to its block as ``Owner.Elem``."""
    lines = [f"{owner_name}.{elem_name} = (props) => {{"]
    lines.extend(_render_body(class_name, css_path, mods_part))
    lines.append("};")
    return "\n".join(lines) + "\n"
