"""Emitter: descriptor trees to React component source."""

from bemgen.emit.emitter import render_component, render_elems, render_mods

__all__ = ["render_component", "render_elems", "render_mods"]
