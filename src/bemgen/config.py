"""Run settings for the component generator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    suffix: str = ".post.css"
    css_dirname: str = "css"
    index_filename: str = "index.js"
    naming: str = "origin"  # registered NamingConvention name
