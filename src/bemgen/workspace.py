"""Filesystem side effects of a generation run."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger("bemgen.workspace")


def reset_output(output_root: Path) -> None:
    """Remove *output_root* if it exists and recreate it empty."""
    if output_root.exists():
        logger.debug("Removing previous output %s", output_root)
        shutil.rmtree(output_root)
    output_root.mkdir(parents=True)


def copy_block_styles(block_dir: Path, css_dir: Path) -> None:
    """Mirror a block's source directory into the component's css subtree."""
    shutil.copytree(block_dir, css_dir)


def write_component(component_dir: Path, filename: str, text: str) -> Path:
    path = component_dir / filename
    path.write_text(text, encoding="utf-8")
    return path
