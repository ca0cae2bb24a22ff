"""Shared fixtures: build stylesheet source trees on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

StyleWriter = Callable[..., Path]


@pytest.fixture()
def source_root(tmp_path: Path) -> Path:
    root = tmp_path / "common.blocks"
    root.mkdir()
    return root


@pytest.fixture()
def write_styles(source_root: Path) -> StyleWriter:
    """Create ``<source_root>/<block>/<relpath>`` files for each relpath."""

    def _write(block: str, *relpaths: str) -> Path:
        block_dir = source_root / block
        block_dir.mkdir(exist_ok=True)
        for relpath in relpaths:
            path = block_dir / relpath
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f".{Path(relpath).name.split('.')[0]} {{}}\n", encoding="utf-8")
        return block_dir

    return _write
