"""Discovery of block directories and their stylesheet files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

logger = logging.getLogger("bemgen.discovery")


@dataclass(frozen=True)
class StylesheetFile:
    """A stylesheet on disk and the reference a component uses to load it."""

    path: Path
    css_path: str  # "./css/..." relative to the component directory

    @property
    def basename(self) -> str:
        return self.path.name


def list_blocks(source_root: Path) -> list[str]:
    """Return the immediate subdirectory names of *source_root*.

    Order is the filesystem listing order; plain files are skipped.
    """
    blocks = [
        entry for entry in os.listdir(source_root) if (source_root / entry).is_dir()
    ]
    logger.debug("Found %d block(s) under %s", len(blocks), source_root)
    return blocks


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def find_stylesheets(search_root: Path, suffix: str, prefix: str = "") -> list[StylesheetFile]:
    """Find every ``*<suffix>`` file below *search_root*, sorted by path.

    Dot-files and anything under a dot-directory are skipped.

    Each file's reference is its path relative to *search_root*, placed under
    *prefix* and rooted at ``./``.
    """
    matches = [
        p
        for p in search_root.rglob(f"*{suffix}")
        if p.is_file() and not _is_hidden(p.relative_to(search_root))
    ]
    matches.sort(key=lambda p: p.as_posix())
    found: list[StylesheetFile] = []
    for path in matches:
        relative = PurePosixPath(prefix, path.relative_to(search_root).as_posix())
        found.append(StylesheetFile(path=path, css_path=f"./{relative}"))
    return found
