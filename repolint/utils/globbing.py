"""Glob expansion helpers."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Generator, Iterable


def iter_glob_matches(root: Path, patterns: Iterable[str]) -> Generator[str, None, None]:
    """Yield files beneath ``root`` matching ``patterns`` in expansion order.

    Paths are relative to ``root`` and ``/``-separated. Directories are
    skipped, broken symlinks are kept, and a path matched by several patterns
    is yielded once.
    """

    seen = set()
    for pattern in patterns:
        for match in glob.iglob(pattern, root_dir=root, recursive=True, include_hidden=True):
            if Path(match).is_absolute():
                match = os.path.relpath(match, root)
            relative = Path(match).as_posix()
            if relative in seen or (root / relative).is_dir():
                continue
            seen.add(relative)
            yield relative


def is_broken_symlink(path: Path) -> bool:
    return path.is_symlink() and not os.path.exists(path)
