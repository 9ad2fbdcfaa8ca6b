"""Filesystem capability consumed by rules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .utils import is_broken_symlink, iter_glob_matches, read_text_file

logger = logging.getLogger(__name__)


class FileAccess(Protocol):
    """Read-only view of the repository being linted.

    ``find_all_files`` returns paths relative to ``target_dir`` in glob
    expansion order; patterns that match nothing contribute nothing.
    ``get_file_contents`` returns ``None`` instead of raising when a file is
    missing, a broken symlink or otherwise unreadable.
    """

    target_dir: str

    async def find_all_files(self, patterns: Sequence[str]) -> List[str]:
        ...

    async def get_file_contents(self, path: str) -> Optional[str]:
        ...


class FileSystem:
    """Local directory implementation of :class:`FileAccess`.

    Globbing and reads are blocking calls made inside the coroutines. Rules
    await them one at a time, so nothing else is waiting on the event loop.
    """

    def __init__(self, target_dir: str = ".") -> None:
        self.target_dir = str(target_dir)
        self._root = Path(target_dir)

    async def find_all_files(self, patterns: Sequence[str]) -> List[str]:
        files = list(iter_glob_matches(self._root, patterns))
        logger.debug("Resolved %d file(s) for %s under %s", len(files), list(patterns), self.target_dir)
        return files

    async def get_file_contents(self, path: str) -> Optional[str]:
        full_path = self._root / path
        if is_broken_symlink(full_path):
            logger.debug("Skipping broken symlink %s", full_path)
            return None
        return read_text_file(full_path)
