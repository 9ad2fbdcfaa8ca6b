"""Basic file IO helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_text_file(path: Path) -> Optional[str]:
    """Return the file contents as UTF-8 text, or ``None`` if it cannot be read.

    Missing files, broken symlinks, directories and permission errors yield
    ``None``. Bytes that are not valid UTF-8 are replaced, so the rest of the
    text can still be searched.
    """

    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None
