"""Rule levels declared in a ruleset manifest."""

from __future__ import annotations

from enum import Enum


class Level(str, Enum):
    """Enumerate how strongly a failing rule should be reported."""

    ERROR = "error"
    WARNING = "warning"
    OFF = "off"

    @property
    def exit_priority(self) -> int:
        """Return an integer ranking to drive exit code decisions."""

        ordering = {
            Level.ERROR: 2,
            Level.WARNING: 1,
            Level.OFF: 0,
        }
        return ordering[self]
