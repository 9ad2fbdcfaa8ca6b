"""Version-control capability passed through to rules."""

from __future__ import annotations

from typing import Any, List, Protocol


class VcsAccess(Protocol):
    """Git operations a rule may query.

    Content rules accept an instance for call-signature uniformity and never
    call it.
    """

    def branch_local(self) -> Any:
        ...

    def get_remotes(self) -> List[Any]:
        ...

    def add_config(self, key: str, value: str) -> Any:
        ...

    def remote(self, args: List[str]) -> Any:
        ...

    def branch(self, args: List[str]) -> Any:
        ...

    def checkout(self, ref: str) -> Any:
        ...
