"""Per-file content checks."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from repolint.result import TargetResult


def evaluate_target(
    path: str,
    content: Optional[str],
    patterns: Sequence[str],
    describe: Callable[[str], str] = str,
    forbidden: bool = True,
) -> List[TargetResult]:
    """Return one result per pattern, in pattern order.

    Matching is case-sensitive substring containment. With ``forbidden`` a
    file passes when the pattern is absent, otherwise when it is present.
    ``content`` of ``None`` means the file could not be read: nothing can be
    found in it, so forbidden patterns pass and required patterns fail.
    ``describe`` maps a pattern to the label used in messages.
    """

    results: List[TargetResult] = []
    for pattern in patterns:
        label = describe(pattern)
        if content is None:
            found = False
            message = f"Could not read file, treating it as not containing '{label}'"
        else:
            found = pattern in content
            message = f"Contains '{label}'" if found else f"Doesn't contain '{label}'"
        results.append(TargetResult(passed=found != forbidden, message=message, path=path))
    return results
