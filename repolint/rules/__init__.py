"""Rule protocol and helpers shared by the built-in rules."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Union

from repolint.config import RuleOptions
from repolint.filesystem import FileAccess
from repolint.result import RuleResult, TargetResult
from repolint.vcs import VcsAccess

NO_FILE_FOUND = "Did not find a file matching the specified patterns"
NO_CRITERIA = "No content patterns configured, nothing to check"


class Rule(Protocol):
    """Protocol implemented by all rule evaluators."""

    name: str

    async def evaluate(
        self,
        fs: FileAccess,
        options: Union[RuleOptions, Mapping[str, Any]],
        vcs: Optional[VcsAccess] = None,
    ) -> RuleResult:
        """Check the repository behind ``fs`` against ``options``."""


def configured_patterns(options: RuleOptions) -> List[str]:
    """Return ``content`` followed by ``contents``, without duplicates."""

    patterns: List[str] = []
    if options.content is not None:
        patterns.append(options.content)
    for pattern in options.contents or ():
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns


async def read_target(fs: FileAccess, path: str, line_count: Optional[int] = None) -> Optional[str]:
    content = await fs.get_file_contents(path)
    if content is None or line_count is None:
        return content
    return "".join(content.splitlines(keepends=True)[:line_count])


def no_match_result(options: RuleOptions, passed: bool) -> RuleResult:
    """Build the result reported when ``globs_all`` matched no file."""

    pattern = options.globs_all[0] if options.globs_all else None
    message = NO_FILE_FOUND
    if options.succeed_on_non_existent:
        message = f"{NO_FILE_FOUND} (succeed-on-non-existent is set)"
    return RuleResult(
        passed=passed,
        targets=[TargetResult(passed=passed, message=message, pattern=pattern)],
        message=message,
    )
