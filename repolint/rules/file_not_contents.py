"""Fail when files matching a set of globs contain forbidden text."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from repolint.config import RuleOptions, parse_rule_options
from repolint.filesystem import FileAccess
from repolint.result import RuleResult, TargetResult
from repolint.vcs import VcsAccess

from . import NO_CRITERIA, configured_patterns, no_match_result, read_target
from .evaluator import evaluate_target

logger = logging.getLogger(__name__)

NO_CONTENT_FOUND = "Did not find content matching specified patterns"


class FileNotContentsRule:
    """Ensure no matched file contains the configured ``content``/``contents``."""

    name = "file-not-contents"

    async def evaluate(
        self,
        fs: FileAccess,
        options: Union[RuleOptions, Mapping[str, Any]],
        vcs: Optional[VcsAccess] = None,
    ) -> RuleResult:
        opts = parse_rule_options(self.name, options)
        file_paths = await fs.find_all_files(opts.globs_all)
        if not file_paths:
            logger.debug("%s: no files matched %s", self.name, opts.globs_all)
            return no_match_result(opts, passed=True)

        if opts.contents is not None:
            return await check_contents(fs, file_paths, opts)
        if opts.content is not None:
            return await check_content(fs, file_paths, opts)
        return RuleResult(passed=True, message=NO_CRITERIA)


async def check_content(fs: FileAccess, file_paths: Sequence[str], opts: RuleOptions) -> RuleResult:
    """Singular mode: one result per file, passing only if every file passes."""

    targets: List[TargetResult] = []
    for path in file_paths:
        content = await read_target(fs, path, opts.line_count)
        targets.extend(evaluate_target(path, content, [opts.content], opts.describe))
    return RuleResult.from_targets(targets)


async def check_contents(fs: FileAccess, file_paths: Sequence[str], opts: RuleOptions) -> RuleResult:
    """Plural mode: report only the file/pattern pairs that matched."""

    patterns = configured_patterns(opts)
    targets: List[TargetResult] = []
    for path in file_paths:
        content = await read_target(fs, path, opts.line_count)
        targets.extend(
            target for target in evaluate_target(path, content, patterns, opts.describe) if not target.passed
        )

    if not targets:
        return RuleResult(passed=True, targets=[], message=NO_CONTENT_FOUND)
    matched_files = len({target.path for target in targets})
    return RuleResult(
        passed=False,
        targets=targets,
        message=f"Found content matching specified patterns in {matched_files} file(s)",
    )
