"""Fail when files matching a set of globs lack required text."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from repolint.config import RuleOptions, parse_rule_options
from repolint.filesystem import FileAccess
from repolint.result import RuleResult, TargetResult
from repolint.vcs import VcsAccess

from . import NO_CRITERIA, configured_patterns, no_match_result, read_target
from .evaluator import evaluate_target

logger = logging.getLogger(__name__)


class FileContentsRule:
    """Ensure every matched file contains each configured pattern."""

    name = "file-contents"

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
            return no_match_result(opts, passed=opts.succeed_on_non_existent)

        patterns = configured_patterns(opts)
        if not patterns:
            return RuleResult(passed=True, message=NO_CRITERIA)

        targets: List[TargetResult] = []
        for path in file_paths:
            content = await read_target(fs, path, opts.line_count)
            targets.extend(evaluate_target(path, content, patterns, opts.describe, forbidden=False))
        return RuleResult.from_targets(targets)
