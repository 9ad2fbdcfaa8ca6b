"""Evaluate a ruleset against a repository."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .errors import UnknownRuleError
from .filesystem import FileAccess
from .result import LintResult, RuleOutcome
from .rules import Rule
from .rules.file_contents import FileContentsRule
from .rules.file_not_contents import FileNotContentsRule
from .ruleset import Ruleset
from .vcs import VcsAccess

logger = logging.getLogger(__name__)


def load_rules() -> Dict[str, Rule]:
    rules = [
        FileContentsRule(),
        FileNotContentsRule(),
    ]
    return {rule.name: rule for rule in rules}


def get_rule(rule_type: str, rules: Optional[Dict[str, Rule]] = None) -> Rule:
    registry = rules if rules is not None else load_rules()
    try:
        return registry[rule_type]
    except KeyError:
        raise UnknownRuleError(rule_type) from None


async def lint(
    fs: FileAccess,
    ruleset: Ruleset,
    vcs: Optional[VcsAccess] = None,
    rules: Optional[Dict[str, Rule]] = None,
) -> LintResult:
    """Run every enabled rule of ``ruleset`` in manifest order.

    A rule that raises is reported as a failed outcome carrying the error
    text; the remaining rules still run.
    """

    registry = rules if rules is not None else load_rules()
    result = LintResult(target_dir=fs.target_dir)
    for name, definition in ruleset.enabled_rules():
        outcome = RuleOutcome(name=name, rule_type=definition.rule.type, level=definition.level)
        try:
            rule = get_rule(definition.rule.type, registry)
            outcome.result = await rule.evaluate(fs, definition.rule.options, vcs)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Rule %s failed to evaluate: %s", name, exc, exc_info=True)
            outcome.error = str(exc)
        else:
            logger.info("Rule %s %s", name, "passed" if outcome.passed else "failed")
        result.add_outcome(outcome)
    return result
