"""Errors raised while loading rulesets and rule options."""

from __future__ import annotations

from pathlib import Path


class RepolintError(Exception):
    """Base user-facing linter error."""


class RuleConfigError(RepolintError):
    def __init__(self, rule_type: str, detail: str) -> None:
        self.rule_type = rule_type
        self.detail = detail
        super().__init__(f"Invalid options for rule '{rule_type}' ({detail})")


class UnknownRuleError(RepolintError):
    def __init__(self, rule_type: str) -> None:
        self.rule_type = rule_type
        super().__init__(f"Unknown rule type: {rule_type}")


class RulesetError(RepolintError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingRulesetError(RulesetError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing ruleset file")


class InvalidRulesetError(RulesetError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid ruleset ({detail})")
