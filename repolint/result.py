"""Core result data structures for the linter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .levels import Level


@dataclass
class TargetResult:
    """Outcome for one file, or for a glob that matched nothing."""

    passed: bool
    message: str = ""
    path: Optional[str] = None
    pattern: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"passed": self.passed, "message": self.message}
        if self.path is not None:
            data["path"] = self.path
        if self.pattern is not None:
            data["pattern"] = self.pattern
        return data


@dataclass
class RuleResult:
    """Verdict of a single rule evaluation."""

    passed: bool
    targets: List[TargetResult] = field(default_factory=list)
    message: Optional[str] = None

    @classmethod
    def from_targets(cls, targets: List[TargetResult], message: Optional[str] = None) -> "RuleResult":
        return cls(passed=all(target.passed for target in targets), targets=targets, message=message)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "passed": self.passed,
            "targets": [target.to_dict() for target in self.targets],
        }
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass
class RuleOutcome:
    """A rule result tagged with the ruleset entry that produced it."""

    name: str
    rule_type: str
    level: Level
    result: Optional[RuleResult] = None
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.result is not None and self.result.passed

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.rule_type,
            "level": self.level.value,
            "passed": self.passed,
        }
        if self.result is not None:
            data["result"] = self.result.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass
class Summary:
    """Aggregate rule counts."""

    passed: int = 0
    errors: int = 0
    warnings: int = 0

    def record(self, outcome: RuleOutcome) -> None:
        if outcome.passed:
            self.passed += 1
        elif outcome.level == Level.WARNING:
            self.warnings += 1
        else:
            self.errors += 1

    def to_dict(self) -> Dict[str, int]:
        return {"passed": self.passed, "errors": self.errors, "warnings": self.warnings}

    @property
    def total(self) -> int:
        return self.passed + self.errors + self.warnings


@dataclass
class LintResult:
    """Bundle the per-rule outcomes of a ruleset run."""

    target_dir: str = "."
    summary: Summary = field(default_factory=Summary)
    outcomes: List[RuleOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.errors == 0

    def add_outcome(self, outcome: RuleOutcome) -> None:
        self.summary.record(outcome)
        self.outcomes.append(outcome)

    def to_dict(self) -> Dict[str, object]:
        return {
            "targetDir": self.target_dir,
            "summary": self.summary.to_dict(),
            "results": [outcome.to_dict() for outcome in self.outcomes],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        failing = [outcome.level.exit_priority for outcome in self.outcomes if not outcome.passed]
        return max(failing, default=0)

    def failures(self) -> List[RuleOutcome]:
        """Return failing outcomes, error level first."""

        failing = [outcome for outcome in self.outcomes if not outcome.passed]
        return sorted(failing, key=lambda outcome: -outcome.level.exit_priority)


def format_summary_table(result: LintResult, max_targets: int = 5) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append(f"Lint Summary ({result.target_dir})")
    lines.append("=" * 40)
    header = f"{'Outcome':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for label, count in result.summary.to_dict().items():
        lines.append(f"{label:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Rules     : {result.summary.total}")

    failures = result.failures()
    if failures:
        lines.append("")
        lines.append("Failing Rules")
        lines.append("-" * 40)
        for outcome in failures:
            lines.append(f"[{outcome.level.value.upper()}] {outcome.name} ({outcome.rule_type})")
            if outcome.error is not None:
                lines.append(f"  Error: {outcome.error}")
                continue
            if outcome.result is None:
                continue
            if outcome.result.message:
                lines.append(f"  {outcome.result.message}")
            for target in [t for t in outcome.result.targets if not t.passed][:max_targets]:
                lines.append(f"  {target.path or target.pattern}: {target.message}")
    return "\n".join(lines)
