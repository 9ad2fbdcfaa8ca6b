"""Ruleset manifest models and loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import InvalidRulesetError, MissingRulesetError
from .levels import Level
from .utils import read_yaml_file

logger = logging.getLogger(__name__)

DEFAULT_RULESET = "repolint.yaml"


class RuleSpec(BaseModel):
    type: str
    options: Dict[str, Any] = Field(default_factory=dict)


class RuleDefinition(BaseModel):
    level: Level = Level.ERROR
    rule: RuleSpec


class Ruleset(BaseModel):
    """A named collection of rule definitions, kept in manifest order."""

    version: int = 2
    rules: Dict[str, RuleDefinition] = Field(default_factory=dict)

    def enabled_rules(self) -> List[Tuple[str, RuleDefinition]]:
        return [(name, definition) for name, definition in self.rules.items() if definition.level != Level.OFF]


def load_ruleset(path: Path) -> Ruleset:
    """Parse a YAML or JSON ruleset manifest."""

    if not path.exists():
        raise MissingRulesetError(path)
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise InvalidRulesetError(path, f"unparseable YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidRulesetError(path, "expected a mapping at the top level")
    try:
        ruleset = Ruleset.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise InvalidRulesetError(path, f"{location}: {first.get('msg')}") from exc
    logger.debug("Loaded %d rule(s) from %s", len(ruleset.rules), path)
    return ruleset
