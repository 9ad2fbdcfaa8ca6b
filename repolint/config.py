"""Validated options for the file content rules."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import RuleConfigError


class RuleOptions(BaseModel):
    """Options shared by the file content rules.

    Manifest spellings (``globsAll``, ``lineCount``, ``succeed-on-non-existent``,
    ...) are accepted alongside the attribute names. Unrecognised keys are
    ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    globs_all: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("globs_all", "globsAll"),
    )
    content: Optional[str] = None
    contents: Optional[List[str]] = None
    succeed_on_non_existent: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "succeed_on_non_existent", "succeedOnNonExistent", "succeed-on-non-existent"
        ),
    )
    # Only the first N lines of each file are inspected when set.
    line_count: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("line_count", "lineCount"),
    )
    # Shown in messages in place of the raw `content` value.
    human_readable_content: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("human_readable_content", "human-readable-content"),
    )

    @field_validator("globs_all", "contents", mode="before")
    @classmethod
    def _wrap_single_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def describe(self, pattern: str) -> str:
        if self.human_readable_content and pattern == self.content:
            return self.human_readable_content
        return pattern


def parse_rule_options(rule_type: str, raw: Union[RuleOptions, Mapping[str, Any], None]) -> RuleOptions:
    """Validate raw manifest options for ``rule_type``."""

    if isinstance(raw, RuleOptions):
        return raw
    try:
        return RuleOptions.model_validate(dict(raw or {}))
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise RuleConfigError(rule_type, f"{location}: {first.get('msg')}") from exc
