import pytest

from repolint.errors import UnknownRuleError
from repolint.levels import Level
from repolint.ruleset import Ruleset
from repolint.runner import get_rule, lint, load_rules


def _ruleset(rules):
    return Ruleset.model_validate({"rules": rules})


def test_registry_exposes_builtin_rules():
    assert sorted(load_rules()) == ["file-contents", "file-not-contents"]
    assert get_rule("file-not-contents").name == "file-not-contents"
    with pytest.raises(UnknownRuleError):
        get_rule("file-existence")


@pytest.mark.asyncio
async def test_lint_collects_outcomes_in_order(make_fs, fake_git):
    fs = make_fs({"README.md": "TODO: write docs"})
    ruleset = _ruleset(
        {
            "no-todo": {
                "level": "warning",
                "rule": {"type": "file-not-contents", "options": {"globsAll": ["README*"], "content": "TODO"}},
            },
            "readme-has-docs": {
                "rule": {"type": "file-contents", "options": {"globsAll": ["README*"], "content": "docs"}},
            },
            "skipped": {"level": "off", "rule": {"type": "file-contents"}},
        }
    )

    result = await lint(fs, ruleset, fake_git)

    assert [outcome.name for outcome in result.outcomes] == ["no-todo", "readme-has-docs"]
    assert result.summary.to_dict() == {"passed": 1, "errors": 0, "warnings": 1}
    assert result.passed is True
    assert result.exit_code() == 1


@pytest.mark.asyncio
async def test_lint_records_rule_errors(make_fs):
    ruleset = _ruleset(
        {
            "typo": {"rule": {"type": "file-not-content", "options": {}}},
            "bad-options": {"rule": {"type": "file-not-contents", "options": {"content": 5}}},
            "fine": {"rule": {"type": "file-not-contents", "options": {"globsAll": ["*"], "content": "x"}}},
        }
    )

    result = await lint(make_fs({"a.txt": "y"}), ruleset)

    typo, bad_options, fine = result.outcomes
    assert "Unknown rule type" in typo.error
    assert "Invalid options" in bad_options.error
    assert fine.passed is True
    assert result.passed is False
    assert result.exit_code() == 2
    data = result.to_dict()
    assert data["results"][0]["error"] == typo.error
    assert data["results"][2]["result"]["targets"][0] == {"passed": True, "message": "Doesn't contain 'x'", "path": "a.txt"}


@pytest.mark.asyncio
async def test_lint_error_level_failure(make_fs):
    ruleset = _ruleset(
        {"no-secret": {"rule": {"type": "file-not-contents", "options": {"globsAll": ["*"], "contents": ["AKIA"]}}}}
    )

    result = await lint(make_fs({"config.py": "key = 'AKIA123'"}), ruleset)

    outcome = result.outcomes[0]
    assert outcome.level == Level.ERROR
    assert outcome.passed is False
    assert result.exit_code() == 2
    assert result.failures() == [outcome]
