import pytest

from repolint.errors import InvalidRulesetError, MissingRulesetError
from repolint.levels import Level
from repolint.ruleset import load_ruleset


def test_load_ruleset_keeps_manifest_order(write_file):
    path = write_file(
        "repolint.yaml",
        """
version: 2
rules:
  no-todo:
    level: warning
    rule:
      type: file-not-contents
      options:
        globsAll: ["**/*.py"]
        content: TODO
  license-present:
    rule:
      type: file-contents
      options:
        globsAll: [LICENSE]
        content: License
  disabled:
    level: "off"
    rule:
      type: file-contents
        """.strip(),
    )

    ruleset = load_ruleset(path)

    assert list(ruleset.rules) == ["no-todo", "license-present", "disabled"]
    assert ruleset.rules["no-todo"].level == Level.WARNING
    assert ruleset.rules["license-present"].level == Level.ERROR
    assert [name for name, _ in ruleset.enabled_rules()] == ["no-todo", "license-present"]


def test_load_ruleset_accepts_json(write_file):
    path = write_file(
        "repolint.json",
        '{"rules": {"r": {"rule": {"type": "file-not-contents", "options": {"content": "x"}}}}}',
    )

    assert load_ruleset(path).rules["r"].rule.options == {"content": "x"}


def test_missing_ruleset(tmp_path):
    with pytest.raises(MissingRulesetError):
        load_ruleset(tmp_path / "repolint.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "rules:\n  bad:\n    level: fatal\n    rule:\n      type: file-contents\n",
        "rules: [unclosed\n",
    ],
)
def test_invalid_ruleset(write_file, text):
    path = write_file("repolint.yaml", text)

    with pytest.raises(InvalidRulesetError) as excinfo:
        load_ruleset(path)

    assert excinfo.value.path == path
