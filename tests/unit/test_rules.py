"""
Rules loader and schema tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules, default_rules


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(content)
    return path


class TestLoadRules:
    def test_load_actual_rules_file(self, rules: Rules) -> None:
        """The shipped rules file matches the built-in defaults."""
        assert rules.project.slug == "meeting-cost-calculator"
        assert rules.cost_model.weeks_per_year == 52
        assert rules.cost_model.hours_per_week == 40
        assert rules.cost_model.minutes_per_hour == 60
        assert rules.cost_model.default_duration_minutes == 60
        assert rules.validation.min_salary == 1
        assert rules.validation.messages.name_required == "Name is required"
        assert rules.validation.messages.salary_too_small == "Salary must be > 0"
        assert rules.display.currency_symbol == "$"

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/rules.yaml"))

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "project: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_schema_violation_raises(self, tmp_path: Path) -> None:
        """Non-positive cost model constants are rejected."""
        path = _write(
            tmp_path,
            "project:\n  slug: x\n  title: X\ncost_model:\n  weeks_per_year: 0\n",
        )

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_missing_project_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "cost_model:\n  weeks_per_year: 52\n")

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_plain_yaml_without_fences(self, tmp_path: Path) -> None:
        """Sections left out fall back to defaults."""
        path = _write(tmp_path, "project:\n  slug: plain\n  title: Plain\n")

        rules = load_rules(path)

        assert rules.project.slug == "plain"
        assert rules.cost_model.weeks_per_year == 52
        assert rules.display.currency_code == "USD"

    def test_strips_markdown_code_fences(self, tmp_path: Path) -> None:
        content = """# Notes

Some prose that is not YAML: [ {

```yaml
project:
  slug: fenced
  title: Fenced
cost_model:
  hours_per_week: 35
```

Trailing text.
"""
        rules = load_rules(_write(tmp_path, content))

        assert rules.project.slug == "fenced"
        assert rules.cost_model.hours_per_week == 35


def test_default_rules() -> None:
    rules = default_rules()

    assert rules.project.title == "Meeting Cost Calculator"
    assert rules.validation.messages.salary_negative == "Salary must be a positive number"
