from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules
from src.ui.state import AppState

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The real rules file shipped at the project root."""
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def state(rules: Rules) -> AppState:
    return AppState(rules=rules)
