from pathlib import Path

import pytest

from src.adapters.rules import RulesAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def rules(project_root: Path) -> Rules:
    """
    Loads the REAL rules file from the project root.
    Fails fast if it is missing; the defaults must not mask a broken file.
    """
    rules_path = project_root / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def rules_port(rules: Rules) -> RulesAdapter:
    return RulesAdapter(rules)
