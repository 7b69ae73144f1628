from pathlib import Path

import pytest

from formkit.adapters.memory_view import RecordingView
from formkit.components.person_form import PersonFormModel
from formkit.rules.loader import load_rules
from formkit.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    """Rules loaded from the shipped rules.yaml."""
    return load_rules(rules_path)


@pytest.fixture
def person_model(rules: Rules) -> PersonFormModel:
    return PersonFormModel(rules.person_form)


@pytest.fixture
def recording_view() -> RecordingView:
    return RecordingView()
