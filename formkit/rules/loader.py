import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from formkit.rules.models import Rules

logger = logging.getLogger(__name__)


def _strip_code_fence(content: str) -> str:
    """Return the body of the first ```yaml block if present, else the whole document."""
    lines = content.splitlines()
    start = next((i for i, line in enumerate(lines) if line.strip().startswith("```yaml")), None)
    if start is None:
        return content

    body: list[str] = []
    for line in lines[start + 1 :]:
        if line.strip().startswith("```"):
            break
        body.append(line)
    return "\n".join(body)


def parse_rules(content: str) -> Rules:
    """
    Parse and validate rules from YAML text.
    Raises ValueError on bad YAML or schema violations.
    """
    try:
        data = yaml.safe_load(_strip_code_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if syntax or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    rules = parse_rules(content)
    logger.debug("Loaded rules %s from %s", rules.project.rules_version, path)
    return rules


def default_rules() -> Rules:
    """Built-in rules, identical to the shipped rules.yaml."""
    return Rules()
