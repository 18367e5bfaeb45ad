import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

FENCE_OPEN = "```yaml"
FENCE_CLOSE = "```"


def extract_yaml(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole text when there is none."""
    lines = content.splitlines()
    for start, line in enumerate(lines):
        if line.strip().startswith(FENCE_OPEN):
            break
    else:
        return content

    block = []
    for line in lines[start + 1 :]:
        if line.strip().startswith(FENCE_CLOSE):
            break
        block.append(line)
    return "\n".join(block)


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(extract_yaml(path.read_text(encoding="utf-8")))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        raise ValueError("Rules file is empty")

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules %s v%s", rules.project.slug, rules.project.rules_version)
    return rules
