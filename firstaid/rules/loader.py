"""YAML ruleset loader with integrity verification."""

import hashlib
from pathlib import Path
from typing import Any

import yaml

# Default rulesets directory
RULESETS_DIR = Path(__file__).parent.parent / "rulesets"


def compute_ruleset_hash(content: str) -> str:
    """Compute SHA256 hash of ruleset content.

    Recorded alongside classifications so a decision can be traced back
    to the exact trigger tables that produced it.

    Args:
        content: Raw YAML content string

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def load_ruleset(
    filename: str,
    rulesets_dir: Path | None = None,
) -> tuple[dict[str, Any], str]:
    """Load a ruleset YAML file and compute its hash.

    Args:
        filename: Name of the ruleset file (e.g., "chat-triggers-v1.0.0.yaml")
        rulesets_dir: Directory containing rulesets (defaults to firstaid/rulesets)

    Returns:
        Tuple of (parsed ruleset dict, SHA256 hash)

    Raises:
        FileNotFoundError: If ruleset file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If the document is not a mapping
    """
    if rulesets_dir is None:
        rulesets_dir = RULESETS_DIR

    filepath = rulesets_dir / filename

    if not filepath.exists():
        raise FileNotFoundError(f"Ruleset not found: {filepath}")

    content = filepath.read_text(encoding="utf-8")
    ruleset_hash = compute_ruleset_hash(content)
    ruleset = yaml.safe_load(content)

    if not isinstance(ruleset, dict):
        raise ValueError(f"Ruleset {filename} must be a YAML mapping")

    return ruleset, ruleset_hash
