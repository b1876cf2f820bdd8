"""Immutable keyword trigger tables for chat classification.

Tables are read once from a versioned YAML ruleset and frozen. They are
part of the deterministic behaviour contract, not live tunable state.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

from firstaid.chat.models import Category
from firstaid.rules.loader import load_ruleset

logger = logging.getLogger(__name__)

DEFAULT_TRIGGER_RULESET = "chat-triggers-v1.0.0.yaml"


@dataclass(frozen=True)
class TriggerTable:
    """Frozen crisis and category keyword lists plus severity thresholds."""

    version: str
    ruleset_hash: str
    crisis_keywords: tuple[str, ...]
    category_keywords: Mapping[Category, tuple[str, ...]]
    high_above: float
    moderate_above: float

    @classmethod
    def from_ruleset(cls, ruleset: dict[str, Any], ruleset_hash: str) -> "TriggerTable":
        """Build a table from a parsed ruleset.

        Raises:
            ValueError: If a scored category is missing, an unknown category
                is present, or a keyword list is empty or malformed.
        """
        raw_categories = ruleset.get("categories") or {}
        if not isinstance(raw_categories, dict):
            raise ValueError("Ruleset 'categories' must be a mapping")

        expected = {c.value for c in Category.scored()}
        unknown = set(raw_categories) - expected
        missing = expected - set(raw_categories)
        if unknown:
            raise ValueError(f"Ruleset has unknown categories: {sorted(unknown)}")
        if missing:
            raise ValueError(f"Ruleset is missing categories: {sorted(missing)}")

        # Iterate the enum, not the YAML, so tie-break order is fixed in code
        category_keywords = {
            category: _keyword_tuple(raw_categories[category.value], category.value)
            for category in Category.scored()
        }

        severity = ruleset.get("severity") or {}
        high_above = float(severity.get("high_above", 0.6))
        moderate_above = float(severity.get("moderate_above", 0.3))
        if not 0 <= moderate_above <= high_above <= 1:
            raise ValueError(
                f"Severity thresholds must satisfy 0 <= moderate_above <= high_above <= 1, "
                f"got moderate_above={moderate_above} high_above={high_above}"
            )

        return cls(
            version=str(ruleset.get("version", "unknown")),
            ruleset_hash=ruleset_hash,
            crisis_keywords=_keyword_tuple(ruleset.get("crisis"), "crisis"),
            category_keywords=MappingProxyType(category_keywords),
            high_above=high_above,
            moderate_above=moderate_above,
        )


def _keyword_tuple(raw: Any, label: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"Keyword list '{label}' must be a non-empty list")

    keywords = []
    for keyword in raw:
        if not isinstance(keyword, str) or not keyword.strip():
            raise ValueError(f"Keyword list '{label}' contains an invalid entry: {keyword!r}")
        keywords.append(keyword.casefold())
    return tuple(keywords)


@lru_cache
def get_trigger_table(filename: str = DEFAULT_TRIGGER_RULESET) -> TriggerTable:
    """Load and cache the trigger table for a ruleset file."""
    ruleset, ruleset_hash = load_ruleset(filename)
    table = TriggerTable.from_ruleset(ruleset, ruleset_hash)
    logger.info(
        f"Loaded chat trigger ruleset {filename} "
        f"(version={table.version}, hash={ruleset_hash[:12]})"
    )
    return table
