"""Versioned YAML rulesets.

Rulesets are loaded once, hashed for audit, and treated as immutable.
"""

from firstaid.rules.loader import RULESETS_DIR, compute_ruleset_hash, load_ruleset

__all__ = [
    "RULESETS_DIR",
    "load_ruleset",
    "compute_ruleset_hash",
]
