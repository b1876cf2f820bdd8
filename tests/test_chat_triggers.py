"""Tests for trigger ruleset loading and integrity verification."""

from pathlib import Path

import pytest
import yaml

from firstaid.chat import Category, TriggerTable, get_trigger_table
from firstaid.rules.loader import RULESETS_DIR, compute_ruleset_hash, load_ruleset

RULESET = "chat-triggers-v1.0.0.yaml"


def minimal_ruleset(**overrides) -> dict:
    """A structurally valid ruleset for validation tests."""
    ruleset = {
        "version": "0.0.1",
        "crisis": ["crisis word"],
        "categories": {category.value: [f"{category.value.lower()} word"] for category in Category.scored()},
    }
    ruleset.update(overrides)
    return ruleset


class TestLoadRuleset:
    """Tests for YAML ruleset loading."""

    def test_load_ruleset_returns_dict_and_hash(self) -> None:
        """Test that load_ruleset returns both ruleset dict and hash."""
        ruleset, ruleset_hash = load_ruleset(RULESET)

        assert isinstance(ruleset, dict)
        assert len(ruleset_hash) == 64  # SHA256 hex is 64 chars

    def test_hash_matches_file_content(self) -> None:
        """Test the hash is over the raw file bytes."""
        content = (RULESETS_DIR / RULESET).read_text(encoding="utf-8")

        _, ruleset_hash = load_ruleset(RULESET)
        assert ruleset_hash == compute_ruleset_hash(content)

    def test_different_content_produces_different_hash(self) -> None:
        """Test that different content produces different hashes."""
        assert compute_ruleset_hash("version 1") != compute_ruleset_hash("version 2")

    def test_bundled_ruleset_metadata(self) -> None:
        """Test the bundled ruleset carries its id and version."""
        ruleset, _ = load_ruleset(RULESET)

        assert ruleset["id"] == "chat-triggers"
        assert str(ruleset["version"]) == "1.0.0"

    def test_missing_file_raises(self) -> None:
        """Test a missing ruleset raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_ruleset("does-not-exist.yaml")

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """Test a YAML list document is rejected."""
        (tmp_path / "bad.yaml").write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be a YAML mapping"):
            load_ruleset("bad.yaml", rulesets_dir=tmp_path)


class TestTriggerTable:
    """Tests for the frozen trigger table."""

    def test_default_table_covers_every_scored_category(self, triggers: TriggerTable) -> None:
        """Test every scored category has keywords, in declaration order."""
        assert list(triggers.category_keywords) == Category.scored()
        for keywords in triggers.category_keywords.values():
            assert keywords

    def test_default_list_sizes(self, triggers: TriggerTable) -> None:
        """Test list lengths, which determine match ratios."""
        sizes = {c: len(k) for c, k in triggers.category_keywords.items()}

        assert sizes == {
            Category.ANXIETY: 17,
            Category.DEPRESSION: 18,
            Category.STRESS_BURNOUT: 12,
            Category.SLEEP: 11,
            Category.ACADEMIC_STRESS: 12,
            Category.SOCIAL_ISOLATION: 12,
        }
        assert len(triggers.crisis_keywords) == 18

    def test_default_thresholds(self, triggers: TriggerTable) -> None:
        """Test severity thresholds."""
        assert triggers.high_above == 0.6
        assert triggers.moderate_above == 0.3

    def test_table_is_immutable(self, triggers: TriggerTable) -> None:
        """Test the keyword mapping cannot be modified."""
        with pytest.raises(TypeError):
            triggers.category_keywords[Category.ANXIETY] = ("anything",)  # type: ignore[index]

    def test_cached(self) -> None:
        """Test the table is loaded once."""
        assert get_trigger_table() is get_trigger_table()

    def test_keywords_are_casefolded(self) -> None:
        """Test keywords are normalized at load time."""
        table = TriggerTable.from_ruleset(minimal_ruleset(crisis=["End It All"]), "h")
        assert table.crisis_keywords == ("end it all",)

    def test_yaml_order_does_not_change_tie_break(self) -> None:
        """Test category order comes from the enum, not the file."""
        ruleset = minimal_ruleset()
        ruleset["categories"] = dict(reversed(list(ruleset["categories"].items())))

        table = TriggerTable.from_ruleset(ruleset, "h")
        assert list(table.category_keywords) == Category.scored()

    def test_missing_category_raises(self) -> None:
        """Test a ruleset without every category is rejected."""
        ruleset = minimal_ruleset()
        del ruleset["categories"]["SLEEP"]

        with pytest.raises(ValueError, match="missing categories"):
            TriggerTable.from_ruleset(ruleset, "h")

    def test_unknown_category_raises(self) -> None:
        """Test an unknown category is rejected."""
        ruleset = minimal_ruleset()
        ruleset["categories"]["HAPPINESS"] = ["joy"]

        with pytest.raises(ValueError, match="unknown categories"):
            TriggerTable.from_ruleset(ruleset, "h")

    def test_crisis_is_not_a_scored_category(self) -> None:
        """Test crisis keywords cannot be listed as a category."""
        ruleset = minimal_ruleset()
        ruleset["categories"]["CRISIS"] = ["suicide"]

        with pytest.raises(ValueError, match="unknown categories"):
            TriggerTable.from_ruleset(ruleset, "h")

    @pytest.mark.parametrize("bad_list", [[], None, ["ok", ""], ["ok", 3]])
    def test_bad_keyword_list_raises(self, bad_list) -> None:
        """Test empty or malformed keyword lists are rejected."""
        with pytest.raises(ValueError):
            TriggerTable.from_ruleset(minimal_ruleset(crisis=bad_list), "h")

    def test_inverted_thresholds_raise(self) -> None:
        """Test moderate threshold above high threshold is rejected."""
        ruleset = minimal_ruleset(severity={"high_above": 0.2, "moderate_above": 0.5})

        with pytest.raises(ValueError, match="Severity thresholds"):
            TriggerTable.from_ruleset(ruleset, "h")

    def test_bundled_yaml_parses_apostrophes(self) -> None:
        """Test keywords with apostrophes survive YAML parsing."""
        ruleset, _ = load_ruleset(RULESET)
        assert "can't go on" in ruleset["crisis"]
        assert yaml.safe_dump(ruleset)
