"""Tests for the deterministic chat classifier."""

from datetime import datetime, timedelta, timezone

import pytest

from firstaid.chat import (
    Category,
    ChatMessage,
    ScreeningRecord,
    Sender,
    Severity,
    TriggerTable,
    classify,
)

ANXIETY_LOW_TEXT = "I feel nervous"
SLEEP_MODERATE_TEXT = "insomnia, nightmares, fatigue, tossing and turning"
SLEEP_HIGH_TEXT = (
    "insomnia nightmares fatigue tossing and turning sleep problems "
    "waking up early restless sleep"
)


class TestCrisisShortCircuit:
    """Crisis keywords must override all other scoring."""

    def test_kill_myself_is_crisis(self, now: datetime) -> None:
        """Test the canonical crisis phrase."""
        result = classify("I want to kill myself", now=now)

        assert result.category == Category.CRISIS
        assert result.severity == Severity.CRISIS
        assert result.crisis is True
        assert result.confidence == 1.0
        assert "kill myself" in result.matched_keywords

    def test_crisis_ignores_context(self, now: datetime, screening_days_ago) -> None:
        """Test history and screenings cannot change a crisis result."""
        history = [ChatMessage(sender=Sender.USER, text="I'm fine really")]
        screenings = [screening_days_ago(1, "minimal")]

        with_context = classify("I want to kill myself", history, screenings, now=now)
        without_context = classify("I want to kill myself", now=now)

        assert with_context == without_context

    def test_case_insensitive(self, now: datetime) -> None:
        """Test crisis matching ignores case."""
        result = classify("Sometimes I just want to END IT ALL", now=now)
        assert result.crisis is True

    def test_crisis_beats_category_keywords(self, now: datetime) -> None:
        """Test crisis wins even when many category keywords also match."""
        result = classify("so anxious, nervous, panic, hopeless, I want to die", now=now)

        assert result.category == Category.CRISIS
        assert result.severity == Severity.CRISIS

    def test_substring_match(self, now: datetime) -> None:
        """Test keywords match inside longer words."""
        result = classify("thinking about suicidality a lot", now=now)
        assert result.crisis is True


class TestCategoryScoring:
    """Tests for keyword-ratio category selection."""

    def test_empty_text_is_general(self, now: datetime) -> None:
        """Test empty input yields the general low classification."""
        result = classify("", now=now)

        assert result.category == Category.GENERAL
        assert result.severity == Severity.LOW
        assert result.crisis is False
        assert result.confidence == 0.0
        assert result.matched_keywords == ()

    def test_no_match_is_general(self, now: datetime) -> None:
        """Test text with no trigger words is general."""
        result = classify("hello there, what a nice day", now=now)

        assert result.category == Category.GENERAL
        assert result.confidence == 0.0

    def test_non_string_text_is_general(self, now: datetime) -> None:
        """Test non-string input is treated as empty."""
        result = classify(None, now=now)  # type: ignore[arg-type]
        assert result.category == Category.GENERAL

    def test_academic_stress(self, now: datetime) -> None:
        """Test an exam worry routes to academic stress."""
        result = classify("I have a test tomorrow and can't focus", now=now)

        assert result.category == Category.ACADEMIC_STRESS
        assert result.crisis is False
        assert result.confidence == pytest.approx(1 / 12)
        assert result.matched_keywords == ("can't focus",)

    def test_short_list_outweighs_long_list(self, now: datetime) -> None:
        """Test ratio scoring favours the shorter keyword list.

        "lonely" appears in both DEPRESSION (18 keywords) and
        SOCIAL_ISOLATION (12 keywords).
        """
        result = classify("I feel lonely", now=now)

        assert result.category == Category.SOCIAL_ISOLATION
        assert result.confidence == pytest.approx(1 / 12)

    def test_tie_goes_to_first_declared_category(self, now: datetime) -> None:
        """Test equal ratios resolve by category declaration order.

        "social pressure" matches one of twelve STRESS_BURNOUT keywords
        ("pressure") and one of twelve SOCIAL_ISOLATION keywords.
        """
        result = classify("there is so much social pressure", now=now)

        assert result.category == Category.STRESS_BURNOUT
        assert result.confidence == pytest.approx(1 / 12)

    def test_low_severity(self, now: datetime) -> None:
        """Test a single hit in a long list is low severity."""
        result = classify(ANXIETY_LOW_TEXT, now=now)

        assert result.category == Category.ANXIETY
        assert result.severity == Severity.LOW

    def test_moderate_severity(self, now: datetime) -> None:
        """Test a ratio above 0.3 is moderate."""
        result = classify(SLEEP_MODERATE_TEXT, now=now)

        assert result.category == Category.SLEEP
        assert result.confidence == pytest.approx(4 / 11)
        assert result.severity == Severity.MODERATE

    def test_high_severity(self, now: datetime) -> None:
        """Test a ratio above 0.6 is high."""
        result = classify(SLEEP_HIGH_TEXT, now=now)

        assert result.category == Category.SLEEP
        assert result.confidence == pytest.approx(7 / 11)
        assert result.severity == Severity.HIGH

    def test_threshold_is_strictly_greater(self, now: datetime) -> None:
        """Test a ratio exactly on a threshold stays in the lower tier."""
        table = TriggerTable.from_ruleset(
            {
                "version": "test",
                "crisis": ["unreachable crisis phrase"],
                "categories": {
                    "ANXIETY": ["alpha", "beta", "gamma", "delta", "epsilon"],
                    "DEPRESSION": ["zz1"],
                    "STRESS_BURNOUT": ["zz2"],
                    "SLEEP": ["zz3"],
                    "ACADEMIC_STRESS": ["zz4"],
                    "SOCIAL_ISOLATION": ["zz5"],
                },
                "severity": {"high_above": 0.6, "moderate_above": 0.4},
            },
            "test-hash",
        )

        two_of_five = classify("alpha beta", now=now, triggers=table)
        three_of_five = classify("alpha beta gamma", now=now, triggers=table)

        assert two_of_five.confidence == pytest.approx(0.4)
        assert two_of_five.severity == Severity.LOW
        assert three_of_five.severity == Severity.MODERATE
        assert three_of_five.ruleset_version == "test"


class TestScreeningAugmentation:
    """Tests for severity escalation from recent screenings."""

    def test_recent_severe_escalates_to_high(self, now: datetime, screening_days_ago) -> None:
        """Test a severe screening 10 days ago forces high severity."""
        result = classify(ANXIETY_LOW_TEXT, [], [screening_days_ago(10, "severe")], now=now)

        assert result.category == Category.ANXIETY
        assert result.severity == Severity.HIGH

    def test_old_severe_is_ignored(self, now: datetime, screening_days_ago) -> None:
        """Test a screening 90 days ago has no effect."""
        result = classify(ANXIETY_LOW_TEXT, [], [screening_days_ago(90, "severe")], now=now)
        assert result.severity == Severity.LOW

    def test_sixty_day_cutoff_is_inclusive(self, now: datetime, screening_days_ago) -> None:
        """Test exactly 60 days counts and anything older does not."""
        at_cutoff = classify(ANXIETY_LOW_TEXT, [], [screening_days_ago(60, "severe")], now=now)
        past_cutoff = classify(
            ANXIETY_LOW_TEXT, [], [screening_days_ago(60 + 1 / 86400, "severe")], now=now
        )

        assert at_cutoff.severity == Severity.HIGH
        assert past_cutoff.severity == Severity.LOW

    def test_moderate_severe_escalates_to_high(self, now: datetime, screening_days_ago) -> None:
        """Test the PHQ-9 moderate-severe band also forces high."""
        result = classify(
            SLEEP_MODERATE_TEXT, [], [screening_days_ago(5, "moderate-severe")], now=now
        )
        assert result.severity == Severity.HIGH

    def test_moderate_lifts_low_to_moderate(self, now: datetime, screening_days_ago) -> None:
        """Test a moderate screening raises low to moderate."""
        result = classify(ANXIETY_LOW_TEXT, [], [screening_days_ago(5, "moderate")], now=now)
        assert result.severity == Severity.MODERATE

    def test_never_downgrades(self, now: datetime, screening_days_ago) -> None:
        """Test mild or moderate screenings never lower severity."""
        high = classify(SLEEP_HIGH_TEXT, [], [screening_days_ago(1, "moderate")], now=now)
        moderate = classify(SLEEP_MODERATE_TEXT, [], [screening_days_ago(1, "minimal")], now=now)

        assert high.severity == Severity.HIGH
        assert moderate.severity == Severity.MODERATE

    def test_most_recent_screening_wins(self, now: datetime, screening_days_ago) -> None:
        """Test only the latest in-window screening is considered."""
        screenings = [screening_days_ago(20, "severe"), screening_days_ago(5, "minimal")]

        forward = classify(ANXIETY_LOW_TEXT, [], screenings, now=now)
        backward = classify(ANXIETY_LOW_TEXT, [], list(reversed(screenings)), now=now)

        assert forward.severity == Severity.LOW
        assert backward.severity == Severity.LOW

    def test_general_is_not_escalated(self, now: datetime, screening_days_ago) -> None:
        """Test unmatched text stays general and low."""
        result = classify("", [], [screening_days_ago(1, "severe")], now=now)

        assert result.category == Category.GENERAL
        assert result.severity == Severity.LOW

    def test_accepts_screening_records(self, now: datetime) -> None:
        """Test dataclass records work as context."""
        record = ScreeningRecord(
            type="GAD7",
            score=18,
            severity_band="severe",
            created_at=now - timedelta(days=3),
        )
        result = classify(ANXIETY_LOW_TEXT, [], [record], now=now)
        assert result.severity == Severity.HIGH

    def test_accepts_camel_case_iso_strings(self, now: datetime) -> None:
        """Test JSON-shaped records from the session layer."""
        record = {
            "type": "PHQ9",
            "score": 21,
            "severityBand": "severe",
            "createdAt": (now - timedelta(days=3)).isoformat(),
        }
        result = classify(ANXIETY_LOW_TEXT, [], [record], now=now)
        assert result.severity == Severity.HIGH

    def test_naive_datetime_treated_as_utc(self, now: datetime) -> None:
        """Test naive timestamps are read as UTC."""
        record = {
            "severity_band": "severe",
            "created_at": (now - timedelta(days=2)).replace(tzinfo=None),
        }
        result = classify(ANXIETY_LOW_TEXT, [], [record], now=now)
        assert result.severity == Severity.HIGH

    def test_default_now_uses_current_time(self) -> None:
        """Test the recency filter defaults to the current time."""
        record = {
            "severity_band": "severe",
            "created_at": datetime.now(timezone.utc) - timedelta(days=1),
        }
        result = classify(ANXIETY_LOW_TEXT, [], [record])
        assert result.severity == Severity.HIGH


class TestMalformedContext:
    """Corrupt context records are skipped, never fatal."""

    @pytest.mark.parametrize(
        "record",
        [
            {"severity_band": "severe"},
            {"created_at": "not a date", "severity_band": "severe"},
            {"created_at": "2024-05-30T00:00:00Z"},
            {"created_at": "2024-05-30T00:00:00Z", "severity_band": 7},
            None,
            42,
        ],
    )
    def test_malformed_record_skipped(self, now: datetime, record) -> None:
        """Test each kind of corrupt record is ignored."""
        result = classify(ANXIETY_LOW_TEXT, [], [record], now=now)

        assert result.category == Category.ANXIETY
        assert result.severity == Severity.LOW

    def test_valid_record_still_used(self, now: datetime, screening_days_ago) -> None:
        """Test valid records beside corrupt ones still apply."""
        screenings = [
            {"severity_band": "severe"},
            None,
            screening_days_ago(3, "moderate"),
        ]
        result = classify(ANXIETY_LOW_TEXT, [], screenings, now=now)
        assert result.severity == Severity.MODERATE


class TestDeterminism:
    """Classification must be reproducible."""

    def test_history_is_inert(self, now: datetime) -> None:
        """Test prior messages do not change the result."""
        history = [
            ChatMessage(sender=Sender.USER, text="I want to kill myself"),
            {"sender": "BOT", "text": "I'm here for you"},
        ]
        assert classify(ANXIETY_LOW_TEXT, history, now=now) == classify(
            ANXIETY_LOW_TEXT, now=now
        )

    def test_idempotent(self, now: datetime, screening_days_ago) -> None:
        """Test identical arguments give identical results."""
        screenings = [screening_days_ago(4, "moderate")]

        first = classify(SLEEP_MODERATE_TEXT, [], screenings, now=now)
        second = classify(SLEEP_MODERATE_TEXT, [], screenings, now=now)

        assert first == second
        assert first.to_dict() == second.to_dict()
