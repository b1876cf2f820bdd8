"""PHQ-9 (Patient Health Questionnaire-9) scoring module.

The PHQ-9 is a validated 9-item depression screening instrument.
Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-27.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-19: Moderate-severe
- 20-27: Severe

Item 9 asks about thoughts of self-harm and is surfaced separately.
"""

from dataclasses import dataclass
from typing import Any

from firstaid.scoring.base import (
    ScreeningResult,
    ScreeningType,
    SeverityBand,
    band_for_score,
    validate_answers,
)
from firstaid.scoring.guidance import get_interpretation, get_recommendations

ITEM_COUNT = 9
MAX_SCORE = 27

# Severity band thresholds (inclusive)
SEVERITY_BANDS = [
    (0, 4, SeverityBand.MINIMAL),
    (5, 9, SeverityBand.MILD),
    (10, 14, SeverityBand.MODERATE),
    (15, 19, SeverityBand.MODERATE_SEVERE),
    (20, 27, SeverityBand.SEVERE),
]


@dataclass(frozen=True)
class PHQ9Result(ScreeningResult):
    """Result of PHQ-9 scoring."""

    item9_positive: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["item9_positive"] = self.item9_positive
        return data


def get_severity_band(total: int) -> SeverityBand:
    """Determine severity band from total score."""
    return band_for_score(total, SEVERITY_BANDS)


def score_phq9(answers: Any, language: str = "en") -> PHQ9Result:
    """Score PHQ-9 questionnaire responses.

    Args:
        answers: Sequence of exactly 9 integers, each 0-3, in question order.
        language: Language for interpretation and recommendations.

    Returns:
        PHQ9Result with total score, severity band and guidance text.

    Raises:
        InvalidInput: If the length is wrong or a value is out of range.
    """
    items = validate_answers(answers, ITEM_COUNT, "PHQ-9")
    total = sum(items)
    severity = get_severity_band(total)

    return PHQ9Result(
        screening_type=ScreeningType.PHQ9,
        answers=items,
        score=total,
        max_score=MAX_SCORE,
        severity_band=severity,
        interpretation=get_interpretation(ScreeningType.PHQ9, severity, language),
        recommendations=get_recommendations(ScreeningType.PHQ9, severity, language),
        item9_positive=items[8] > 0,
    )
