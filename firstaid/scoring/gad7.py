"""GAD-7 (Generalized Anxiety Disorder-7) scoring module.

The GAD-7 is a validated 7-item anxiety screening instrument.
Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-21.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-21: Severe
"""

from typing import Any

from firstaid.scoring.base import (
    ScreeningResult,
    ScreeningType,
    SeverityBand,
    band_for_score,
    validate_answers,
)
from firstaid.scoring.guidance import get_interpretation, get_recommendations

ITEM_COUNT = 7
MAX_SCORE = 21

# Severity band thresholds (inclusive)
SEVERITY_BANDS = [
    (0, 4, SeverityBand.MINIMAL),
    (5, 9, SeverityBand.MILD),
    (10, 14, SeverityBand.MODERATE),
    (15, 21, SeverityBand.SEVERE),
]


def get_severity_band(total: int) -> SeverityBand:
    """Determine severity band from total score."""
    return band_for_score(total, SEVERITY_BANDS)


def score_gad7(answers: Any, language: str = "en") -> ScreeningResult:
    """Score GAD-7 questionnaire responses.

    Args:
        answers: Sequence of exactly 7 integers, each 0-3, in question order.
        language: Language for interpretation and recommendations.

    Returns:
        ScreeningResult with total score, severity band and guidance text.

    Raises:
        InvalidInput: If the length is wrong or a value is out of range.
    """
    items = validate_answers(answers, ITEM_COUNT, "GAD-7")
    total = sum(items)
    severity = get_severity_band(total)

    return ScreeningResult(
        screening_type=ScreeningType.GAD7,
        answers=items,
        score=total,
        max_score=MAX_SCORE,
        severity_band=severity,
        interpretation=get_interpretation(ScreeningType.GAD7, severity, language),
        recommendations=get_recommendations(ScreeningType.GAD7, severity, language),
    )
