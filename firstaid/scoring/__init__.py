"""Scoring modules for validated screening instruments."""

from typing import Any

from firstaid.scoring.base import (
    InvalidInput,
    ScreeningResult,
    ScreeningType,
    SeverityBand,
)
from firstaid.scoring.gad7 import score_gad7
from firstaid.scoring.guidance import (
    get_interpretation,
    get_questionnaire,
    get_recommendations,
)
from firstaid.scoring.phq9 import PHQ9Result, score_phq9


def score_screening(
    screening_type: ScreeningType | str,
    answers: Any,
    language: str = "en",
) -> ScreeningResult:
    """Score answers for the named instrument.

    Also used to re-derive a stored result from its saved answers.

    Raises:
        ValueError: If the instrument is unknown.
        InvalidInput: If the answers fail validation.
    """
    if isinstance(screening_type, ScreeningType):
        resolved = screening_type
    else:
        resolved = ScreeningType(str(screening_type).upper())

    if resolved is ScreeningType.PHQ9:
        return score_phq9(answers, language)
    return score_gad7(answers, language)


__all__ = [
    "InvalidInput",
    "ScreeningResult",
    "ScreeningType",
    "SeverityBand",
    "PHQ9Result",
    "score_phq9",
    "score_gad7",
    "score_screening",
    "get_recommendations",
    "get_interpretation",
    "get_questionnaire",
]
