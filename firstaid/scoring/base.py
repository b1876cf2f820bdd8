"""Shared types and validation for screening instruments."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ScreeningType(str, Enum):
    """Supported screening instruments."""

    PHQ9 = "PHQ9"  # Patient Health Questionnaire-9 (depression)
    GAD7 = "GAD7"  # Generalized Anxiety Disorder-7


class SeverityBand(str, Enum):
    """Severity band classifications."""

    MINIMAL = "minimal"
    MILD = "mild"
    MODERATE = "moderate"
    MODERATE_SEVERE = "moderate-severe"
    SEVERE = "severe"


MIN_ITEM_SCORE = 0
MAX_ITEM_SCORE = 3


class InvalidInput(ValueError):
    """Raised when a screening answer vector cannot be scored.

    Attributes:
        constraint: Which constraint failed, "length" or "range".
    """

    def __init__(self, message: str, constraint: str) -> None:
        super().__init__(message)
        self.message = message
        self.constraint = constraint


@dataclass(frozen=True)
class ScreeningResult:
    """Result of scoring a screening instrument."""

    screening_type: ScreeningType
    answers: tuple[int, ...]
    score: int
    max_score: int
    severity_band: SeverityBand
    interpretation: str
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "screening_type": self.screening_type.value,
            "answers": list(self.answers),
            "score": self.score,
            "max_score": self.max_score,
            "severity_band": self.severity_band.value,
            "interpretation": self.interpretation,
            "recommendations": list(self.recommendations),
        }


def validate_answers(answers: Any, item_count: int, label: str) -> tuple[int, ...]:
    """Validate a raw answer vector.

    Args:
        answers: Ordered answers, one per question
        item_count: Exact number of answers the instrument requires
        label: Instrument name used in error messages (e.g. "PHQ-9")

    Returns:
        The answers as an immutable tuple

    Raises:
        InvalidInput: If the length is wrong or any answer is not an
            integer between 0 and 3
    """
    if isinstance(answers, (str, bytes)) or not isinstance(answers, Sequence):
        raise InvalidInput(
            f"{label} requires exactly {item_count} answers", constraint="length"
        )

    if len(answers) != item_count:
        raise InvalidInput(
            f"{label} requires exactly {item_count} answers, got {len(answers)}",
            constraint="length",
        )

    for index, value in enumerate(answers, start=1):
        # bool is an int subclass but is never a valid Likert answer
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not MIN_ITEM_SCORE <= value <= MAX_ITEM_SCORE
        ):
            raise InvalidInput(
                f"{label} answers must be integers between {MIN_ITEM_SCORE} and "
                f"{MAX_ITEM_SCORE} (item {index} was {value!r})",
                constraint="range",
            )

    return tuple(answers)


def band_for_score(
    total: int, bands: list[tuple[int, int, SeverityBand]]
) -> SeverityBand:
    """Select the severity band whose inclusive range contains total."""
    for low, high, band in bands:
        if low <= total <= high:
            return band
    raise ValueError(f"Score {total} is outside every severity band")
