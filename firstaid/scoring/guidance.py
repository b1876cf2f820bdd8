"""Localized interpretation, recommendation and questionnaire lookups.

Every lookup degrades instead of failing: an unknown instrument falls back
to PHQ-9, an unknown band to "minimal" and an unknown language to English.
"""

import logging
from typing import Any

from firstaid.scoring.content import (
    DEFAULT_LANGUAGE,
    INTERPRETATIONS,
    QUESTIONNAIRES,
    RECOMMENDATIONS,
    RESPONSE_OPTIONS,
)
from firstaid.scoring.base import ScreeningType, SeverityBand

logger = logging.getLogger(__name__)


def _coerce_type(screening_type: Any) -> ScreeningType:
    if isinstance(screening_type, ScreeningType):
        return screening_type
    try:
        return ScreeningType(str(screening_type).upper())
    except ValueError:
        logger.debug(f"Unknown screening type {screening_type!r}, using PHQ9")
        return ScreeningType.PHQ9


def _coerce_band(severity_band: Any) -> SeverityBand | None:
    try:
        return SeverityBand(getattr(severity_band, "value", severity_band))
    except (TypeError, ValueError):
        return None


def _localized(by_language: dict[str, Any], language: Any) -> Any:
    if isinstance(language, str) and language in by_language:
        return by_language[language]
    return by_language.get(DEFAULT_LANGUAGE)


def _select_band(table: dict[SeverityBand, Any], severity_band: Any) -> Any:
    band = _coerce_band(severity_band)
    if band is None or band not in table:
        return table[SeverityBand.MINIMAL]
    return table[band]


def get_recommendations(
    screening_type: ScreeningType | str,
    severity_band: SeverityBand | str,
    language: str = DEFAULT_LANGUAGE,
) -> list[str]:
    """Get guidance for a scored screening.

    Args:
        screening_type: Instrument ("PHQ9" or "GAD7")
        severity_band: Band returned by the scorer
        language: Preferred language code

    Returns:
        Ordered list of recommendation strings (a copy, safe to mutate)
    """
    by_band = RECOMMENDATIONS[_coerce_type(screening_type)]
    by_language = _select_band(by_band, severity_band)
    return list(_localized(by_language, language) or [])


def get_interpretation(
    screening_type: ScreeningType | str,
    severity_band: SeverityBand | str,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Get the interpretation sentence for a scored screening."""
    by_band = INTERPRETATIONS[_coerce_type(screening_type)]
    by_language = _select_band(by_band, severity_band)
    return _localized(by_language, language)


def get_questionnaire(
    screening_type: ScreeningType | str,
    language: str = DEFAULT_LANGUAGE,
) -> dict[str, Any]:
    """Get the question wording and answer options for an instrument.

    A partially translated questionnaire is never returned: if the requested
    language does not cover every question, English is used instead.
    """
    resolved_type = _coerce_type(screening_type)
    by_language = QUESTIONNAIRES[resolved_type]
    english = by_language[DEFAULT_LANGUAGE]
    content = _localized(by_language, language)
    if len(content["questions"]) != len(english["questions"]):
        content = english

    return {
        "type": resolved_type.value,
        "title": content["title"],
        "description": content["description"],
        "timeframe": content["timeframe"],
        "questions": list(content["questions"]),
        "options": list(_localized(RESPONSE_OPTIONS, language)),
    }
