"""Screening endpoints.

Scores PHQ-9 and GAD-7 submissions. Persisting results is the caller's
concern; the response carries everything needed to store them.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from firstaid.api.deps import AppSettings
from firstaid.core.logging import audit_logger
from firstaid.schemas.screening import (
    QuestionnaireRead,
    ScreeningResultRead,
    ScreeningSubmit,
)
from firstaid.scoring import (
    InvalidInput,
    PHQ9Result,
    ScreeningType,
    get_questionnaire,
    score_screening,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/screenings", tags=["screenings"])


def _resolve_type(screening_type: str) -> ScreeningType:
    try:
        return ScreeningType(screening_type.upper())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown screening type '{screening_type}'",
        ) from None


@router.get("/questions/{screening_type}", response_model=QuestionnaireRead)
async def get_questions(
    screening_type: str,
    app_settings: AppSettings,
    lang: str | None = None,
) -> QuestionnaireRead:
    """Get question wording and answer options for an instrument."""
    resolved = _resolve_type(screening_type)
    language = app_settings.resolve_language(lang)
    return QuestionnaireRead(**get_questionnaire(resolved, language))


@router.post("/{screening_type}", response_model=ScreeningResultRead)
async def submit_screening(
    screening_type: str,
    body: ScreeningSubmit,
    app_settings: AppSettings,
) -> ScreeningResultRead:
    """Score a screening submission.

    Invalid answer vectors are rejected with 400; they are never clamped
    or truncated.
    """
    resolved = _resolve_type(screening_type)
    language = app_settings.resolve_language(body.language)

    try:
        result = score_screening(resolved, body.answers, language)
    except InvalidInput as exc:
        logger.info(f"Rejected {resolved.value} submission: {exc.constraint}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid screening data",
                "constraint": exc.constraint,
                "message": exc.message,
            },
        ) from exc

    audit_logger.log(
        action="screening_scored",
        entity_type="screening",
        metadata={
            "screening_type": resolved.value,
            "score": result.score,
            "severity_band": result.severity_band.value,
            "has_consent": body.consent,
        },
    )

    return ScreeningResultRead(
        screening_type=result.screening_type.value,
        score=result.score,
        max_score=result.max_score,
        severity_band=result.severity_band.value,
        interpretation=result.interpretation,
        recommendations=result.recommendations,
        item9_positive=result.item9_positive if isinstance(result, PHQ9Result) else None,
        consent=body.consent,
    )
