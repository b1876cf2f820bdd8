"""Pydantic schemas for screening operations."""

from typing import Any

from pydantic import BaseModel, Field


class ScreeningSubmit(BaseModel):
    """Schema for submitting screening answers.

    Answers are validated by the scorer rather than here so that length
    and range failures carry the scorer's constraint and message.
    """

    answers: list[Any] = Field(..., description="One answer per question, each 0-3")
    consent: bool = True
    language: str | None = None


class ScreeningResultRead(BaseModel):
    """Schema for a scored screening."""

    screening_type: str
    score: int
    max_score: int
    severity_band: str
    interpretation: str
    recommendations: list[str]
    item9_positive: bool | None = None
    consent: bool = True


class QuestionnaireRead(BaseModel):
    """Schema for questionnaire wording."""

    type: str
    title: str
    description: str
    timeframe: str
    questions: list[str]
    options: list[str]
