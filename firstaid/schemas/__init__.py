"""Pydantic schemas for API request/response validation."""

from firstaid.schemas.chat import (
    BotResponseRead,
    ChatHistoryItem,
    ChatMessageCreate,
    ChatMessageResult,
    ClassificationRead,
    SafetyBannerResponse,
)
from firstaid.schemas.screening import (
    QuestionnaireRead,
    ScreeningResultRead,
    ScreeningSubmit,
)

__all__ = [
    "BotResponseRead",
    "ChatHistoryItem",
    "ChatMessageCreate",
    "ChatMessageResult",
    "ClassificationRead",
    "SafetyBannerResponse",
    "QuestionnaireRead",
    "ScreeningResultRead",
    "ScreeningSubmit",
]
