"""Chat endpoints.

Classifies a user message and renders the bot reply. Session storage and
history retrieval belong to the caller, which passes recent messages and
screenings in the request body.
"""

import logging

from fastapi import APIRouter, HTTPException

from firstaid.api.deps import ActiveTriggers, AppSettings
from firstaid.chat import ChatMessage, build_response, classify, welcome_message
from firstaid.schemas.chat import (
    BotResponseRead,
    ChatMessageCreate,
    ChatMessageResult,
    ClassificationRead,
    SafetyBannerResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/welcome", response_model=BotResponseRead)
async def get_welcome(app_settings: AppSettings, lang: str | None = None) -> BotResponseRead:
    """Get the opening message for a new chat session."""
    bundle = welcome_message(app_settings.resolve_language(lang))
    return BotResponseRead(**bundle.to_dict())


@router.get("/safety-banner", response_model=SafetyBannerResponse)
async def get_safety_banner(app_settings: AppSettings) -> SafetyBannerResponse:
    """Get the crisis banner text.

    Public so safety information is always reachable.
    """
    return SafetyBannerResponse(
        enabled=app_settings.safety_banner_enabled,
        text=app_settings.safety_banner_text,
    )


@router.post("/message", response_model=ChatMessageResult)
async def post_message(
    body: ChatMessageCreate,
    app_settings: AppSettings,
    triggers: ActiveTriggers,
) -> ChatMessageResult:
    """Classify a message and build the bot response.

    Over-length messages are rejected whole, never truncated, so no part of
    the text escapes crisis screening.
    """
    if len(body.text) > app_settings.chat_max_message_length:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "Message too long",
                "max_length": app_settings.chat_max_message_length,
            },
        )

    history = [
        ChatMessage(
            sender=item.sender,
            text=item.text,
            created_at=item.created_at,
            category=item.category,
            severity=item.severity,
        )
        for item in body.history[-app_settings.chat_history_window :]
    ]

    classification = classify(
        body.text,
        history,
        body.recent_screenings,
        recency_days=app_settings.screening_recency_days,
        triggers=triggers,
    )
    bundle = build_response(classification, app_settings.resolve_language(body.language))

    logger.info(
        f"Classified message category={classification.category.value} "
        f"severity={classification.severity.value} crisis={classification.crisis}",
        extra={"category": classification.category.value},
    )

    return ChatMessageResult(
        classification=ClassificationRead(**classification.to_dict()),
        response=BotResponseRead(**bundle.to_dict()),
    )
