"""Pydantic schemas for chat operations."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from firstaid.chat.models import Category, Sender, Severity


class ChatHistoryItem(BaseModel):
    """A prior message supplied by the session layer."""

    sender: Sender
    text: str
    created_at: datetime | None = None
    category: Category | None = None
    severity: Severity | None = None


class ChatMessageCreate(BaseModel):
    """Schema for classifying a new user message."""

    text: str = Field(..., min_length=1, description="The user's message")
    history: list[ChatHistoryItem] = Field(default_factory=list)
    # Left untyped so a corrupt record is skipped by the classifier
    # instead of failing the whole request
    recent_screenings: list[Any] = Field(default_factory=list)
    language: str | None = None


class ClassificationRead(BaseModel):
    """Schema for a message classification."""

    category: Category
    severity: Severity
    crisis: bool
    confidence: float
    matched_keywords: list[str]
    ruleset_version: str


class BotResponseRead(BaseModel):
    """Schema for a rendered bot reply."""

    message: str
    quick_replies: list[str]
    show_crisis_banner: bool
    next_steps: str | None = None
    category: Category | None = None
    severity: Severity | None = None


class ChatMessageResult(BaseModel):
    """Schema for the classify-and-respond result."""

    classification: ClassificationRead
    response: BotResponseRead


class SafetyBannerResponse(BaseModel):
    """Schema for safety banner configuration."""

    enabled: bool
    text: str
