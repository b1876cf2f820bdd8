"""Chat classification data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Message categories.

    Declaration order is the tie-break order when two categories score
    the same match ratio.
    """

    ANXIETY = "ANXIETY"
    DEPRESSION = "DEPRESSION"
    STRESS_BURNOUT = "STRESS_BURNOUT"
    SLEEP = "SLEEP"
    ACADEMIC_STRESS = "ACADEMIC_STRESS"
    SOCIAL_ISOLATION = "SOCIAL_ISOLATION"
    CRISIS = "CRISIS"
    GENERAL = "GENERAL"

    @classmethod
    def scored(cls) -> list["Category"]:
        """Categories matched by keyword density, in tie-break order."""
        return [c for c in cls if c not in (cls.CRISIS, cls.GENERAL)]


class Severity(str, Enum):
    """Severity tiers assigned to a classified message."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRISIS = "crisis"


class Sender(str, Enum):
    """Who wrote a chat message."""

    USER = "USER"
    BOT = "BOT"


@dataclass(frozen=True)
class ChatMessage:
    """A prior message in the session, supplied as context."""

    sender: Sender
    text: str
    created_at: datetime | None = None
    category: Category | None = None
    severity: Severity | None = None


@dataclass(frozen=True)
class ScreeningRecord:
    """A stored screening result, supplied as classification context."""

    type: str
    score: int
    severity_band: str
    created_at: datetime


@dataclass(frozen=True)
class Classification:
    """Result of classifying one message."""

    category: Category
    severity: Severity
    crisis: bool
    confidence: float
    matched_keywords: tuple[str, ...] = ()
    ruleset_version: str = "unknown"

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "crisis": self.crisis,
            "confidence": self.confidence,
            "matched_keywords": list(self.matched_keywords),
            "ruleset_version": self.ruleset_version,
        }


@dataclass(frozen=True)
class ResponseBundle:
    """Rendered bot reply for a classification."""

    message: str
    quick_replies: list[str] = field(default_factory=list)
    show_crisis_banner: bool = False
    next_steps: str | None = None
    category: Category | None = None
    severity: Severity | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "quick_replies": list(self.quick_replies),
            "show_crisis_banner": self.show_crisis_banner,
            "next_steps": self.next_steps,
            "category": getattr(self.category, "value", self.category),
            "severity": getattr(self.severity, "value", self.severity),
        }
