"""Deterministic keyword-trigger chat classifier.

Routes a free-text message to a support category and severity tier.
All decisions are:
- Deterministic (same input = same output)
- Explainable (matched keywords and ruleset version are returned)
- Safety-first (crisis keywords override all other scoring)

NO AI/ML is used for classification.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from firstaid.chat.models import Category, ChatMessage, Classification, Severity
from firstaid.chat.triggers import TriggerTable, get_trigger_table
from firstaid.core.logging import audit_logger
from firstaid.utils.time import days_between, ensure_utc, parse_datetime, utc_now

logger = logging.getLogger(__name__)

SCREENING_RECENCY_DAYS = 60

# Screening bands that raise message severity
ESCALATE_TO_HIGH_BANDS = frozenset({"severe", "moderate-severe"})
ESCALATE_TO_MODERATE_BANDS = frozenset({"moderate"})


def classify(
    text: str,
    history: Iterable[ChatMessage | Mapping[str, Any]] | None = None,
    recent_screenings: Iterable[Any] | None = None,
    *,
    now: datetime | None = None,
    recency_days: int = SCREENING_RECENCY_DAYS,
    triggers: TriggerTable | None = None,
) -> Classification:
    """Classify a user message.

    Args:
        text: The user's message
        history: Recent prior messages in the session. Accepted as context
            only; it does not change the classification.
        recent_screenings: Screening records for the user, unfiltered by
            recency. Each needs a created_at and a severity_band (attribute
            or mapping key, snake_case or camelCase).
        now: Reference time for the recency filter (defaults to UTC now)
        recency_days: Screenings older than this many days are ignored
        triggers: Trigger table to use (defaults to the configured ruleset)

    Returns:
        Classification with category, severity, crisis flag and confidence
    """
    table = triggers or get_trigger_table()
    normalized = text.casefold() if isinstance(text, str) else ""

    # Crisis short-circuit: nothing below may dilute or override this
    crisis_hits = tuple(k for k in table.crisis_keywords if k in normalized)
    if crisis_hits:
        audit_logger.log(
            action="crisis_detected",
            entity_type="chat_message",
            metadata={
                "matched_keywords": list(crisis_hits),
                "ruleset_version": table.version,
            },
        )
        return Classification(
            category=Category.CRISIS,
            severity=Severity.CRISIS,
            crisis=True,
            confidence=1.0,
            matched_keywords=crisis_hits,
            ruleset_version=table.version,
        )

    category, ratio, matched = _best_category(normalized, table)

    if category is None:
        return Classification(
            category=Category.GENERAL,
            severity=Severity.LOW,
            crisis=False,
            confidence=0.0,
            ruleset_version=table.version,
        )

    severity = _severity_from_ratio(ratio, table)

    latest_band = _latest_screening_band(
        recent_screenings or [],
        now=now or utc_now(),
        recency_days=recency_days,
    )
    escalated = _escalate(severity, latest_band)
    if escalated != severity:
        audit_logger.log(
            action="severity_escalated",
            entity_type="chat_message",
            metadata={
                "category": category.value,
                "from": severity.value,
                "to": escalated.value,
                "screening_band": latest_band,
            },
        )

    return Classification(
        category=category,
        severity=escalated,
        crisis=False,
        confidence=ratio,
        matched_keywords=matched,
        ruleset_version=table.version,
    )


def _best_category(
    normalized: str,
    table: TriggerTable,
) -> tuple[Category | None, float, tuple[str, ...]]:
    """Score each category by match ratio and pick the highest.

    The ratio is matches divided by keyword-list length, so short lists
    weigh each hit more heavily. Ties go to the first declared category.
    """
    best: Category | None = None
    best_ratio = 0.0
    best_matched: tuple[str, ...] = ()

    for category, keywords in table.category_keywords.items():
        matched = tuple(k for k in keywords if k in normalized)
        ratio = len(matched) / len(keywords)
        if ratio > best_ratio:
            best, best_ratio, best_matched = category, ratio, matched

    return best, best_ratio, best_matched


def _severity_from_ratio(ratio: float, table: TriggerTable) -> Severity:
    if ratio > table.high_above:
        return Severity.HIGH
    if ratio > table.moderate_above:
        return Severity.MODERATE
    return Severity.LOW


def _escalate(severity: Severity, screening_band: str | None) -> Severity:
    """Raise severity from a recent screening band. Never lowers it."""
    if screening_band in ESCALATE_TO_HIGH_BANDS:
        return Severity.HIGH
    if screening_band in ESCALATE_TO_MODERATE_BANDS and severity == Severity.LOW:
        return Severity.MODERATE
    return severity


def _field(record: Any, *names: str) -> Any:
    for name in names:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None:
            return value
    return None


def _screening_context(record: Any) -> tuple[datetime, str] | None:
    """Extract (created_at, severity_band) or None if the record is unusable."""
    created_at = _field(record, "created_at", "createdAt")
    band = _field(record, "severity_band", "severityBand")

    if isinstance(created_at, str):
        try:
            created_at = parse_datetime(created_at)
        except ValueError:
            created_at = None

    if not isinstance(created_at, datetime):
        return None

    band = getattr(band, "value", band)
    if not isinstance(band, str) or not band:
        return None

    return ensure_utc(created_at), band


def _latest_screening_band(
    screenings: Iterable[Any],
    now: datetime,
    recency_days: int,
) -> str | None:
    """Band of the most recent screening within the recency window."""
    latest: tuple[datetime, str] | None = None

    for record in screenings:
        context = _screening_context(record)
        if context is None:
            logger.debug("Skipping malformed screening record in chat context")
            continue

        created_at, band = context
        if days_between(created_at, now) > recency_days:
            continue

        if latest is None or created_at > latest[0]:
            latest = context

    return latest[1] if latest else None
