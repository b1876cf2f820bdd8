"""Render classifications into localized bot replies.

Lookups never fail: a missing language falls back to English and a
category without a template gets the generic invitational reply.
"""

import logging
from enum import Enum

from firstaid.chat.models import Category, Classification, ResponseBundle, Severity
from firstaid.chat.templates import (
    CATEGORY_QUICK_REPLIES,
    CRISIS_QUICK_REPLIES,
    DEFAULT_LANGUAGE,
    GENERIC_MESSAGES,
    GENERIC_QUICK_REPLIES,
    RESPONSE_TEMPLATES,
    WELCOME_MESSAGES,
    WELCOME_QUICK_REPLIES,
)

logger = logging.getLogger(__name__)

MAX_STRATEGIES = 2


def _template_for(category: Category, language: str) -> dict | None:
    """Find a category template, falling back to the default language."""
    if not isinstance(category, Category):
        return None
    localized = RESPONSE_TEMPLATES.get(language, {})
    template = localized.get(category)
    if template is None and language != DEFAULT_LANGUAGE:
        logger.debug(
            "No %s template for %s, using %s",
            language,
            getattr(category, "value", category),
            DEFAULT_LANGUAGE,
        )
        template = RESPONSE_TEMPLATES[DEFAULT_LANGUAGE].get(category)
    return template


def _as_member(enum_cls: type[Enum], value):
    """Map a stored plain-string value onto its enum member when one exists."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        return value


def _localized(messages: dict[str, str], language: str) -> str:
    return messages.get(language) or messages[DEFAULT_LANGUAGE]


def build_response(
    classification: Classification,
    language: str = DEFAULT_LANGUAGE,
) -> ResponseBundle:
    """Build the bot reply for a classification.

    Args:
        classification: Result from classify()
        language: User's preferred language code

    Returns:
        ResponseBundle with a non-empty message and quick replies
    """
    if not isinstance(language, str):
        language = DEFAULT_LANGUAGE

    category = _as_member(Category, classification.category)
    severity = _as_member(Severity, classification.severity)

    if classification.crisis:
        template = _template_for(Category.CRISIS, language)
        message = " ".join(
            [
                template["immediate_safety"],
                template["crisis_resources"],
                template["support_available"],
            ]
        )
        return ResponseBundle(
            message=message,
            quick_replies=list(CRISIS_QUICK_REPLIES),
            show_crisis_banner=True,
            next_steps=template["next_steps"],
            category=category,
            severity=severity,
        )

    template = _template_for(category, language)
    if template is None or "validation" not in template:
        return ResponseBundle(
            message=_localized(GENERIC_MESSAGES, language),
            quick_replies=list(GENERIC_QUICK_REPLIES),
            show_crisis_banner=False,
            category=category,
            severity=severity,
        )

    parts = [template["validation"]]
    parts.extend(template.get("strategies", [])[:MAX_STRATEGIES])
    parts.append(template["psychoeducation"])

    return ResponseBundle(
        message=" ".join(parts),
        quick_replies=list(CATEGORY_QUICK_REPLIES),
        show_crisis_banner=False,
        next_steps=template.get("next_steps"),
        category=category,
        severity=severity,
    )


def welcome_message(language: str = DEFAULT_LANGUAGE) -> ResponseBundle:
    """Opening message for a new chat session."""
    if not isinstance(language, str):
        language = DEFAULT_LANGUAGE
    return ResponseBundle(
        message=_localized(WELCOME_MESSAGES, language),
        quick_replies=list(WELCOME_QUICK_REPLIES),
        show_crisis_banner=False,
    )
