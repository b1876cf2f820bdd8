"""Deterministic chat classification and response rendering.

Classification is keyword-trigger based so that the same message always
produces the same category and severity. No AI/ML is used.
"""

from firstaid.chat.classifier import SCREENING_RECENCY_DAYS, classify
from firstaid.chat.models import (
    Category,
    ChatMessage,
    Classification,
    ResponseBundle,
    ScreeningRecord,
    Sender,
    Severity,
)
from firstaid.chat.responses import build_response, welcome_message
from firstaid.chat.triggers import TriggerTable, get_trigger_table

__all__ = [
    "Category",
    "ChatMessage",
    "Classification",
    "ResponseBundle",
    "ScreeningRecord",
    "Sender",
    "Severity",
    "SCREENING_RECENCY_DAYS",
    "TriggerTable",
    "build_response",
    "classify",
    "get_trigger_table",
    "welcome_message",
]
