"""Utility functions."""

from firstaid.utils.time import days_between, ensure_utc, parse_datetime, utc_now

__all__ = ["utc_now", "ensure_utc", "parse_datetime", "days_between"]
