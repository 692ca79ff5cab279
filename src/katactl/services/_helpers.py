"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_year() -> int:
    """Current UTC calendar year."""
    return datetime.now(UTC).year
