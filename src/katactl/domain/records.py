"""Mapping key validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def missing_keys(mapping: Mapping[str, Any], keys: Iterable[str]) -> list[str]:
    """Return the *keys* absent from *mapping*, in request order, without duplicates."""
    missing: list[str] = []
    for key in keys:
        if key not in mapping and key not in missing:
            missing.append(key)
    return missing


def validate_keys(mapping: Mapping[str, Any], keys: Iterable[str]) -> bool:
    """True when every key in *keys* is present in *mapping*.

    An empty *keys* is trivially valid.
    """
    return all(key in mapping for key in keys)
