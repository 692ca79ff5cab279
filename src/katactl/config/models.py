"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, katactl.toml only contains overrides.
An empty (or absent) katactl.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- katactl.toml sections ---


class AreaConfig(BaseModel):
    """[area] section."""

    model_config = {"frozen": True}

    # Decimal places kept for circle areas; rectangles are never rounded.
    precision: int = Field(default=2, ge=0, le=15)


class CarConfig(BaseModel):
    """[car] section."""

    model_config = {"frozen": True}

    # None means the current UTC year.
    reference_year: int | None = None
