"""RecordService — mapping key validation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from katactl.domain.records import missing_keys, validate_keys
from katactl.services.base import BaseService
from katactl.services.result import ServiceResult
from katactl.services.telemetry import traced


class RecordService(BaseService):
    """Checks that records carry the keys a caller requires."""

    @traced
    def validate_keys(self, mapping: Mapping[str, Any], keys: Sequence[str]) -> ServiceResult:
        """Report whether every key in *keys* is present in *mapping*.

        A record missing keys is still a successful operation; the answer
        lives in ``data["valid"]``.
        """
        return ServiceResult.success(
            "validate_keys",
            {
                "valid": validate_keys(mapping, keys),
                "checked": list(keys),
                "missing": missing_keys(mapping, keys),
            },
        )
