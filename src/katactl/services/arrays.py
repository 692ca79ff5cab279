"""ArrayService — numeric array exercises."""

from __future__ import annotations

from collections.abc import Sequence

from katactl.domain.arrays import sum_array
from katactl.domain.errors import InvalidArgument
from katactl.services.base import BaseService
from katactl.services.result import ServiceResult
from katactl.services.telemetry import traced


class ArrayService(BaseService):
    """Sums numeric arrays."""

    @traced
    def sum(self, numbers: Sequence[int | float]) -> ServiceResult:
        """Sum *numbers* (an empty array sums to 0)."""
        try:
            total = sum_array(numbers)
        except InvalidArgument as exc:
            return self._reject("sum_array", exc)
        return ServiceResult.success(
            "sum_array",
            {"count": len(numbers), "total": total},
        )
