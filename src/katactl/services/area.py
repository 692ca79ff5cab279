"""AreaService — shape area calculation, single and batch.

Pipeline: PARSE → VALIDATE → COMPUTE → RESPOND
"""

from __future__ import annotations

from typing import Any

from katactl.domain.errors import InvalidArgument
from katactl.domain.shapes import Circle, Rectangle, calculate_shape_area, parse_shape
from katactl.services.base import BaseService
from katactl.services.result import ServiceResult
from katactl.services.telemetry import get_current_span, trace_span, traced


def _shape_payload(shape: Circle | Rectangle, area: int | float) -> dict[str, Any]:
    return {**shape.model_dump(), "area": area}


class AreaService(BaseService):
    """Computes areas of circles and rectangles."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def area(self, shape: Circle | Rectangle) -> ServiceResult:
        """Compute the area of an already-built shape."""
        try:
            value = self._compute(shape)
        except InvalidArgument as exc:
            return self._reject("area", exc)
        return ServiceResult.success("area", _shape_payload(shape, value))

    @traced
    def area_from_payload(self, payload: Any) -> ServiceResult:
        """Parse a tagged mapping (e.g. decoded JSON) and compute its area."""
        try:
            with trace_span("parse_shape"):
                shape = parse_shape(payload)
            value = self._compute(shape)
        except InvalidArgument as exc:
            return self._reject("area", exc)
        return ServiceResult.success("area", _shape_payload(shape, value))

    @traced
    def area_batch(self, items: list[Any], *, partial: bool = False) -> ServiceResult:
        """Compute areas for many tagged shapes.

        All-or-nothing unless *partial* is True: the first bad item fails
        the batch with ``BATCH_FAILED``.  In partial mode every valid item
        is still computed and the batch fails with ``BATCH_PARTIAL`` only
        when some item was rejected.
        """
        span = get_current_span()
        if span is not None:
            span.annotate("items", len(items))
            span.annotate("partial", partial)

        results: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []

        for i, item in enumerate(items):
            try:
                shape = parse_shape(item)
                value = self._compute(shape)
            except InvalidArgument as exc:
                errors.append({"index": i, "error": str(exc)})
                if not partial:
                    return ServiceResult.failure(
                        "area_batch",
                        "BATCH_FAILED",
                        f"Item {i} failed: {exc}",
                        data={"areas": results, "errors": errors},
                    )
                continue
            results.append({"index": i, **_shape_payload(shape, value)})

        data = {
            "areas": results,
            "errors": errors,
            "total_area": sum(r["area"] for r in results),
        }
        if errors:
            return ServiceResult.failure(
                "area_batch",
                "BATCH_PARTIAL",
                f"{len(errors)} of {len(items)} items failed",
                data=data,
            )
        return ServiceResult.success("area_batch", data)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _compute(self, shape: Circle | Rectangle) -> int | float:
        with trace_span("calculate_shape_area") as span:
            value = calculate_shape_area(shape, precision=self._settings.area.precision)
            if span is not None:
                span.annotate("shape", shape.shape)
        return value
