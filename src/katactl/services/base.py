"""BaseService — shared foundation for all katactl services.

Every service receives the frozen :class:`KataSettings` at construction
time (defaults when omitted).  Domain functions raise
:class:`InvalidArgument`; services translate it into a failed
:class:`ServiceResult` and never let it escape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from katactl.config.logging import get_logger
from katactl.services.result import ServiceResult

if TYPE_CHECKING:
    from katactl.config.settings import KataSettings
    from katactl.domain.errors import InvalidArgument

log = get_logger(__name__)

INVALID_ARGUMENT = "INVALID_ARGUMENT"


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class AreaService(BaseService):
            @traced
            def area(self, shape) -> ServiceResult:
                try:
                    value = calculate_shape_area(shape, precision=self._settings.area.precision)
                except InvalidArgument as exc:
                    return self._reject("area", exc)
                ...
    """

    def __init__(self, settings: KataSettings | None = None) -> None:
        if settings is None:
            from katactl.config.settings import KataSettings

            settings = KataSettings()
        self._settings = settings

    def _reject(self, op: str, exc: InvalidArgument) -> ServiceResult:
        """Turn a domain :class:`InvalidArgument` into a failed result."""
        log.debug("input.rejected", op=op, field=exc.field, reason=str(exc))
        detail = {"field": exc.field} if exc.field else {}
        return ServiceResult.failure(op, INVALID_ARGUMENT, str(exc), detail=detail)
