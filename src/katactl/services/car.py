"""CarService — car age calculation."""

from __future__ import annotations

from katactl.domain.errors import InvalidArgument
from katactl.domain.vehicles import Car
from katactl.services._helpers import utc_year
from katactl.services.base import BaseService
from katactl.services.result import ServiceResult
from katactl.services.telemetry import traced


class CarService(BaseService):
    """Computes how old a car is relative to a reference year."""

    def reference_year(self) -> int:
        """Configured ``[car] reference_year``, falling back to the current UTC year."""
        configured = self._settings.car.reference_year
        return configured if configured is not None else utc_year()

    @traced
    def age(
        self,
        make: str,
        model: str,
        year: int,
        *,
        current_year: int | None = None,
    ) -> ServiceResult:
        """Age of a *make*/*model* built in *year*.

        *current_year* overrides the configured reference year.
        """
        car = Car(make=make, model=model, year=year)
        reference = current_year if current_year is not None else self.reference_year()
        try:
            age = car.age(reference)
        except InvalidArgument as exc:
            return self._reject("car_age", exc)
        return ServiceResult.success(
            "car_age",
            {
                "make": car.make,
                "model": car.model,
                "year": car.year,
                "reference_year": reference,
                "age": age,
            },
        )
