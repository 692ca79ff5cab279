"""Car record."""

from __future__ import annotations

from dataclasses import dataclass

from katactl.domain.errors import InvalidArgument


@dataclass(frozen=True)
class Car:
    """Immutable car description."""

    make: str
    model: str
    year: int

    def age(self, current_year: int) -> int:
        """Whole years between the model year and *current_year*.

        Raises:
            InvalidArgument: The model year lies after *current_year*.
        """
        if self.year > current_year:
            raise InvalidArgument(
                f"model year {self.year} is after reference year {current_year}",
                field="year",
            )
        return current_year - self.year
