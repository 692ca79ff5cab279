"""Array summation."""

from __future__ import annotations

import math
from collections.abc import Iterable

from katactl.domain.errors import InvalidArgument


def _is_finite(value: int | float) -> bool:
    # Python ints never overflow; only floats can be nan or inf.
    return isinstance(value, int) or math.isfinite(value)


def sum_array(numbers: Iterable[int | float]) -> int | float:
    """Sum *numbers*; an empty input sums to ``0``.

    Integers stay integers.  Booleans, non-numbers and non-finite floats
    raise :class:`InvalidArgument`, as does a running total that leaves
    float range once floats are mixed in.
    """
    total: int | float = 0
    for index, value in enumerate(numbers):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgument(
                f"numbers[{index}] must be a number, got {type(value).__name__}",
                field=f"numbers[{index}]",
            )
        if not _is_finite(value):
            raise InvalidArgument(
                f"numbers[{index}] must be finite, got {value!r}",
                field=f"numbers[{index}]",
            )
        try:
            total += value
        except OverflowError:
            raise InvalidArgument("sum is out of range", field="numbers") from None
        if not _is_finite(total):
            raise InvalidArgument("sum is out of range", field="numbers")
    return total
