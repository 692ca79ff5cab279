"""Shape models and the area calculator.

A shape is a tagged union: the ``shape`` field names the active variant and
only that variant's dimensions may be present.  Models are frozen and only
check types; dimension rules (non-negative, finite) are enforced by
:func:`calculate_shape_area` so a bad value always surfaces as
:class:`InvalidArgument`.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    ValidationError,
)

from katactl.domain.errors import InvalidArgument

Dimension = StrictInt | StrictFloat

DEFAULT_PRECISION = 2


class Circle(BaseModel):
    """Circle variant, measured by its radius."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    shape: Literal["circle"] = "circle"
    radius: Dimension

    def dimensions(self) -> dict[str, int | float]:
        return {"radius": self.radius}


class Rectangle(BaseModel):
    """Rectangle variant, measured by width and height."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    shape: Literal["rectangle"] = "rectangle"
    width: Dimension
    height: Dimension

    def dimensions(self) -> dict[str, int | float]:
        return {"width": self.width, "height": self.height}


Shape = Annotated[Circle | Rectangle, Field(discriminator="shape")]

_SHAPE_ADAPTER: TypeAdapter[Circle | Rectangle] = TypeAdapter(Shape)


def parse_shape(payload: Any) -> Circle | Rectangle:
    """Build a shape from a tagged mapping such as ``{"shape": "circle", "radius": 5}``.

    Raises:
        InvalidArgument: Unknown tag, missing or extra fields, or a
            dimension that is not a number.
    """
    try:
        return _SHAPE_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or None
        msg = f"Invalid shape: {first['msg']}"
        if loc:
            msg = f"Invalid shape ({loc}): {first['msg']}"
        raise InvalidArgument(msg, field=loc) from exc


def _require_dimension(name: str, value: int | float) -> int | float:
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidArgument(f"{name} is out of range, got {value!r}", field=name) from None
    if not math.isfinite(as_float):
        raise InvalidArgument(f"{name} must be a finite number, got {value!r}", field=name)
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value!r}", field=name)
    return value


def _require_area_in_range(area: int | float) -> int | float:
    # Integer products can exceed float range without overflowing.
    try:
        in_range = math.isfinite(float(area))
    except OverflowError:
        in_range = False
    if not in_range:
        raise InvalidArgument("area is out of range", field="area")
    return area


def calculate_shape_area(
    shape: Circle | Rectangle, *, precision: int = DEFAULT_PRECISION
) -> int | float:
    """Compute the area of *shape*.

    Circles are rounded to *precision* decimal places; rectangles are
    returned unrounded.

    Examples:
        >>> calculate_shape_area(Circle(radius=5))
        78.54
        >>> calculate_shape_area(Rectangle(width=4, height=6))
        24

    Raises:
        InvalidArgument: A dimension is negative or not finite, or the
            area does not fit in a float.
    """
    for name, value in shape.dimensions().items():
        _require_dimension(name, value)

    if isinstance(shape, Circle):
        try:
            area = math.pi * float(shape.radius) ** 2
        except OverflowError:
            raise InvalidArgument("area is out of range", field="area") from None
        return round(_require_area_in_range(area), precision)
    return _require_area_in_range(shape.width * shape.height)
