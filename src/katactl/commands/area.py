"""Command group: shape area calculation (circle, rectangle, shape, batch)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from katactl.commands._base import NUMBER, NUMERIC_ARGS, KataGroup
from katactl.commands._context import load_json_argument
from katactl.domain.shapes import Circle, Rectangle
from katactl.services.area import AreaService
from katactl.services.result import ServiceResult

if TYPE_CHECKING:
    from katactl.commands._context import AppContext


_AREA_EXAMPLES = """\
  katactl area circle 5
  katactl area rectangle 4 6
  katactl area shape '{"shape": "circle", "radius": 5}'
  katactl area batch shapes.json --partial"""


@click.group(cls=KataGroup, examples=_AREA_EXAMPLES)
@click.pass_obj
def area(app: AppContext) -> None:
    """Compute areas of circles and rectangles."""


@area.command(
    context_settings=NUMERIC_ARGS,
    examples="""\
  katactl area circle 5
  katactl -q area circle 2.5
  katactl --json area circle 1""",
)
@click.argument("radius", type=NUMBER)
@click.pass_obj
def circle(app: AppContext, radius: int | float) -> None:
    """Area of a circle, rounded to the configured precision."""
    app.emit(AreaService(app.settings).area(Circle(radius=radius)))


@area.command(
    context_settings=NUMERIC_ARGS,
    examples="""\
  katactl area rectangle 4 6
  katactl --json area rectangle 2.5 3""",
)
@click.argument("width", type=NUMBER)
@click.argument("height", type=NUMBER)
@click.pass_obj
def rectangle(app: AppContext, width: int | float, height: int | float) -> None:
    """Area of a rectangle (never rounded)."""
    app.emit(AreaService(app.settings).area(Rectangle(width=width, height=height)))


@area.command(
    examples="""\
  katactl area shape '{"shape": "circle", "radius": 5}'
  katactl area shape '{"shape": "rectangle", "width": 4, "height": 6}'"""
)
@click.argument("payload")
@click.pass_obj
def shape(app: AppContext, payload: str) -> None:
    """Area of one tagged shape given as JSON.

    PAYLOAD is an object whose "shape" key selects the variant.
    """
    data = load_json_argument(payload, param_hint="PAYLOAD")
    app.emit(AreaService(app.settings).area_from_payload(data))


@area.command(
    examples="""\
  katactl area batch shapes.json
  katactl area batch shapes.json --partial
  katactl --json area batch shapes.json"""
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--partial", is_flag=True, help="Keep going past invalid shapes.")
@click.pass_obj
def batch(app: AppContext, file: str, partial: bool) -> None:
    """Areas of every shape in a JSON file.

    FILE must contain a JSON array of tagged shape objects.
    """
    try:
        with open(file, encoding="utf-8") as f:
            items = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        app.emit(
            ServiceResult.failure("area_batch", "INVALID_FILE", f"Error reading {file}: {exc}")
        )
        return

    if not isinstance(items, list):
        app.emit(
            ServiceResult.failure(
                "area_batch",
                "INVALID_FORMAT",
                "JSON file must contain a top-level array.",
            )
        )
        return

    app.emit(AreaService(app.settings).area_batch(items, partial=partial))
