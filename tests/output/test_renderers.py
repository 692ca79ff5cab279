"""Tests for Rich renderers."""

from __future__ import annotations

from katactl.output.renderers import render_result
from katactl.services.result import ServiceError, ServiceResult


class TestRenderArea:
    def test_circle(self) -> None:
        result = ServiceResult(
            ok=True, op="area", data={"shape": "circle", "radius": 5, "area": 78.54}
        )
        lines = render_result(result).splitlines()
        assert lines[0].startswith("OK")
        assert "shape: circle" in lines[1]
        assert "radius: 5" in lines[2]
        assert "area: 78.54" in lines[3]

    def test_verbose_shows_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="area",
            data={"shape": "rectangle", "width": 4, "height": 6, "area": 24},
            meta={
                "telemetry": {
                    "name": "AreaService.area",
                    "duration_ms": 0.12,
                    "children": [
                        {
                            "name": "calculate_shape_area",
                            "duration_ms": 0.01,
                            "annotations": {"shape": "rectangle"},
                        }
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "AreaService.area" in output
        assert "calculate_shape_area" in output
        assert "shape=rectangle" in output

    def test_meta_hidden_without_verbose(self) -> None:
        result = ServiceResult(
            ok=True,
            op="area",
            data={"shape": "circle", "radius": 1, "area": 3.14},
            meta={"telemetry": {"name": "AreaService.area", "duration_ms": 0.1}},
        )
        assert "meta:" not in render_result(result)


class TestRenderAreaBatch:
    def test_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="area_batch",
            data={
                "areas": [
                    {"index": 0, "shape": "circle", "radius": 5, "area": 78.54},
                    {"index": 1, "shape": "rectangle", "width": 4, "height": 6, "area": 24},
                ],
                "errors": [],
                "total_area": 102.54,
            },
        )
        output = render_result(result)
        assert "Shape" in output
        assert "radius=5" in output
        assert "width=4, height=6" in output
        assert "count: 2" in output
        assert "total_area: 102.54" in output


class TestRenderError:
    def test_error_line(self) -> None:
        result = ServiceResult(
            ok=False,
            op="area",
            error=ServiceError(
                code="INVALID_ARGUMENT",
                message="radius must be non-negative, got -1",
                detail={"field": "radius"},
            ),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "radius must be non-negative" in output
        assert "detail" not in output

    def test_verbose_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="area",
            error=ServiceError(code="INVALID_ARGUMENT", message="bad", detail={"field": "radius"}),
        )
        output = render_result(result, verbose=True)
        assert "field: radius" in output

    def test_batch_errors_listed(self) -> None:
        result = ServiceResult(
            ok=False,
            op="area_batch",
            data={"areas": [], "errors": [{"index": 1, "error": "Invalid shape"}]},
            error=ServiceError(code="BATCH_FAILED", message="Item 1 failed: Invalid shape"),
        )
        output = render_result(result)
        assert "[1] Invalid shape" in output

    def test_partial_batch_shows_successful_rows(self) -> None:
        result = ServiceResult(
            ok=False,
            op="area_batch",
            data={
                "areas": [{"index": 0, "shape": "circle", "radius": 5, "area": 78.54}],
                "errors": [{"index": 1, "error": "area is out of range"}],
                "total_area": 78.54,
            },
            error=ServiceError(code="BATCH_PARTIAL", message="1 of 2 items failed"),
        )
        output = render_result(result)
        assert "[1] area is out of range" in output
        assert "radius=5" in output
        assert "total_area: 78.54" in output

    def test_failed_batch_without_successes_has_no_table(self) -> None:
        result = ServiceResult(
            ok=False,
            op="area_batch",
            data={"areas": [], "errors": [{"index": 0, "error": "Invalid shape"}]},
            error=ServiceError(code="BATCH_FAILED", message="Item 0 failed: Invalid shape"),
        )
        assert "total_area" not in render_result(result)


class TestRenderGeneric:
    def test_nested_values_as_json(self) -> None:
        result = ServiceResult(
            ok=True, op="validate_keys", data={"valid": True, "checked": ["name", "age"]}
        )
        output = render_result(result)
        assert "valid: True" in output
        assert 'checked: ["name","age"]' in output
