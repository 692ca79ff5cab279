"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

import pytest

from katactl.services.result import ServiceResult
from katactl.services.telemetry import (
    Span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_nested(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        child.annotate("shape", "circle")
        root.children.append(child)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["name"] == "child"
        assert d["children"][0]["annotations"] == {"shape": "circle"}


class TestTraceSpan:
    def test_yields_none_when_disabled(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_yields_none_without_parent(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None


class TestTraced:
    def test_passthrough_when_disabled(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_injects_meta_preserving_existing(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            with trace_span("inner"):
                pass
            return ServiceResult(ok=True, op="op", meta={"count": 1})

        result = op()
        assert result.meta is not None
        assert result.meta["count"] == 1
        assert result.meta["telemetry"]["children"][0]["name"] == "inner"

    def test_non_result_return_untouched(self) -> None:
        enable_telemetry()

        @traced
        def op() -> int:
            return 7

        assert op() == 7

    def test_exception_propagates_and_resets_span(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            op()
        assert get_current_span() is None
