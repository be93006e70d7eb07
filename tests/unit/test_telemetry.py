"""Unit tests for tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from geovet.telemetry import start_span


class TestStartSpan:
    """Test span attributes and error recording."""

    @patch("geovet.telemetry.trace.get_tracer")
    def test_sets_non_null_attributes(self, mock_get_tracer: MagicMock) -> None:
        span = MagicMock()
        mock_get_tracer.return_value.start_as_current_span.return_value.__enter__.return_value = span

        with start_span("geovet.lookup", {"geovet.input": "8.8.8.8", "geovet.error": None}) as active:
            assert active is span

        span.set_attribute.assert_called_once_with("geovet.input", "8.8.8.8")

    @patch("geovet.telemetry.trace.get_tracer")
    def test_records_exception(self, mock_get_tracer: MagicMock) -> None:
        span = MagicMock()
        mock_get_tracer.return_value.start_as_current_span.return_value.__enter__.return_value = span

        with pytest.raises(RuntimeError):
            with start_span("geovet.lookup"):
                raise RuntimeError("boom")

        span.record_exception.assert_called_once()
        span.set_status.assert_called_once()

    def test_noop_tracer(self) -> None:
        """Test spans work without an SDK configured."""
        with start_span("geovet.lookup", {"geovet.input": "8.8.8.8"}) as span:
            span.set_attribute("geovet.result.provider", "local")
