"""Tests for correlation id context helpers."""

from diagram_planner.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Tests for correlation id propagation."""

    def test_set_explicit_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"
        clear_correlation_id()

    def test_generated_id(self) -> None:
        value = set_correlation_id()
        assert value
        assert get_correlation_id() == value
        clear_correlation_id()

    def test_clear(self) -> None:
        set_correlation_id("req-2")
        clear_correlation_id()
        assert get_correlation_id() == ""
