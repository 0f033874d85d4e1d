"""Unit tests for layout metrics."""

import pytest

from lap_chart.visualization.layout import (
    GOLDEN_RATIO,
    LayoutMode,
    compute_layout,
)


class TestComputeLayout:
    """Test suite for compute_layout."""

    def test_fixed_box_metrics(self):
        """Test metrics for square lap cells."""
        metrics = compute_layout(line_height=20, laps=3, driver_count=5, longest_name=4)
        assert metrics.font_size == 12.5
        assert metrics.names_width == 31.25
        assert metrics.numbers_width == 20
        assert metrics.padding == 20
        assert metrics.cell_width == 20
        assert metrics.graph_width == 60
        assert metrics.graph_height == 100

    def test_canvas_size(self):
        """Test total width and height of the canvas."""
        metrics = compute_layout(line_height=20, laps=3, driver_count=5, longest_name=4)
        assert metrics.width == 60 + 31.25 + 40 + 40
        assert metrics.height == 100 + 20 + 40

    def test_golden_ratio_metrics(self):
        """Test that the golden-ratio width ignores the lap count."""
        short = compute_layout(20, laps=5, driver_count=10, longest_name=3, mode=LayoutMode.GOLDEN_RATIO)
        long = compute_layout(20, laps=70, driver_count=10, longest_name=3, mode=LayoutMode.GOLDEN_RATIO)
        assert short.graph_width == pytest.approx(200 * GOLDEN_RATIO)
        assert short.graph_width == long.graph_width
        assert short.cell_width == pytest.approx(short.graph_width / 5)
        assert long.cell_width == pytest.approx(long.graph_width / 70)

    def test_golden_ratio_zero_laps(self):
        """Test that zero laps gives a zero cell width."""
        metrics = compute_layout(20, laps=0, driver_count=2, longest_name=3, mode=LayoutMode.GOLDEN_RATIO)
        assert metrics.cell_width == 0

    @pytest.mark.parametrize("position,expected", [(1, 0), (2, 20), (5, 80)])
    def test_row_y(self, position, expected):
        """Test that 1-based positions map to row tops."""
        metrics = compute_layout(20, laps=1, driver_count=5, longest_name=1)
        assert metrics.row_y(position) == expected

    def test_small_font_size(self):
        metrics = compute_layout(16, laps=1, driver_count=1, longest_name=1)
        assert metrics.small_font_size == 8


class TestLayoutMode:
    """Test suite for LayoutMode parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("fixed", LayoutMode.FIXED_BOX),
            ("golden", LayoutMode.GOLDEN_RATIO),
            ("GOLDEN", LayoutMode.GOLDEN_RATIO),
            (LayoutMode.FIXED_BOX, LayoutMode.FIXED_BOX),
        ],
    )
    def test_from_value(self, value, expected):
        assert LayoutMode.from_value(value) is expected

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown layout mode"):
            LayoutMode.from_value("spiral")
