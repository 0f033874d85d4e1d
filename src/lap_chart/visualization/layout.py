"""Layout metrics for lap charts.

Every size in a lap chart derives from the line height, the number of
drivers, the number of laps and the length of the longest driver name.
The metrics are computed fresh for each render.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from loguru import logger

GOLDEN_RATIO = 1.61803398875

# Font size and average glyph width relative to the line height.
FONT_SCALE = 5 / 8
GLYPH_WIDTH_SCALE = 5 / 8
SMALL_FONT_SCALE = 4 / 8


class LayoutMode(str, Enum):
    """How the width of the graph is derived."""

    FIXED_BOX = "fixed"
    GOLDEN_RATIO = "golden"

    @classmethod
    def from_value(cls, value: Union["LayoutMode", str]) -> "LayoutMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown layout mode {value!r}, expected one of: {choices}") from None


@dataclass(frozen=True)
class LayoutMetrics:
    """Absolute sizes used to place every chart element.

    Attributes:
        line_height: Height of one position row.
        laps: Number of laps on the x-axis.
        driver_count: Number of position rows.
        font_size: Font size of names and position numbers.
        names_width: Width of the driver name column.
        numbers_width: Width of each position number column.
        cell_width: Horizontal distance between two laps.
        graph_width: Width of the path area.
        graph_height: Height of the path area.
        padding: Margin between the border and the content.
    """

    line_height: float
    laps: int
    driver_count: int
    font_size: float
    names_width: float
    numbers_width: float
    cell_width: float
    graph_width: float
    graph_height: float
    padding: float

    @property
    def small_font_size(self) -> float:
        """Font size of the lap axis labels."""
        return self.line_height * SMALL_FONT_SCALE

    @property
    def width(self) -> float:
        """Total canvas width."""
        return self.graph_width + self.names_width + self.numbers_width * 2 + self.padding * 2

    @property
    def height(self) -> float:
        """Total canvas height."""
        return self.graph_height + self.line_height + self.padding * 2

    def row_y(self, position: int) -> float:
        """Top of the row for a 1-based position."""
        return (position - 1) * self.line_height

    def lap_x(self, lap: int) -> float:
        """Horizontal position of a 0-based lap."""
        return lap * self.cell_width


def compute_layout(
    line_height: float,
    laps: int,
    driver_count: int,
    longest_name: int,
    mode: LayoutMode = LayoutMode.FIXED_BOX,
) -> LayoutMetrics:
    """Derive layout metrics from the chart configuration and data.

    Args:
        line_height: Height of one position row
        laps: Maximum number of laps over all drivers
        driver_count: Number of drivers
        longest_name: Character count of the longest driver name
        mode: Layout strategy for the graph width

    Returns:
        Layout metrics for one render
    """
    font_size = line_height * FONT_SCALE
    graph_height = driver_count * line_height

    if mode is LayoutMode.GOLDEN_RATIO:
        graph_width = graph_height * GOLDEN_RATIO
        # No laps means no columns to divide the width into.
        cell_width = graph_width / laps if laps else 0
    else:
        cell_width = line_height
        graph_width = laps * line_height

    metrics = LayoutMetrics(
        line_height=line_height,
        laps=laps,
        driver_count=driver_count,
        font_size=font_size,
        names_width=font_size * longest_name * GLYPH_WIDTH_SCALE,
        numbers_width=line_height,
        cell_width=cell_width,
        graph_width=graph_width,
        graph_height=graph_height,
        padding=line_height,
    )
    logger.debug(
        f"Layout ({mode.value}): {laps} laps, {driver_count} drivers, "
        f"graph {metrics.graph_width:.1f}x{metrics.graph_height:.1f}"
    )
    return metrics
