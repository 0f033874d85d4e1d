"""Lap chart rendering.

A lap chart shows every driver's position on every lap as a line, with the
driver names and starting positions on the left, finishing positions on the
right, lap numbers along the bottom and a grey background marking the
positions held by lapped cars.
"""

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from loguru import logger

from ..models.driver import Colour, Driver, DualTone, parse_colour
from .layout import LayoutMetrics, LayoutMode, compute_layout
from .svg import SvgElement, format_number, group, svg_root

FONT_FAMILY = "Helvetica,sans-serif"
START_LABEL = "Start"
LAPPED_FILL = "lightgray"
AXIS_COLOUR = "black"
TICK_LENGTH = 4
STRIPE_WIDTH_RATIO = 1 / 3

Point = Tuple[float, float]


class LapChart:
    """Accumulates race data and renders it as an SVG lap chart.

    Example:
        >>> chart = LapChart(line_height=20)
        >>> chart.add_driver("Hamilton", ("#00d2be", "black"), [2, 1, 1])
        >>> chart.add_driver("Verstappen", "#1e41ff", [1, 2, 2])
        >>> chart.set_lapped_counts({2: 0})
        >>> svg = chart.generate()
    """

    def __init__(
        self,
        line_height: float = 20,
        path_width: float = 4,
        layout: Union[LayoutMode, str] = LayoutMode.FIXED_BOX,
    ):
        """Initialise the chart.

        Args:
            line_height: Height of one position row; scales the whole chart
            path_width: Stroke width of driver lines
            layout: ``fixed`` for square lap cells, ``golden`` for a graph
                whose width is the golden ratio of its height
        """
        self.line_height = line_height
        self.path_width = path_width
        self.layout = LayoutMode.from_value(layout)
        self.drivers: List[Driver] = []
        self.lapped: Dict[int, int] = {}
        self.laps = 0
        self.longest_name = 0

    def add_driver(
        self,
        name: str,
        colour: Union[Colour, str, Sequence[str]],
        positions: Iterable[int],
    ) -> Driver:
        """Add a driver and their position on each lap.

        Args:
            name: Display name
            colour: Colour string, ``(primary, secondary)`` pair or Colour
            positions: 1-based position per lap, starting grid first

        Returns:
            The stored driver
        """
        driver = Driver(name=name, colour=parse_colour(colour), positions=tuple(positions))
        self.drivers.append(driver)

        self.laps = max(self.laps, driver.laps)
        self.longest_name = max(self.longest_name, len(name))
        logger.debug(f"Added driver {name} with {driver.laps} laps")
        return driver

    def set_lapped_counts(self, counts: Union[Mapping[int, int], Sequence[int]]) -> None:
        """Set the number of drivers lapped on each lap.

        Replaces any previous counts. Laps missing from ``counts`` have no
        lapped drivers.

        Args:
            counts: Mapping of 0-based lap index to lapped count, or a
                sequence indexed by lap
        """
        if isinstance(counts, Mapping):
            self.lapped = {int(lap): int(count) for lap, count in counts.items()}
        else:
            self.lapped = {lap: int(count) for lap, count in enumerate(counts)}

    def metrics(self) -> LayoutMetrics:
        """Compute layout metrics for the current data."""
        return compute_layout(
            line_height=self.line_height,
            laps=self.laps,
            driver_count=len(self.drivers),
            longest_name=self.longest_name,
            mode=self.layout,
        )

    def generate(self) -> str:
        """Render the chart.

        Returns:
            Complete SVG document text
        """
        logger.info(f"Generating lap chart: {len(self.drivers)} drivers, {self.laps} laps")
        return self.build(self.metrics()).to_string()

    def build(self, metrics: LayoutMetrics) -> SvgElement:
        """Build the SVG element tree for the given metrics."""
        root = svg_root(metrics.width, metrics.height)
        root.add(
            "rect",
            x=0,
            y=0,
            width=metrics.width,
            height=metrics.height,
            style="stroke-width:1; stroke: black; fill: none;",
        )

        graph = group(
            *self._lapped_shading(metrics),
            group(
                group(*self._driver_lines(metrics), translate=(0, metrics.line_height / 2)),
                group(*self._lap_axis(metrics), translate=(0, metrics.graph_height)),
                translate=(metrics.cell_width / 2, 0),
            ),
            translate=(metrics.names_width + metrics.line_height, 0),
        )
        root.append(
            group(
                group(*self._names_and_positions(metrics)),
                graph,
                translate=(metrics.padding, metrics.padding),
            )
        )
        return root

    def _text(self, text: str, x: float, y: float, anchor: str, font_size: float) -> SvgElement:
        return SvgElement(
            "text",
            text,
            text_anchor=anchor,
            x=x,
            y=y,
            font_family=FONT_FAMILY,
            font_size=font_size,
        )

    def _names_and_positions(self, metrics: LayoutMetrics) -> List[SvgElement]:
        """Driver names with starting and finishing positions."""
        labels = []
        for driver in self.drivers:
            if not driver.positions:
                logger.debug(f"Skipping labels for {driver.name}: no laps")
                continue

            text_y = metrics.row_y(driver.start_position) + metrics.font_size
            labels.append(
                group(
                    self._text(driver.name, metrics.names_width, text_y, "end", metrics.font_size),
                    self._text(
                        str(driver.start_position),
                        metrics.names_width + metrics.line_height,
                        text_y,
                        "end",
                        metrics.font_size,
                    ),
                    self._text(
                        str(driver.finish_position),
                        metrics.names_width + metrics.line_height + metrics.graph_width,
                        text_y,
                        "start",
                        metrics.font_size,
                    ),
                )
            )
        return labels

    def _lapped_shading(self, metrics: LayoutMetrics) -> List[SvgElement]:
        """Grey background behind the positions held by lapped drivers."""
        shading = []
        for lap, count in self.lapped.items():
            if count <= 0:
                continue
            shading.append(
                SvgElement(
                    "rect",
                    x=metrics.lap_x(lap),
                    y=(metrics.driver_count - count) * metrics.line_height,
                    width=metrics.cell_width,
                    height=count * metrics.line_height,
                    style=f"stroke-width:0; fill: {LAPPED_FILL}",
                )
            )
        return shading

    def _driver_lines(self, metrics: LayoutMetrics) -> List[SvgElement]:
        """One line (or marker, for a single lap) per driver."""
        elements = []
        for driver in self.drivers:
            points = [
                (metrics.lap_x(lap), metrics.row_y(position))
                for lap, position in enumerate(driver.positions)
            ]
            if not points:
                continue
            if len(points) == 1:
                elements.append(self._marker(points[0], driver.colour))
            else:
                elements.extend(self._path(points, driver.colour))
        return elements

    def _marker(self, point: Point, colour: Colour) -> SvgElement:
        cx, cy = point
        circle = SvgElement("circle", cx=cx, cy=cy, r=self.path_width / 2, fill=colour.primary)
        if isinstance(colour, DualTone):
            circle.set(stroke=colour.secondary, stroke_width=self.path_width * STRIPE_WIDTH_RATIO)
        return circle

    def _polyline(self, points: str, stroke: str, width: float) -> SvgElement:
        line = SvgElement(
            "polyline",
            points=points,
            stroke=stroke,
            stroke_width=width,
            fill="none",
        )
        if self.layout is LayoutMode.GOLDEN_RATIO:
            line.set(stroke_linecap="round", stroke_linejoin="round")
        return line

    def _path(self, points: List[Point], colour: Colour) -> List[SvgElement]:
        point_text = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)
        lines = [self._polyline(point_text, colour.primary, self.path_width)]
        if isinstance(colour, DualTone):
            lines.append(
                self._polyline(point_text, colour.secondary, self.path_width * STRIPE_WIDTH_RATIO)
            )
        return lines

    def _lap_axis(self, metrics: LayoutMetrics) -> List[SvgElement]:
        """Baseline with a tick and label for every lap."""
        if metrics.laps == 0:
            return []

        axis = [
            SvgElement(
                "line",
                x1=0,
                y1=TICK_LENGTH / 2,
                x2=metrics.lap_x(metrics.laps - 1),
                y2=TICK_LENGTH / 2,
                stroke=AXIS_COLOUR,
                stroke_width=1,
            )
        ]
        for lap in range(metrics.laps):
            x = metrics.lap_x(lap)
            axis.append(
                SvgElement("line", x1=x, y1=0, x2=x, y2=TICK_LENGTH, stroke=AXIS_COLOUR, stroke_width=1)
            )
            axis.append(
                self._text(
                    START_LABEL if lap == 0 else str(lap),
                    x,
                    TICK_LENGTH + metrics.small_font_size,
                    "middle",
                    metrics.small_font_size,
                )
            )
        return axis
