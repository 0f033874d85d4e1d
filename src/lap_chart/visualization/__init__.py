"""SVG lap chart rendering."""

from .lap_chart import *
from .layout import *
from .svg import *

__all__ = [
    "GOLDEN_RATIO",
    "LapChart",
    "LayoutMetrics",
    "LayoutMode",
    "SvgElement",
    "compute_layout",
    "format_number",
]
