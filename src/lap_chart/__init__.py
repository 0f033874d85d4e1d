"""Lap Chart package.

Renders race lap charts, the position of every driver on every lap, as
self-contained SVG documents.
"""

__version__ = "0.1.0"

# Make key modules easily accessible
from . import data_processing
from . import models
from . import visualization
from .visualization.lap_chart import LapChart
from .visualization.layout import LayoutMode

__all__ = [
    "LapChart",
    "LayoutMode",
    "data_processing",
    "models",
    "visualization",
]
