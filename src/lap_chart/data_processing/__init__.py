"""Data processing utilities for lap chart input tables."""

from .loaders import *
from .preprocessors import *
from .transformers import *

__all__ = [
    "assign_colours",
    "lapped_counts_from_positions",
    "lapped_table_to_counts",
    "load_driver_colours",
    "load_lapped_counts",
    "load_positions",
    "positions_to_rows",
    "preprocess_positions",
]
