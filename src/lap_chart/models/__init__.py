"""Data models for lap chart rendering."""

from .driver import *

__all__ = [
    "Colour",
    "Driver",
    "DualTone",
    "Solid",
    "parse_colour",
]
