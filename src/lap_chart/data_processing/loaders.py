"""Data loading utilities for lap chart input tables."""

from pathlib import Path
from typing import Iterable, Union

import pandas as pd
from loguru import logger

from .preprocessors import normalize_columns

PathLike = Union[str, Path]

POSITION_COLUMNS = ("DRIVER", "LAP", "POSITION")
COLOUR_COLUMNS = ("DRIVER", "COLOUR")
LAPPED_COLUMNS = ("LAP", "LAPPED")


def _read_table(path: PathLike, required: Iterable[str], kind: str) -> pd.DataFrame:
    """Read a comma or semicolon separated file and check its columns."""
    table_path = Path(path)
    if not table_path.exists():
        logger.error(f"{kind} file not found: {table_path}")
        raise FileNotFoundError(f"{kind} file not found: {table_path}")

    # sep=None lets pandas sniff ',' or ';' (timing exports use both)
    df = pd.read_csv(table_path, sep=None, engine="python")
    df = normalize_columns(df)

    missing = [column for column in required if column not in df.columns]
    if missing:
        logger.error(f"{kind} file {table_path.name} is missing columns: {missing}")
        raise ValueError(
            f"{kind} file {table_path.name} is missing required columns: {', '.join(missing)}"
        )

    logger.info(f"Loaded {len(df)} {kind.lower()} records from {table_path.name}")
    return df


def load_positions(path: PathLike) -> pd.DataFrame:
    """Load per-lap positions in long format.

    Args:
        path: CSV file with ``DRIVER``, ``LAP`` and ``POSITION`` columns and
            an optional ``LAPS_DOWN`` column

    Returns:
        DataFrame with one row per driver and lap

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a required column is missing
    """
    return _read_table(path, POSITION_COLUMNS, "Positions")


def load_driver_colours(path: PathLike) -> pd.DataFrame:
    """Load driver display colours.

    Args:
        path: CSV file with ``DRIVER`` and ``COLOUR`` columns and an optional
            ``SECONDARY_COLOUR`` column

    Returns:
        DataFrame with one row per driver
    """
    df = _read_table(path, COLOUR_COLUMNS, "Colours")
    df["DRIVER"] = df["DRIVER"].astype(str).str.strip()
    return df


def load_lapped_counts(path: PathLike) -> pd.DataFrame:
    """Load the number of lapped drivers per lap.

    Args:
        path: CSV file with ``LAP`` and ``LAPPED`` columns

    Returns:
        DataFrame with one row per lap
    """
    return _read_table(path, LAPPED_COLUMNS, "Lapped")
