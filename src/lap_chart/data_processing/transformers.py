"""Data transformation utilities that turn input tables into chart rows."""

from typing import Dict, List, Optional, Tuple

import pandas as pd
from loguru import logger

from ..models.driver import Colour, DualTone, Solid

# Used in order for drivers without a colour entry.
DEFAULT_PALETTE = (
    "#e41a1c",
    "#377eb8",
    "#4daf4a",
    "#984ea3",
    "#ff7f00",
    "#a65628",
    "#f781bf",
    "#999999",
    "#17becf",
    "#bcbd22",
)

DriverRow = Tuple[str, List[int]]


def positions_to_rows(df: pd.DataFrame) -> List[DriverRow]:
    """Group a long positions table into one position sequence per driver.

    Drivers are ordered by starting position, then by name. A driver who
    retired simply has a shorter sequence. A driver whose laps do not run
    from 0 without gaps is dropped, since a position sequence cannot leave
    a lap out.

    Args:
        df: Preprocessed positions DataFrame

    Returns:
        List of ``(driver, positions)`` tuples
    """
    logger.info("Transforming positions into driver rows")

    if df.empty:
        logger.warning("Positions table is empty, no drivers to chart")
        return []

    ordered = df.sort_values(["DRIVER", "LAP"], kind="stable")
    rows = []
    for driver, laps in ordered.groupby("DRIVER", sort=False):
        lap_numbers = [int(lap) for lap in laps["LAP"]]
        if lap_numbers != list(range(len(lap_numbers))):
            logger.warning(
                f"Dropping {driver}: laps {lap_numbers[0]}-{lap_numbers[-1]} "
                f"do not run from lap 0 without gaps"
            )
            continue
        positions = [int(position) for position in laps["POSITION"]]
        rows.append((str(driver), positions))

    rows.sort(key=lambda row: (row[1][0], row[0]))
    logger.info(f"Built position rows for {len(rows)} drivers")
    return rows


def lapped_counts_from_positions(df: pd.DataFrame) -> Dict[int, int]:
    """Count the drivers at least one lap down on each lap.

    Args:
        df: Preprocessed positions DataFrame with a ``LAPS_DOWN`` column

    Returns:
        Mapping of lap index to lapped count; empty when the table has no
        ``LAPS_DOWN`` column
    """
    if "LAPS_DOWN" not in df.columns or df.empty:
        return {}

    lapped = df[df["LAPS_DOWN"] > 0].groupby("LAP")["DRIVER"].nunique()
    counts = {int(lap): int(count) for lap, count in lapped.items()}
    logger.info(f"Derived lapped counts for {len(counts)} laps")
    return counts


def lapped_table_to_counts(df: pd.DataFrame) -> Dict[int, int]:
    """Convert a ``LAP``/``LAPPED`` table into a lapped-count mapping."""
    counts = {}
    for lap, lapped in zip(df["LAP"], df["LAPPED"]):
        if pd.isna(lap) or pd.isna(lapped):
            continue
        counts[int(lap)] = int(lapped)
    return counts


def assign_colours(
    drivers: List[str],
    colours_df: Optional[pd.DataFrame] = None,
) -> Dict[str, Colour]:
    """Pick a colour for every driver.

    Args:
        drivers: Driver names in chart order
        colours_df: Optional colours table with ``DRIVER``, ``COLOUR`` and
            optionally ``SECONDARY_COLOUR`` columns

    Returns:
        Mapping of driver name to colour
    """
    configured: Dict[str, Colour] = {}
    if colours_df is not None:
        has_secondary = "SECONDARY_COLOUR" in colours_df.columns
        for _, row in colours_df.iterrows():
            primary = str(row["COLOUR"]).strip()
            secondary = row["SECONDARY_COLOUR"] if has_secondary else None
            if secondary is not None and not pd.isna(secondary) and str(secondary).strip():
                configured[row["DRIVER"]] = DualTone(primary, str(secondary).strip())
            else:
                configured[row["DRIVER"]] = Solid(primary)

    colours: Dict[str, Colour] = {}
    fallback = 0
    for driver in drivers:
        if driver in configured:
            colours[driver] = configured[driver]
        else:
            colours[driver] = Solid(DEFAULT_PALETTE[fallback % len(DEFAULT_PALETTE)])
            fallback += 1

    if fallback and colours_df is not None:
        logger.warning(f"{fallback} drivers have no configured colour, using default palette")
    return colours
