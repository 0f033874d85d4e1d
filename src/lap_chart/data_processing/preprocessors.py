"""Data preprocessing utilities for lap chart input tables."""

from typing import List

import pandas as pd
from loguru import logger


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Strip and upper-case column names.

    Args:
        df: Raw DataFrame

    Returns:
        DataFrame with normalised column names
    """
    normalized_df = df.copy()
    normalized_df.columns = [
        str(column).strip().upper().replace(" ", "_") for column in normalized_df.columns
    ]
    return normalized_df


def coerce_integer_columns(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Convert columns to integers, dropping rows that cannot be converted.

    Args:
        df: DataFrame to clean
        columns: Columns that must hold whole numbers

    Returns:
        Cleaned DataFrame with integer columns
    """
    cleaned_df = df.copy()
    for column in columns:
        cleaned_df[column] = pd.to_numeric(cleaned_df[column], errors="coerce")

    numeric = cleaned_df[columns].notna().all(axis=1)
    dropped = int((~numeric).sum())
    if dropped:
        logger.warning(f"Dropping {dropped} rows with non-numeric {', '.join(columns)}")

    whole = (cleaned_df[columns] % 1 == 0).all(axis=1)
    fractional = int((numeric & ~whole).sum())
    if fractional:
        logger.warning(f"Dropping {fractional} rows with fractional {', '.join(columns)}")

    cleaned_df = cleaned_df[numeric & whole].copy()
    for column in columns:
        cleaned_df[column] = cleaned_df[column].astype(int)
    return cleaned_df


def preprocess_positions(df: pd.DataFrame) -> pd.DataFrame:
    """Clean a long-format positions table.

    Driver names are stripped, lap and position become integers, and laps
    are shifted to start at 0 when the table has no grid row.

    Args:
        df: Positions DataFrame as returned by ``load_positions``

    Returns:
        Cleaned DataFrame sorted by driver and lap
    """
    logger.info("Preprocessing lap positions")

    integer_columns = ["LAP", "POSITION"]
    if "LAPS_DOWN" in df.columns:
        df = df.copy()
        df["LAPS_DOWN"] = df["LAPS_DOWN"].fillna(0)
        integer_columns.append("LAPS_DOWN")

    processed_df = coerce_integer_columns(df, integer_columns)
    processed_df["DRIVER"] = processed_df["DRIVER"].astype(str).str.strip()

    if not processed_df.empty:
        first_lap = processed_df["LAP"].min()
        if first_lap != 0:
            logger.info(f"Shifting laps so that lap {first_lap} is the first column")
            processed_df["LAP"] = processed_df["LAP"] - first_lap

    return processed_df.sort_values(["DRIVER", "LAP"], kind="stable").reset_index(drop=True)
