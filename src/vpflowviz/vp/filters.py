"""Row filters applied before and after aggregation."""

import logging

import pandas as pd

from vpflowviz.columns import STAT_COLUMNS

__all__ = ['filter_measurements', 'drop_empty_aggregates']

logger = logging.getLogger(__name__)


def filter_measurements(df: pd.DataFrame, min_density: float = 10.0) -> pd.DataFrame:
    """Keep measurements with ``dens >= min_density`` and no exclusion reason.

    Undefined densities never pass (NaN comparisons are False). Row order
    is preserved and the input frame is left untouched.

    Parameters
    ----------
    df : pd.DataFrame
        Binned measurements.
    min_density : float
        Minimum bird density, inclusive.

    Returns
    -------
    pd.DataFrame
        Filtered copy.
    """
    keep = (df["dens"] >= min_density) & (df["exclusion_reason"] == "")
    kept = df.loc[keep].copy()
    logger.info(
        "Measurement filter: kept %d of %d rows (dens >= %g, not excluded)",
        len(kept), len(df), min_density,
    )
    return kept


def drop_empty_aggregates(df: pd.DataFrame) -> pd.DataFrame:
    """Drop aggregate rows where every statistic is undefined."""
    keep = df[STAT_COLUMNS].notna().any(axis=1)
    kept = df.loc[keep].reset_index(drop=True)
    dropped = len(df) - len(kept)
    if dropped:
        logger.info("Dropped %d aggregates without any defined statistic", dropped)
    return kept
