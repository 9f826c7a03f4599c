"""Aggregate filtered vp measurements per radar, hour and altitude band.

Groups are keyed by ``(radar_id, datetime_bin, height_bin)``. Each group is
reduced in a single pass over the rows into:

- ``avg_u``, ``avg_v``, ``avg_dens``, ``avg_ff``: arithmetic means over the
  defined values of the group (NaN when none is defined)
- ``avg_dd``: circular mean of the defined wind directions (NaN when none is
  defined or the directions cancel out)

Rows with an undefined key part (most often a height outside both altitude
bands) belong to no group and are left out of the output.
"""

import logging
import math
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from vpflowviz.columns import AGGREGATE_COLUMNS, GROUP_KEYS, STAT_COLUMNS, STAT_SOURCES, TIME_BIN, HEIGHT_BIN
from vpflowviz.vp.circular import CircularAccumulator

__all__ = ['GroupAccumulator', 'aggregate_measurements']

logger = logging.getLogger(__name__)

# Statistics reduced with an arithmetic mean: output column -> source column
_LINEAR_STATS = {name: source for name, source in STAT_SOURCES.items() if name != "avg_dd"}


@dataclass
class _MeanAccumulator:
    total: float = 0.0
    count: int = 0

    def add(self, value: float) -> None:
        if not math.isnan(value):
            self.total += value
            self.count += 1

    def mean(self) -> float:
        return self.total / self.count if self.count else math.nan


@dataclass
class GroupAccumulator:
    """Running sums for one (radar, time bin, altitude band) group."""
    means: dict = field(default_factory=lambda: {name: _MeanAccumulator() for name in _LINEAR_STATS})
    direction: CircularAccumulator = field(default_factory=CircularAccumulator)
    rows: int = 0

    def add(self, values: dict) -> None:
        for name, source in _LINEAR_STATS.items():
            self.means[name].add(values[source])
        self.direction.add(values["dd"])
        self.rows += 1

    def result(self) -> dict:
        stats = {name: acc.mean() for name, acc in self.means.items()}
        stats["avg_dd"] = self.direction.mean()
        return stats


def _is_undefined(value) -> bool:
    if isinstance(value, str):
        return value == ""
    return value is None or bool(pd.isna(value))


def aggregate_measurements(df: pd.DataFrame) -> pd.DataFrame:
    """Reduce binned, filtered measurements to one row per group.

    Parameters
    ----------
    df : pd.DataFrame
        Output of filter_measurements(): measurement columns plus
        ``datetime_bin`` and ``height_bin``.

    Returns
    -------
    pd.DataFrame
        Columns ``radar_id, datetime_bin, height_bin, avg_u, avg_v,
        avg_dens, avg_dd, avg_ff``, sorted by group key, with a fresh
        RangeIndex.

    Examples
    --------
    >>> agg = aggregate_measurements(binned_and_filtered)
    >>> agg.loc[0, ["radar_id", "height_bin", "avg_dens"]].tolist()
    ['bejab', '1', 42.5]
    """
    groups: dict[tuple, GroupAccumulator] = {}
    skipped = 0

    numeric = {
        col: df[col].to_numpy(dtype=np.float64, na_value=np.nan)
        for col in STAT_SOURCES.values()
    }
    radar_ids = df["radar_id"].to_numpy(dtype=object)
    time_bins = df[TIME_BIN].to_numpy(dtype=object)
    height_bins = df[HEIGHT_BIN].to_numpy(dtype=object)

    for i in range(len(df)):
        key = (radar_ids[i], time_bins[i], height_bins[i])
        if any(_is_undefined(part) for part in key):
            skipped += 1
            continue

        acc = groups.get(key)
        if acc is None:
            acc = groups[key] = GroupAccumulator()
        acc.add({col: numeric[col][i] for col in numeric})

    if skipped:
        logger.debug("%d rows without a complete group key left out", skipped)

    records = [
        {"radar_id": radar_id, TIME_BIN: time_bin, HEIGHT_BIN: height_bin, **acc.result()}
        for (radar_id, time_bin, height_bin), acc in groups.items()
    ]

    if records:
        result = pd.DataFrame.from_records(records)
        result[TIME_BIN] = pd.to_datetime(result[TIME_BIN], utc=True)
        result = result.sort_values(GROUP_KEYS, kind="mergesort").reset_index(drop=True)
    else:
        result = pd.DataFrame({
            "radar_id": pd.Series(dtype=object),
            TIME_BIN: pd.Series(dtype="datetime64[ns, UTC]"),
            HEIGHT_BIN: pd.Series(dtype=object),
        })
        for name in STAT_COLUMNS:
            result[name] = pd.Series(dtype=np.float64)

    for name in STAT_COLUMNS:
        result[name] = result[name].astype(np.float64)

    logger.info("Aggregated %d measurements into %d groups", len(df) - skipped, len(result))
    return result[AGGREGATE_COLUMNS]
