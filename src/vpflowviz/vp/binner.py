"""Assign hourly time bins and altitude bands to vp measurements.

Every measurement gets:

- ``datetime_bin``: its timestamp truncated to the start of the UTC hour
- ``height_bin``: ``"1"`` for ``low <= HGHT < high``, ``"2"`` for
  ``HGHT >= high``, undefined (None) otherwise, including undefined and
  negative heights

Measurements without a height band never join an aggregate group.
"""

import logging

import numpy as np
import pandas as pd

from vpflowviz.columns import TIME_BIN, HEIGHT_BIN, LOW_BAND, HIGH_BAND

__all__ = ['assign_time_bin', 'assign_height_bin', 'bin_measurements']

logger = logging.getLogger(__name__)


def assign_time_bin(timestamps: pd.Series) -> pd.Series:
    """Floor timestamps to the start of their UTC hour.

    Naive timestamps are taken to be UTC already.
    """
    if timestamps.dt.tz is None:
        timestamps = timestamps.dt.tz_localize("UTC")
    else:
        timestamps = timestamps.dt.tz_convert("UTC")
    return timestamps.dt.floor("h")


def assign_height_bin(heights: pd.Series, low_band_min: float = 200.0,
                      high_band_min: float = 2000.0) -> pd.Series:
    """Map heights (m) to altitude band labels.

    Parameters
    ----------
    heights : pd.Series
        Height above sea level in meters, may contain NaN.
    low_band_min : float
        Lower edge (inclusive) of band "1".
    high_band_min : float
        Lower edge (inclusive) of band "2"; upper edge (exclusive) of band "1".

    Returns
    -------
    pd.Series
        Object series of "1", "2" or None, aligned with ``heights``.

    Examples
    --------
    >>> assign_height_bin(pd.Series([199.0, 200.0, 1999.999, 2000.0])).tolist()
    [None, '1', '1', '2']
    """
    values = heights.to_numpy(dtype=np.float64, na_value=np.nan)
    # NaN compares False everywhere and stays None
    bands = np.full(values.shape, None, dtype=object)
    bands[(values >= low_band_min) & (values < high_band_min)] = LOW_BAND
    bands[values >= high_band_min] = HIGH_BAND
    return pd.Series(bands, index=heights.index, dtype=object)


def bin_measurements(df: pd.DataFrame, low_band_min: float = 200.0,
                     high_band_min: float = 2000.0) -> pd.DataFrame:
    """Return a copy of ``df`` with ``datetime_bin`` and ``height_bin`` added."""
    binned = df.copy()
    binned[TIME_BIN] = assign_time_bin(binned["datetime"])
    binned[HEIGHT_BIN] = assign_height_bin(binned["HGHT"], low_band_min, high_band_min)

    unbanded = int(binned[HEIGHT_BIN].isna().sum())
    if unbanded:
        logger.debug("%d measurements outside both altitude bands", unbanded)
    return binned
