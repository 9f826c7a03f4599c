"""Load and binning stage contracts.

Enforces the guarantee that the loader produced the fixed measurement
schema and that the binner only emitted known time and height bins.
"""

import pandas as pd
from pandas.api import types as ptypes

from vpflowviz.columns import VP_COLUMNS, TIME_BIN, HEIGHT_BIN, LOW_BAND, HIGH_BAND
from vpflowviz.contracts.base import require


def assert_loaded(df: pd.DataFrame) -> None:
    """Enforce load stage contract.

    Called after loader.load(). Verifies every measurement column exists
    and that ``datetime`` is a timezone-aware UTC column.

    Parameters
    ----------
    df : pd.DataFrame
        Output from VpDataLoader.load()

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        isinstance(df, pd.DataFrame),
        f"Load contract violated: output is {type(df)}, expected DataFrame"
    )

    for col in VP_COLUMNS:
        require(
            col in df.columns,
            f"Load contract violated: missing required column '{col}'"
        )

    require(
        isinstance(df["datetime"].dtype, pd.DatetimeTZDtype),
        f"Load contract violated: 'datetime' dtype is {df['datetime'].dtype}, expected tz-aware"
    )
    require(
        not df["exclusion_reason"].isna().any(),
        "Load contract violated: 'exclusion_reason' contains missing values"
    )


def assert_binned(df: pd.DataFrame) -> None:
    """Enforce binning stage contract.

    Time bins must sit exactly on the hour and height bins must be one of
    the two altitude bands or undefined.
    """
    for col in (TIME_BIN, HEIGHT_BIN):
        require(
            col in df.columns,
            f"Binning contract violated: missing '{col}'"
        )

    require(
        ptypes.is_datetime64_any_dtype(df[TIME_BIN]),
        f"Binning contract violated: '{TIME_BIN}' dtype is {df[TIME_BIN].dtype}"
    )

    bins = df[TIME_BIN].dropna()
    require(
        bool((bins == bins.dt.floor("h")).all()),
        f"Binning contract violated: '{TIME_BIN}' values not truncated to the hour"
    )

    bands = set(df[HEIGHT_BIN].dropna().unique())
    require(
        bands <= {LOW_BAND, HIGH_BAND},
        f"Binning contract violated: unexpected height bins {sorted(bands - {LOW_BAND, HIGH_BAND})}"
    )
