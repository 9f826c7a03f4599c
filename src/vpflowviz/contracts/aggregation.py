"""Aggregation and output stage contracts.

Enforces one row per (radar, time bin, altitude band), defined group keys,
and the exact output column layout.
"""

import pandas as pd

from vpflowviz.columns import AGGREGATE_COLUMNS, GROUP_KEYS, OUTPUT_COLUMNS, STAT_COLUMNS
from vpflowviz.contracts.base import require


def assert_aggregated(df: pd.DataFrame) -> None:
    """Enforce aggregation stage contract.

    Called after aggregate_measurements(). We do NOT validate the numbers -
    that is the aggregator's responsibility. We only check structure.

    Raises
    ------
    ContractViolation
        If columns are missing, a group key is undefined, or a group
        appears more than once.
    """
    for col in AGGREGATE_COLUMNS:
        require(
            col in df.columns,
            f"Aggregation contract violated: missing column '{col}'"
        )

    require(
        not df[GROUP_KEYS].isna().any().any(),
        "Aggregation contract violated: undefined group key"
    )
    require(
        not df.duplicated(GROUP_KEYS).any(),
        "Aggregation contract violated: duplicate (radar_id, datetime_bin, height_bin) groups"
    )


def assert_no_empty_aggregates(df: pd.DataFrame) -> None:
    """Every kept aggregate row has at least one defined statistic."""
    if len(df) > 0:
        require(
            bool(df[STAT_COLUMNS].notna().any(axis=1).all()),
            "Post-aggregation contract violated: row with every statistic undefined"
        )


def assert_flowviz_output(df: pd.DataFrame) -> None:
    """Enforce output contract: exact columns, order and unique non-empty keys."""
    require(
        list(df.columns) == OUTPUT_COLUMNS,
        f"Output contract violated: columns {list(df.columns)}, expected {OUTPUT_COLUMNS}"
    )

    keys = ["radar_id", "interval_start_time", "altitude_band"]
    if len(df) > 0:
        require(
            bool(df[keys].notna().all().all()) and bool((df[keys].astype(str) != "").all().all()),
            "Output contract violated: empty radar_id/interval_start_time/altitude_band"
        )
    require(
        not df.duplicated(keys).any(),
        "Output contract violated: duplicate output keys"
    )
