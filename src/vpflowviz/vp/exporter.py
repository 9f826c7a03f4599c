"""Format aggregates for the flow visualization and write them as CSV.

Output layout::

    radar_id,interval_start_time,altitude_band,avg_u_speed,avg_v_speed,avg_dens
    bejab,2016-09-01 00:00:00+00,1,-2.5,4.1,103.2

``interval_start_time`` is the hour bin rendered as text with a fixed
``+00`` UTC marker appended. Undefined numbers are written as empty fields
and no index column is written.
"""

import logging
from pathlib import Path

import pandas as pd

from vpflowviz.columns import OUTPUT_COLUMNS, OUTPUT_RENAMES, TIME_BIN

__all__ = ['format_flowviz', 'flowviz_output_path', 'write_flowviz']

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_flowviz(df: pd.DataFrame, utc_suffix: str = "+00") -> pd.DataFrame:
    """Rename, stringify and select the six output columns.

    Parameters
    ----------
    df : pd.DataFrame
        Aggregates from aggregate_measurements() / drop_empty_aggregates().
    utc_suffix : str
        Literal appended to every interval start time.

    Returns
    -------
    pd.DataFrame
        New frame with exactly ``OUTPUT_COLUMNS``.
    """
    out = df.copy()
    times = out[TIME_BIN]
    if times.dt.tz is not None:
        times = times.dt.tz_convert("UTC")
    out[TIME_BIN] = times.dt.strftime(TIME_FORMAT) + utc_suffix
    out = out.rename(columns=OUTPUT_RENAMES)
    return out[OUTPUT_COLUMNS].reset_index(drop=True)


def flowviz_output_path(processed_data_dir: Path | str, project_name: str,
                        filename_pattern: str = "{project_name}_flowviz.csv") -> Path:
    """Return ``<processed_data_dir>/<project_name>_flowviz.csv``."""
    return Path(processed_data_dir) / filename_pattern.format(project_name=project_name)


def write_flowviz(df: pd.DataFrame, filepath: Path | str) -> Path:
    """Write formatted output to CSV.

    The same frame always produces the same bytes: fixed column order,
    ``\\n`` line endings, empty fields for undefined values, no index.

    Parameters
    ----------
    df : pd.DataFrame
        Output of format_flowviz().
    filepath : Path or str
        Destination file; overwritten if present.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    OSError
        If the destination cannot be written. Not caught here: a run
        without its output file has failed.
    """
    filepath = Path(filepath)
    try:
        df.to_csv(filepath, index=False, na_rep="", lineterminator="\n")
    except OSError:
        logger.error("Cannot write flowviz output: %s", filepath)
        raise

    logger.info("Exported %d rows to: %s", len(df), filepath)
    return filepath
