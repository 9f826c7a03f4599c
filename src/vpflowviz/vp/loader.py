"""Read per-radar vp CSV files into one measurement DataFrame.

This module handles discovering vertical profile (vp) files in the raw data
directory and parsing them with a fixed column schema. All files are
concatenated into one DataFrame keeping the column union, so a column that
one radar's file lacks is undefined (NaN) for that radar's rows.

Key capabilities:
- Non-recursive discovery by filename marker and extension
- Fixed schema: numeric columns as float64, ``datetime`` as UTC timestamps
- Fails loudly on unreadable or malformed files (no partial load)
"""

from pathlib import Path
import logging

import numpy as np
import pandas as pd

from vpflowviz.columns import VP_COLUMNS, VP_NUMERIC_COLUMNS
from vpflowviz.contracts import InputParseError

__all__ = ['VpDataLoader', 'empty_measurements']

logger = logging.getLogger(__name__)

# Columns that identify a measurement; a file without them is not vp data
IDENTITY_COLUMNS = ("radar_id", "datetime")


def empty_measurements() -> pd.DataFrame:
    """Return a zero-row measurement frame with the full schema."""
    frame = pd.DataFrame({
        "radar_id": pd.Series(dtype=object),
        "datetime": pd.Series(dtype="datetime64[ns, UTC]"),
        **{col: pd.Series(dtype=np.float64) for col in VP_NUMERIC_COLUMNS},
        "exclusion_reason": pd.Series(dtype=object),
    })
    return frame[VP_COLUMNS]


class VpDataLoader:
    """Discover and parse vp CSV files.

    Configuration
    =============
    Reads from ``InternalConfig``:

    - `loader.filename_marker` : str, substring every vp file name contains
    - `loader.extension` : str, file extension (default ".csv")
    - `paths.raw_data_dir` : str, default directory for load()

    Notes
    -----
    - Discovery is non-recursive and sorted by file name, so the row order
      of the loaded frame is reproducible.
    - Empty cells and ``NA`` tokens are read as undefined. A missing
      ``exclusion_reason`` is read as the empty string (not excluded).

    Examples
    --------
    >>> loader = VpDataLoader(config)
    >>> df = loader.load()
    >>> df.columns.tolist()[:3]
    ['radar_id', 'datetime', 'HGHT']
    """

    def __init__(self, config):
        self.config = config
        self.filename_marker = config.loader.filename_marker
        self.extension = config.loader.extension
        self.raw_data_dir = config.paths.raw_data_dir

    def discover(self, directory: Path | str | None = None) -> list[Path]:
        """List vp files in ``directory`` (non-recursive).

        Parameters
        ----------
        directory : Path or str, optional
            Directory to scan. Defaults to ``paths.raw_data_dir``.

        Returns
        -------
        list of Path
            Matching files sorted by name. Empty if nothing matches.

        Raises
        ------
        InputParseError
            If the directory does not exist.
        """
        directory = Path(directory if directory is not None else self.raw_data_dir)
        if not directory.is_dir():
            raise InputParseError(directory, "raw data directory does not exist")

        files = sorted(
            p for p in directory.iterdir()
            if p.is_file()
            and self.filename_marker in p.name
            and p.name.endswith(self.extension)
        )
        logger.debug("Discovered %d vp files in %s", len(files), directory)
        return files

    def read(self, filepath: Path | str) -> pd.DataFrame:
        """Parse one vp file with the fixed column schema.

        Parameters
        ----------
        filepath : Path or str
            Path to a vp CSV file.

        Returns
        -------
        pd.DataFrame
            Parsed rows. Schema columns absent from the file are absent
            from the frame as well; the union is built in load().

        Raises
        ------
        InputParseError
            If the file cannot be read, lacks ``radar_id``/``datetime``,
            holds non-numeric values in a numeric column, or holds
            timestamps that cannot be parsed.
        """
        filepath = Path(filepath)
        try:
            df = pd.read_csv(filepath, dtype=str)
        except (OSError, ValueError) as e:
            raise InputParseError(filepath, str(e)) from e

        missing = [col for col in IDENTITY_COLUMNS if col not in df.columns]
        if missing:
            raise InputParseError(filepath, f"missing required columns {missing}")

        for col in VP_NUMERIC_COLUMNS:
            if col in df.columns:
                try:
                    df[col] = pd.to_numeric(df[col], errors="raise").astype(np.float64)
                except (ValueError, TypeError) as e:
                    raise InputParseError(filepath, f"column '{col}': {e}") from e

        try:
            df["datetime"] = pd.to_datetime(df["datetime"], utc=True, format="ISO8601")
        except (ValueError, TypeError) as e:
            raise InputParseError(filepath, f"column 'datetime': {e}") from e

        logger.debug("Read %d rows from %s", len(df), filepath.name)
        return df

    def load_files(self, files: list[Path]) -> pd.DataFrame:
        """Parse and concatenate the given vp files.

        Parameters
        ----------
        files : list of Path
            Files to read, usually from discover().

        Returns
        -------
        pd.DataFrame
            All measurements, schema columns first, then any extra columns
            found in the files. Zero rows (with the full schema) when
            ``files`` is empty.
        """
        if not files:
            logger.warning(
                "No vp files matching '*%s*%s' found; continuing with empty input",
                self.filename_marker, self.extension,
            )
            return empty_measurements()

        frames = [self.read(path) for path in files]
        df = pd.concat(frames, ignore_index=True, sort=False)

        for col in VP_COLUMNS:
            if col not in df.columns:
                logger.debug("Column '%s' absent from all vp files", col)
                df[col] = np.float64("nan") if col in VP_NUMERIC_COLUMNS else None

        df["exclusion_reason"] = df["exclusion_reason"].fillna("").astype(str)

        extras = [col for col in df.columns if col not in VP_COLUMNS]
        df = df[VP_COLUMNS + extras]

        logger.info("Loaded %d measurements from %d vp files", len(df), len(files))
        return df

    def load(self, directory: Path | str | None = None) -> pd.DataFrame:
        """Discover and read all vp files in one call (convenience method).

        Parameters
        ----------
        directory : Path or str, optional
            Directory to scan. Defaults to ``paths.raw_data_dir``.
        """
        return self.load_files(self.discover(directory))
