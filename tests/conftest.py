"""Root-level pytest fixtures for the vpflowviz test suite.

Provides shared configuration fixtures following the Pydantic-based
configuration layers, and a writer for vp CSV files on disk.
All tests must use these fixtures instead of creating raw dict configs.
"""

import logging

import pandas as pd
import pytest

from vpflowviz.columns import VP_COLUMNS
from vpflowviz.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults.

    Use this as the base for all test configs. Override specific values
    using make_config or by creating custom UserConfig instances.
    """
    return ParamConfig()


@pytest.fixture
def data_dirs(tmp_path):
    """Raw (created) and processed (not yet created) data directories."""
    raw = tmp_path / "raw"
    raw.mkdir()
    return {"raw": raw, "processed": tmp_path / "processed"}


@pytest.fixture
def make_config(param_config, data_dirs):
    """Factory fixture for creating custom test configs.

    Project name and both data directories are filled in; any
    UserConfig-compatible kwarg overrides them or the defaults.

    Examples
    --------
    >>> def test_custom_density(make_config):
    ...     config = make_config(min_density=5)
    ...     assert config.filter.min_density == 5.0
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        settings = {
            "project_name": "test-project",
            "raw_data_dir": str(data_dirs["raw"]),
            "processed_data_dir": str(data_dirs["processed"]),
        }
        settings.update(user_overrides)
        return resolve_config(param_config, UserConfig(**settings), None)

    return _make


@pytest.fixture
def internal_config(make_config):
    """Fully validated runtime configuration (no overrides beyond paths).

    Use this when tests don't care about specific config values and just
    need a valid InternalConfig to pass to constructors.
    """
    return make_config()


# =============================================================================
# vp File Fixtures
# =============================================================================

def vp_row(radar_id="bejab", datetime="2016-09-01T00:05:00Z", HGHT=300.0,
           dens=20.0, dd=180.0, u=1.0, v=2.0, ff=3.0, exclusion_reason=""):
    """One vp measurement as a dict, with plausible defaults."""
    return {
        "radar_id": radar_id,
        "datetime": datetime,
        "HGHT": HGHT,
        "dens": dens,
        "dd": dd,
        "u": u,
        "v": v,
        "ff": ff,
        "exclusion_reason": exclusion_reason,
    }


@pytest.fixture
def make_vp_row():
    return vp_row


@pytest.fixture
def write_vp(data_dirs):
    """Factory fixture writing vp rows to ``<raw>/<name>`` as CSV.

    ``columns`` selects (and orders) the written columns, so tests can
    produce files that lack some of the schema.
    """
    def _write(name, rows, columns=None, directory=None):
        path = (directory or data_dirs["raw"]) / name
        frame = pd.DataFrame(rows, columns=VP_COLUMNS)
        if columns is not None:
            frame = frame[columns]
        frame.to_csv(path, index=False)
        return path

    return _write


@pytest.fixture
def measurements():
    """Factory for in-memory loaded measurements (UTC datetime column)."""
    def _make(rows):
        df = pd.DataFrame(rows, columns=VP_COLUMNS)
        df["datetime"] = pd.to_datetime(df["datetime"], utc=True)
        for col in ("HGHT", "dens", "dd", "u", "v", "ff"):
            df[col] = df[col].astype("float64")
        df["exclusion_reason"] = df["exclusion_reason"].fillna("").astype(str)
        return df

    return _make


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture
def restore_root_logging():
    """Remove and close handlers installed by FlowvizPipeline._setup_logging()."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
