from pathlib import Path

import pytest

pytestmark = pytest.mark.unit

from vpflowviz.setup_directories import get_output_path, setup_output_directories


def test_setup_output_directories_creates_all(tmp_path):
    dirs = setup_output_directories(tmp_path / "processed")

    assert set(dirs.keys()) == {"base", "logs"}

    for path in dirs.values():
        assert isinstance(path, Path)
        assert path.is_dir()


def test_setup_output_directories_is_idempotent(tmp_path):
    dirs1 = setup_output_directories(tmp_path)
    dirs2 = setup_output_directories(tmp_path)

    assert dirs1 == dirs2


def test_logs_live_under_base(tmp_path):
    dirs = setup_output_directories(tmp_path)

    assert dirs["logs"] == dirs["base"] / "logs"


def test_get_output_path(tmp_path):
    dirs = setup_output_directories(tmp_path)

    assert get_output_path(dirs, "demo_flowviz.csv") == dirs["base"] / "demo_flowviz.csv"
