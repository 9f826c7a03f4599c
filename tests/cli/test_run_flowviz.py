"""Tests for the vpflowviz console entry point."""

import json

import pytest

pytestmark = pytest.mark.integration

from vpflowviz.cli.run_flowviz import build_parser, main, run_flowviz_pipeline
from vpflowviz.contracts import InputParseError


@pytest.fixture
def settings(tmp_path, data_dirs):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "PROJECT_NAME": "cli-demo",
        "RADARS": "bejab",
        "RAW_DATA_DIR": str(data_dirs["raw"]),
        "PROCESSED_DATA_DIR": str(data_dirs["processed"]),
    }))
    return path


@pytest.fixture
def one_file(write_vp, make_vp_row):
    write_vp("bejab_vp_1.csv", [make_vp_row(), make_vp_row(HGHT=2500.0)])


def test_parser_options():
    args = build_parser().parse_args(["settings.json", "--processed-data-dir", "out", "-v"])

    assert args.settings == "settings.json"
    assert args.processed_data_dir == "out"
    assert args.verbose is True
    assert args.project_name is None


def test_run_flowviz_pipeline_returns_summary(settings, one_file, data_dirs, restore_root_logging):
    summary = run_flowviz_pipeline(settings, configure_logging=False)

    assert summary.output_rows == 2
    assert (data_dirs["processed"] / "cli-demo_flowviz.csv").exists()
    assert summary.run_id is not None


def test_verbose_prints_config(settings, one_file, capsys, restore_root_logging):
    run_flowviz_pipeline(settings, verbose=True, configure_logging=False)

    out = capsys.readouterr().out
    assert "Full Internal Configuration" in out
    assert '"level": "DEBUG"' in out


def test_main_success(settings, one_file, data_dirs, capsys, restore_root_logging):
    assert main([str(settings)]) == 0

    assert (data_dirs["processed"] / "cli-demo_flowviz.csv").exists()
    assert "Wrote 2 rows" in capsys.readouterr().out


def test_main_cli_overrides(settings, one_file, tmp_path, restore_root_logging):
    out_dir = tmp_path / "override"

    assert main([str(settings), "--project-name", "other", "--processed-data-dir", str(out_dir)]) == 0

    assert (out_dir / "other_flowviz.csv").exists()
    assert (out_dir / "logs" / "flowviz_other.log").exists()


def test_main_missing_settings_fails(tmp_path, restore_root_logging):
    assert main([str(tmp_path / "absent.json")]) == 1


def test_main_bad_vp_file_fails(settings, write_vp, make_vp_row, data_dirs, restore_root_logging):
    write_vp("bejab_vp_1.csv", [make_vp_row(u="fast")])

    assert main([str(settings)]) == 1
    assert not (data_dirs["processed"] / "cli-demo_flowviz.csv").exists()


def test_run_flowviz_pipeline_propagates_parse_errors(settings, write_vp, make_vp_row, restore_root_logging):
    write_vp("bejab_vp_1.csv", [make_vp_row(datetime="not a time")])

    with pytest.raises(InputParseError):
        run_flowviz_pipeline(settings, configure_logging=False)
