"""Tests for flowviz formatting and CSV writing."""

import numpy as np
import pandas as pd
import pytest

pytestmark = pytest.mark.unit

from vpflowviz.columns import AGGREGATE_COLUMNS, OUTPUT_COLUMNS
from vpflowviz.contracts import assert_flowviz_output
from vpflowviz.vp.exporter import flowviz_output_path, format_flowviz, write_flowviz


@pytest.fixture
def aggregates():
    df = pd.DataFrame(
        [
            ["bejab", "2016-09-01T00:00:00Z", "1", 2.0, 3.0, 30.0, 10.0, 4.0],
            ["nldbl", "2016-09-01T06:00:00Z", "2", -1.5, np.nan, 12.5, np.nan, np.nan],
        ],
        columns=AGGREGATE_COLUMNS,
    )
    df["datetime_bin"] = pd.to_datetime(df["datetime_bin"], utc=True)
    return df


class TestFormatFlowviz:

    def test_columns_and_order(self, aggregates):
        out = format_flowviz(aggregates)

        assert list(out.columns) == OUTPUT_COLUMNS
        assert_flowviz_output(out)

    def test_interval_start_time_text(self, aggregates):
        out = format_flowviz(aggregates)

        assert out["interval_start_time"].tolist() == [
            "2016-09-01 00:00:00+00",
            "2016-09-01 06:00:00+00",
        ]

    def test_midnight_keeps_time_of_day(self, aggregates):
        out = format_flowviz(aggregates.iloc[[0]])

        assert out.loc[0, "interval_start_time"].endswith("00:00:00+00")

    def test_custom_utc_suffix(self, aggregates):
        out = format_flowviz(aggregates, utc_suffix="Z")

        assert out.loc[0, "interval_start_time"] == "2016-09-01 00:00:00Z"

    def test_values_are_renamed_not_changed(self, aggregates):
        out = format_flowviz(aggregates)

        assert out["avg_u_speed"].tolist() == [2.0, -1.5]
        assert out["avg_dens"].tolist() == [30.0, 12.5]
        assert out["altitude_band"].tolist() == ["1", "2"]

    def test_direction_and_speed_are_not_exported(self, aggregates):
        out = format_flowviz(aggregates)

        assert "avg_dd" not in out.columns
        assert "avg_ff" not in out.columns

    def test_input_is_not_modified(self, aggregates):
        before = aggregates.copy()

        format_flowviz(aggregates)

        pd.testing.assert_frame_equal(aggregates, before)

    def test_empty_aggregates(self, aggregates):
        out = format_flowviz(aggregates.iloc[0:0])

        assert len(out) == 0
        assert list(out.columns) == OUTPUT_COLUMNS


class TestWriteFlowviz:

    def test_writes_header_and_rows(self, aggregates, tmp_path):
        path = write_flowviz(format_flowviz(aggregates), tmp_path / "demo_flowviz.csv")

        lines = path.read_text().splitlines()
        assert lines[0] == "radar_id,interval_start_time,altitude_band,avg_u_speed,avg_v_speed,avg_dens"
        assert lines[1].startswith("bejab,2016-09-01 00:00:00+00,1,")
        assert len(lines) == 3

    def test_undefined_values_are_empty_fields(self, aggregates, tmp_path):
        path = write_flowviz(format_flowviz(aggregates), tmp_path / "out.csv")

        nldbl = path.read_text().splitlines()[2].split(",")
        assert nldbl[4] == ""
        assert nldbl[5] != ""

    def test_no_index_and_unix_line_endings(self, aggregates, tmp_path):
        path = write_flowviz(format_flowviz(aggregates), tmp_path / "out.csv")

        raw = path.read_bytes()
        assert b"\r\n" not in raw
        assert raw.startswith(b"radar_id,")

    def test_same_input_same_bytes(self, aggregates, tmp_path):
        first = write_flowviz(format_flowviz(aggregates), tmp_path / "a.csv")
        second = write_flowviz(format_flowviz(aggregates), tmp_path / "b.csv")

        assert first.read_bytes() == second.read_bytes()

    def test_round_trip_values(self, aggregates, tmp_path):
        path = write_flowviz(format_flowviz(aggregates), tmp_path / "out.csv")

        back = pd.read_csv(path, dtype={"altitude_band": str})
        assert back["avg_u_speed"].tolist() == [2.0, -1.5]
        assert np.isnan(back.loc[1, "avg_v_speed"])

    def test_header_only_for_empty_output(self, aggregates, tmp_path):
        path = write_flowviz(format_flowviz(aggregates.iloc[0:0]), tmp_path / "out.csv")

        assert path.read_text() == ",".join(OUTPUT_COLUMNS) + "\n"

    def test_unwritable_destination_raises(self, aggregates, tmp_path):
        with pytest.raises(OSError):
            write_flowviz(format_flowviz(aggregates), tmp_path / "missing" / "out.csv")


def test_flowviz_output_path(tmp_path):
    assert flowviz_output_path(tmp_path, "bird-migration-2016") == tmp_path / "bird-migration-2016_flowviz.csv"
