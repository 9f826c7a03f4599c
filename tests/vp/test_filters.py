"""Tests for the pre-aggregation and post-aggregation row filters."""

import numpy as np
import pandas as pd
import pytest

pytestmark = pytest.mark.unit

from vpflowviz.columns import AGGREGATE_COLUMNS
from vpflowviz.vp.filters import drop_empty_aggregates, filter_measurements


class TestFilterMeasurements:

    def test_density_threshold_is_inclusive(self, measurements, make_vp_row):
        df = measurements([
            make_vp_row(dens=10.0),
            make_vp_row(dens=9.999),
            make_vp_row(dens=250.0),
        ])

        kept = filter_measurements(df, min_density=10.0)

        assert kept["dens"].tolist() == [10.0, 250.0]

    def test_undefined_density_is_dropped(self, measurements, make_vp_row):
        df = measurements([make_vp_row(dens=np.nan), make_vp_row(dens=20.0)])

        assert len(filter_measurements(df)) == 1

    def test_excluded_rows_are_dropped(self, measurements, make_vp_row):
        df = measurements([
            make_vp_row(exclusion_reason="rain"),
            make_vp_row(exclusion_reason=""),
        ])

        kept = filter_measurements(df)

        assert kept["exclusion_reason"].tolist() == [""]

    def test_preserves_order_and_input(self, measurements, make_vp_row):
        df = measurements([make_vp_row(HGHT=h, dens=d) for h, d in [(900.0, 50.0), (300.0, 1.0), (500.0, 30.0)]])
        before = df.copy()

        kept = filter_measurements(df)

        assert kept["HGHT"].tolist() == [900.0, 500.0]
        pd.testing.assert_frame_equal(df, before)

    def test_configured_threshold(self, measurements, make_vp_row):
        df = measurements([make_vp_row(dens=3.0), make_vp_row(dens=0.5)])

        assert len(filter_measurements(df, min_density=1.0)) == 1
        assert len(filter_measurements(df, min_density=0.0)) == 2


class TestDropEmptyAggregates:

    def _aggregates(self, rows):
        df = pd.DataFrame(rows, columns=AGGREGATE_COLUMNS)
        df["datetime_bin"] = pd.to_datetime(df["datetime_bin"], utc=True)
        return df

    def test_drops_rows_with_every_statistic_undefined(self):
        df = self._aggregates([
            ["bejab", "2016-09-01T00:00:00Z", "1", np.nan, np.nan, np.nan, np.nan, np.nan],
            ["bejab", "2016-09-01T00:00:00Z", "2", np.nan, np.nan, 12.0, np.nan, np.nan],
        ])

        kept = drop_empty_aggregates(df)

        assert kept["height_bin"].tolist() == ["2"]
        assert kept.index.tolist() == [0]

    def test_single_defined_statistic_keeps_row(self):
        df = self._aggregates([
            ["bejab", "2016-09-01T00:00:00Z", "1", np.nan, np.nan, np.nan, 45.0, np.nan],
        ])

        assert len(drop_empty_aggregates(df)) == 1
