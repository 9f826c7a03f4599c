"""vp data processing modules.

- loader: Discover and read vp CSV files
- binner: Hourly time bins and altitude bands
- filters: Measurement and aggregate filters
- circular: Circular mean of wind directions
- aggregator: Per radar/hour/band aggregation
- exporter: Flowviz CSV formatting and writing
"""

from vpflowviz.vp.loader import VpDataLoader
from vpflowviz.vp.binner import bin_measurements
from vpflowviz.vp.filters import filter_measurements, drop_empty_aggregates
from vpflowviz.vp.circular import circular_mean
from vpflowviz.vp.aggregator import aggregate_measurements
from vpflowviz.vp.exporter import format_flowviz, flowviz_output_path, write_flowviz

__all__ = [
    "VpDataLoader",
    "bin_measurements",
    "filter_measurements",
    "drop_empty_aggregates",
    "circular_mean",
    "aggregate_measurements",
    "format_flowviz",
    "flowviz_output_path",
    "write_flowviz",
]
