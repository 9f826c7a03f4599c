"""Column names shared by every pipeline stage."""

# Measurement record (one row per radar, observation time and height level)
VP_NUMERIC_COLUMNS = ["HGHT", "dens", "dd", "u", "v", "ff"]
VP_COLUMNS = ["radar_id", "datetime", *VP_NUMERIC_COLUMNS, "exclusion_reason"]

# Derived by the binner
TIME_BIN = "datetime_bin"
HEIGHT_BIN = "height_bin"
LOW_BAND = "1"
HIGH_BAND = "2"

GROUP_KEYS = ["radar_id", TIME_BIN, HEIGHT_BIN]

# Aggregate statistic -> source column
STAT_SOURCES = {
    "avg_u": "u",
    "avg_v": "v",
    "avg_dens": "dens",
    "avg_dd": "dd",
    "avg_ff": "ff",
}
STAT_COLUMNS = list(STAT_SOURCES)
AGGREGATE_COLUMNS = [*GROUP_KEYS, *STAT_COLUMNS]

OUTPUT_RENAMES = {
    TIME_BIN: "interval_start_time",
    HEIGHT_BIN: "altitude_band",
    "avg_u": "avg_u_speed",
    "avg_v": "avg_v_speed",
}
OUTPUT_COLUMNS = [
    "radar_id",
    "interval_start_time",
    "altitude_band",
    "avg_u_speed",
    "avg_v_speed",
    "avg_dens",
]
