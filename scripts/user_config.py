"""vpflowviz project settings.

This is the user-facing configuration file. Modify settings here to describe
your project. Advanced settings (file marker, output pattern, logging) have
expert defaults in vpflowviz.schemas.param and can be overridden with the
nested sections at the bottom.

Usage:
    python scripts/run_flowviz_pipeline.py scripts/user_config.py
    vpflowviz scripts/user_config.py --processed-data-dir /scratch/flowviz
"""

CONFIG = {
    # ========================================================================
    # PROJECT
    # ========================================================================
    "PROJECT_NAME": "bird-migration-2016",
    "RADARS": ["bejab", "bewid", "bezav", "nldbl", "nlhrw"],  # reporting only
    "COUNTRIES": ["be", "nl"],                                # reporting only

    # ========================================================================
    # DATA LOCATIONS
    # ========================================================================
    "RAW_DATA_DIR": "data/raw",              # vp files: <radar>_vp_<date>.csv
    "PROCESSED_DATA_DIR": "data/processed",  # <project>_flowviz.csv and logs/

    # ========================================================================
    # PROCESSING
    # ========================================================================
    "MIN_DENSITY": 10,        # birds/km3, measurements below are dropped
    "LOW_BAND_MIN": 200,      # m, altitude band 1 starts here
    "HIGH_BAND_MIN": 2000,    # m, altitude band 2 starts here

    "LOG_LEVEL": "INFO",

    # ========================================================================
    # ADVANCED (nested overrides of expert defaults)
    # ========================================================================
    # "loader": {"filename_marker": "_vp_", "extension": ".csv"},
    # "output": {"utc_suffix": "+00", "save_runtime_config": True},
}
