"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts the project settings file in a variety of formats, with
aliases for common naming patterns (e.g., PROJECT_NAME -> project_name,
RADARS -> radar_ids).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults. Validation is lenient to accept
both uppercase and lowercase keys, integers where floats are expected, and
comma-separated strings where lists are expected.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from vpflowviz.schemas.base import FlowvizBaseModel


def _split_list(v):
    """Accept "a, b" as well as ["a", "b"]."""
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class UserProjectConfig(FlowvizBaseModel):
    """User-facing project config."""
    name: Optional[str] = None
    radar_ids: Optional[list[str]] = None
    countries: Optional[list[str]] = None

    @field_validator("radar_ids", "countries", mode="before")
    @classmethod
    def split_comma_lists(cls, v):
        return _split_list(v)


class UserPathsConfig(FlowvizBaseModel):
    """User-facing paths config."""
    raw_data_dir: Optional[str] = None
    processed_data_dir: Optional[str] = None


class UserLoaderConfig(FlowvizBaseModel):
    """User-facing loader config."""
    filename_marker: Optional[str] = None
    extension: Optional[str] = None


class UserBinningConfig(FlowvizBaseModel):
    """User-facing binning config."""
    low_band_min: Optional[float] = None
    high_band_min: Optional[float] = None


class UserFilterConfig(FlowvizBaseModel):
    """User-facing filter config."""
    min_density: Optional[float] = None


class UserOutputConfig(FlowvizBaseModel):
    """User-facing output config."""
    filename_pattern: Optional[str] = None
    utc_suffix: Optional[str] = None
    save_runtime_config: Optional[bool] = None


class UserConfig(FlowvizBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(
            project_name="bird-migration-2016",
            radar_ids=["bejab", "bewid", "nldbl"],
            countries=["be", "nl"],
            raw_data_dir="data/raw",
            processed_data_dir="data/processed",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Project settings
    project_name: Optional[str] = Field(None, alias="PROJECT_NAME")
    radar_ids: Optional[list[str]] = Field(None, alias="RADARS")
    countries: Optional[list[str]] = Field(None, alias="COUNTRIES")

    # Paths
    raw_data_dir: Optional[str] = Field(None, alias="RAW_DATA_DIR")
    processed_data_dir: Optional[str] = Field(None, alias="PROCESSED_DATA_DIR")

    # Processing settings (flat aliases)
    filename_marker: Optional[str] = Field(None, alias="FILENAME_MARKER")
    min_density: Optional[float] = Field(None, alias="MIN_DENSITY")
    low_band_min: Optional[float] = Field(None, alias="LOW_BAND_MIN")
    high_band_min: Optional[float] = Field(None, alias="HIGH_BAND_MIN")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(None, alias="LOG_LEVEL")

    # Nested overrides (advanced users)
    project: Optional[UserProjectConfig] = None
    paths: Optional[UserPathsConfig] = None
    loader: Optional[UserLoaderConfig] = None
    binning: Optional[UserBinningConfig] = None
    filter: Optional[UserFilterConfig] = None
    output: Optional[UserOutputConfig] = None

    model_config = FlowvizBaseModel.model_config.copy()
    # Allow forgiving settings files (ignore keys this pipeline does not use)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("radar_ids", "countries", mode="before")
    @classmethod
    def split_comma_lists(cls, v):
        """Accept comma-separated strings for list fields."""
        return _split_list(v)

    @field_validator("min_density", "low_band_min", "high_band_min", mode="before")
    @classmethod
    def coerce_numeric_fields(cls, v):
        """Accept int or float for numeric fields."""
        if v is not None:
            return float(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Project section
        project = {}
        if self.project_name is not None:
            project["name"] = self.project_name
        if self.radar_ids is not None:
            project["radar_ids"] = self.radar_ids
        if self.countries is not None:
            project["countries"] = self.countries
        if self.project is not None:
            project.update(self.project.model_dump(exclude_none=True))
        if project:
            overrides["project"] = project

        # Paths section
        paths = {}
        if self.raw_data_dir is not None:
            paths["raw_data_dir"] = str(self.raw_data_dir)
        if self.processed_data_dir is not None:
            paths["processed_data_dir"] = str(self.processed_data_dir)
        if self.paths is not None:
            paths.update(self.paths.model_dump(exclude_none=True))
        if paths:
            overrides["paths"] = paths

        # Loader section
        loader = {}
        if self.filename_marker is not None:
            loader["filename_marker"] = self.filename_marker
        if self.loader is not None:
            loader.update(self.loader.model_dump(exclude_none=True))
        if loader:
            overrides["loader"] = loader

        # Binning section
        binning = {}
        if self.low_band_min is not None:
            binning["low_band_min"] = self.low_band_min
        if self.high_band_min is not None:
            binning["high_band_min"] = self.high_band_min
        if self.binning is not None:
            binning.update(self.binning.model_dump(exclude_none=True))
        if binning:
            overrides["binning"] = binning

        # Filter section
        filter_cfg = {}
        if self.min_density is not None:
            filter_cfg["min_density"] = self.min_density
        if self.filter is not None:
            filter_cfg.update(self.filter.model_dump(exclude_none=True))
        if filter_cfg:
            overrides["filter"] = filter_cfg

        if self.output is not None:
            output = self.output.model_dump(exclude_none=True)
            if output:
                overrides["output"] = output

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
