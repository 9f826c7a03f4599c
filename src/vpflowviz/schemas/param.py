"""ParamConfig: Expert defaults for the vpflowviz pipeline.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define
fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator, model_validator
from vpflowviz.schemas.base import FlowvizBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ProjectConfig(FlowvizBaseModel):
    """Project identity and radar network."""
    name: Optional[str] = None
    radar_ids: list[str] = Field(default_factory=list, description="Radars expected in the data (reporting only)")
    countries: list[str] = Field(default_factory=list, description="Countries covered (reporting only)")


class PathsConfig(FlowvizBaseModel):
    """Input and output locations."""
    raw_data_dir: Optional[str] = None
    processed_data_dir: Optional[str] = None


class LoaderConfig(FlowvizBaseModel):
    """vp file discovery settings."""
    filename_marker: str = Field("_vp_", min_length=1, description="Substring every vp file name contains")
    extension: str = ".csv"

    @field_validator("extension", mode="before")
    @classmethod
    def ensure_leading_dot(cls, v):
        """Accept 'csv' as well as '.csv'."""
        if isinstance(v, str) and v and not v.startswith("."):
            return "." + v
        return v


class BinningConfig(FlowvizBaseModel):
    """Altitude band limits in meters."""
    low_band_min: float = Field(200.0, ge=0, description="Lower edge of altitude band 1")
    high_band_min: float = Field(2000.0, gt=0, description="Lower edge of altitude band 2")

    @field_validator("low_band_min", "high_band_min", mode="before")
    @classmethod
    def coerce_to_float(cls, v):
        """Allow int or float for band limits."""
        return float(v)

    @model_validator(mode="after")
    def check_band_order(self):
        """Band 1 must lie below band 2."""
        if self.low_band_min >= self.high_band_min:
            raise ValueError(
                f"low_band_min ({self.low_band_min}) must be below "
                f"high_band_min ({self.high_band_min})"
            )
        return self


class FilterConfig(FlowvizBaseModel):
    """Measurement quality filter."""
    min_density: float = Field(10.0, ge=0, description="Minimum bird density (birds/km3)")

    @field_validator("min_density", mode="before")
    @classmethod
    def coerce_min_density_to_float(cls, v):
        """Allow int or float for min_density."""
        return float(v)


class OutputConfig(FlowvizBaseModel):
    """Output file configuration."""
    filename_pattern: str = "{project_name}_flowviz.csv"
    utc_suffix: str = "+00"
    save_runtime_config: bool = True


class LoggingConfig(FlowvizBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_to_file: bool = True


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(FlowvizBaseModel):
    """Complete expert configuration with all defaults.

    This is the base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    binning: BinningConfig = Field(default_factory=BinningConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
