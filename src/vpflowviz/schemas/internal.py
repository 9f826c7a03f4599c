"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields that processing code depends on.
"""

from typing import Literal, Optional
from pydantic import Field, ConfigDict, model_validator
from vpflowviz.schemas.base import FlowvizBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalProjectConfig(FlowvizBaseModel):
    """Runtime project identity."""
    name: str = Field(min_length=1)
    radar_ids: list[str]
    countries: list[str]


class InternalPathsConfig(FlowvizBaseModel):
    """Runtime paths. Both directories are required."""
    raw_data_dir: str = Field(min_length=1)
    processed_data_dir: str = Field(min_length=1)


class InternalLoaderConfig(FlowvizBaseModel):
    """Runtime vp file discovery settings."""
    filename_marker: str
    extension: str


class InternalBinningConfig(FlowvizBaseModel):
    """Runtime altitude band limits."""
    low_band_min: float
    high_band_min: float

    @model_validator(mode="after")
    def check_band_order(self):
        if self.low_band_min >= self.high_band_min:
            raise ValueError("low_band_min must be below high_band_min")
        return self


class InternalFilterConfig(FlowvizBaseModel):
    """Runtime measurement filter."""
    min_density: float


class InternalOutputConfig(FlowvizBaseModel):
    """Runtime output configuration."""
    filename_pattern: str
    utc_suffix: str
    save_runtime_config: bool


class InternalLoggingConfig(FlowvizBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_to_file: bool


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(FlowvizBaseModel):
    """Authoritative runtime configuration.

    It is fully validated, immutable, and contains explicit values for
    all parameters. Runtime modules access fields directly:

        min_density = config.filter.min_density  # NOT .get()
        out_dir = config.paths.processed_data_dir

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code

    All of that happens during config resolution.
    """

    project: InternalProjectConfig
    paths: InternalPathsConfig
    loader: InternalLoaderConfig
    binning: InternalBinningConfig
    filter: InternalFilterConfig
    output: InternalOutputConfig
    logging: InternalLoggingConfig
    run_id: Optional[str] = None

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )

    @property
    def output_filename(self) -> str:
        """Output CSV file name for this project."""
        return self.output.filename_pattern.format(project_name=self.project.name)
