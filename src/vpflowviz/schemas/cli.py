"""CLIConfig: Command-line operational overrides.

Minimal configuration for operational parameters that commonly change
between runs: project name, directories, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from vpflowviz.schemas.base import FlowvizBaseModel


class CLIConfig(FlowvizBaseModel):
    """Command-line configuration overrides.

    Operational-only settings that override user and param configs.
    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(
            project_name="bird-migration-2016",
            processed_data_dir="/scratch/flowviz",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    project_name: Optional[str] = None
    raw_data_dir: Optional[str] = None
    processed_data_dir: Optional[str] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.project_name is not None:
            overrides["project"] = {"name": self.project_name}

        paths_overrides = {}
        if self.raw_data_dir is not None:
            paths_overrides["raw_data_dir"] = str(self.raw_data_dir)
        if self.processed_data_dir is not None:
            paths_overrides["processed_data_dir"] = str(self.processed_data_dir)

        if paths_overrides:
            overrides["paths"] = paths_overrides

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
