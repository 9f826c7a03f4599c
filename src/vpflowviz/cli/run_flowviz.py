"""vp to flowviz pipeline execution.

This module contains the pipeline entry point, separated from argument
parsing. ``main()`` is the ``vpflowviz`` console script.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from vpflowviz.contracts import ContractViolation, InputParseError
from vpflowviz.pipeline import FlowvizPipeline, PipelineSummary
from vpflowviz.schemas.initialization import init_runtime_config

__all__ = ['run_flowviz_pipeline', 'build_parser', 'main']

logger = logging.getLogger(__name__)


def run_flowviz_pipeline(
    settings_path: str | Path,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
    configure_logging: bool = True,
) -> PipelineSummary:
    """Execute the vp to flowviz pipeline for one settings file.

    1. Loads and resolves configuration (Param < User < CLI)
    2. Sets up output directories and persists the runtime config
    3. Runs all stages and writes ``<project>_flowviz.csv``

    Parameters
    ----------
    settings_path : str or Path
        Project settings file (JSON, or Python file with a CONFIG dict).
    cli_args : dict, optional
        CLI argument overrides. Keys: project_name, raw_data_dir,
        processed_data_dir, log_level. All optional.
    verbose : bool, optional
        If True, enable DEBUG logging and print the full resolved config.
    configure_logging : bool, optional
        Passed to FlowvizPipeline.

    Returns
    -------
    PipelineSummary
        Row counts and output path of the run.

    Raises
    ------
    FileNotFoundError
        If settings_path does not exist.
    pydantic.ValidationError
        If configuration validation fails.
    InputParseError
        If the raw data directory or a vp file cannot be read.
    OSError
        If the output file cannot be written.

    Examples
    --------
    Run with settings only::

        run_flowviz_pipeline("settings.json")

    Run with CLI overrides::

        run_flowviz_pipeline(
            "settings.json",
            cli_args={"processed_data_dir": "/scratch/flowviz"},
        )
    """
    cli_args = dict(cli_args or {})
    if verbose and not cli_args.get("log_level"):
        cli_args["log_level"] = "DEBUG"

    config = init_runtime_config(settings_path, cli_args)

    print(f"\n{'='*60}")
    print("vp to flowviz pipeline")
    print('='*60)
    print(f"Settings: {settings_path}")
    print(f"Project:  {config.project.name}")
    print(f"Input:    {config.paths.raw_data_dir}")
    print(f"Output:   {config.paths.processed_data_dir}")
    print('='*60)

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
        print('='*60)

    pipeline = FlowvizPipeline(config, configure_logging=configure_logging)
    return pipeline.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vpflowviz",
        description="Convert vp bird-radar profiles into a flowviz CSV",
    )
    parser.add_argument("settings", help="Path to project settings file (JSON or Python)")
    parser.add_argument("--project-name", help="Override project name")
    parser.add_argument("--raw-data-dir", help="Override vp input directory")
    parser.add_argument("--processed-data-dir", help="Override output directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    """Console entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    cli_args = {
        "project_name": args.project_name,
        "raw_data_dir": args.raw_data_dir,
        "processed_data_dir": args.processed_data_dir,
    }

    try:
        summary = run_flowviz_pipeline(args.settings, cli_args=cli_args, verbose=args.verbose)
    except (FileNotFoundError, InputParseError, ValidationError, ValueError) as e:
        logger.error("Run failed: %s", e)
        print(f"Error: {e}")
        return 1
    except (OSError, ContractViolation) as e:
        logger.exception("Run failed: %s", e)
        print(f"Error: {e}")
        return 1

    print(f"Wrote {summary.output_rows} rows to {summary.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
