"""Complete runtime initialization for the vpflowviz pipeline.

This module handles ALL initialization responsibilities:
- Settings file loading (JSON or Python CONFIG dict)
- Configuration resolution (CLI > User > Param)
- Output directory setup
- Configuration persistence with run ID
- Returns fully ready InternalConfig for the pipeline runner
"""

import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from datetime import datetime, timezone

from vpflowviz.schemas.resolve import resolve_config
from vpflowviz.schemas.param import ParamConfig
from vpflowviz.schemas.user import UserConfig
from vpflowviz.schemas.cli import CLIConfig
from vpflowviz.schemas.internal import InternalConfig
from vpflowviz.setup_directories import setup_output_directories

logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str | Path) -> dict:
    """Load the raw settings dict from a JSON or Python file.

    JSON files must hold a single object. Python files must define a
    dict whose name starts with ``CONFIG``.

    Parameters
    ----------
    config_path : str or Path
        Path to ``settings.json`` or a Python settings module.

    Returns
    -------
    dict
        Raw user configuration dictionary (before Pydantic validation).

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist.
    ValueError
        If the file holds no usable settings dict.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Settings in {path} must be a JSON object")
        return data

    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def generate_run_id() -> str:
    """Return a UTC timestamp run identifier, e.g. ``20240101T120000Z``."""
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def persist_runtime_config(config: InternalConfig, log_dir: Path) -> Path:
    """Persist final runtime configuration with its run ID.

    Saves the complete resolved configuration for reproducibility and debugging.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    config_file = log_dir / f"runtime_config_{config.run_id}.json"

    config_dict = config.model_dump()
    config_dict["created_at"] = datetime.now(timezone.utc).isoformat()

    with open(config_file, 'w', encoding="utf-8") as f:
        json.dump(config_dict, f, indent=2, default=str)

    logger.info("Runtime config saved: %s", config_file)
    return config_file


def init_runtime_config(
    settings_path: str | Path,
    cli_args: Optional[Dict[str, Any]] = None,
) -> InternalConfig:
    """Complete runtime initialization - single entry point for vpflowviz.

    1. Configuration resolution (CLI > User > Param)
    2. Output directory setup
    3. Run ID generation
    4. Configuration persistence (if ``output.save_runtime_config``)

    Parameters
    ----------
    settings_path : str or Path
        Project settings file (JSON or Python CONFIG dict).
    cli_args : dict, optional
        CLIConfig-compatible overrides. None values are ignored.

    Returns
    -------
    InternalConfig
        Fully validated configuration with ``run_id`` set.

    Examples
    --------
    >>> config = init_runtime_config("settings.json", {"log_level": "DEBUG"})
    >>> FlowvizPipeline(config).run()
    """
    param_cfg = ParamConfig()
    user_cfg = UserConfig.model_validate(load_user_config_dict(settings_path))

    cli_dict = {k: v for k, v in (cli_args or {}).items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    resolved = resolve_config(param_cfg, user_cfg, cli_cfg)

    output_dirs = setup_output_directories(resolved.paths.processed_data_dir)

    config_dict = resolved.model_dump()
    config_dict["run_id"] = generate_run_id()
    config = InternalConfig.model_validate(config_dict)

    if config.output.save_runtime_config:
        persist_runtime_config(config, output_dirs["logs"])

    return config


__all__ = [
    'load_user_config_dict',
    'generate_run_id',
    'persist_runtime_config',
    'init_runtime_config',
]
