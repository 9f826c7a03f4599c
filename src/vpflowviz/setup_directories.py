"""
Directory setup for the vpflowviz pipeline.

Everything a run writes lives under the processed data directory:
- <processed_data_dir>/<project>_flowviz.csv   (pipeline output)
- <processed_data_dir>/logs/                   (run log, runtime config)
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def setup_output_directories(processed_data_dir):
    """
    Set up the output directory structure.

    Parameters
    ----------
    processed_data_dir : str or Path
        Directory that receives the flowviz CSV.

    Returns
    -------
    dict
        Dictionary with paths: 'base', 'logs'
    """
    base_dir = Path(processed_data_dir).expanduser().resolve()

    directories = {
        "base": base_dir,
        "logs": base_dir / "logs",
    }

    for path in directories.values():
        path.mkdir(parents=True, exist_ok=True)

    for key, path in directories.items():
        logger.debug("  %-6s: %s", key, path)

    return directories


def get_output_path(output_dirs, filename):
    """
    Get the path of the flowviz CSV inside the output structure.

    Parameters
    ----------
    output_dirs : dict
        Output directories from setup_output_directories()
    filename : str
        Output file name (e.g. 'bird-migration-2016_flowviz.csv')

    Returns
    -------
    Path
        <base>/<filename>
    """
    return Path(output_dirs["base"]) / filename
