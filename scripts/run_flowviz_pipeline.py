#!/usr/bin/env python3
"""vp to flowviz pipeline runner.

Usage:
    python scripts/run_flowviz_pipeline.py scripts/user_config.py
    python scripts/run_flowviz_pipeline.py scripts/settings.json --processed-data-dir /scratch/flowviz
    python scripts/run_flowviz_pipeline.py scripts/settings.json -v

Note: project settings in scripts/user_config.py or scripts/settings.json,
expert defaults in vpflowviz.schemas.param
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from vpflowviz.cli.run_flowviz import main


if __name__ == "__main__":
    sys.exit(main())
