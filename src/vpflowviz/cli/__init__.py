"""Command-line interface modules for vpflowviz.

This package holds the real execution logic; scripts/ only wraps it.
"""

from vpflowviz.cli.run_flowviz import run_flowviz_pipeline, main

__all__ = ['run_flowviz_pipeline', 'main']
