"""`vpflowviz` - vertical profile bird radar data to flow visualization input.

Subpackages:
- vp: Loading, binning, filtering, aggregation and export of vp data
- pipeline: Batch pipeline runner
- schemas: Pydantic configuration models
- contracts: Stage invariants
- cli: Command-line entry point
"""

__version__ = "0.1.0"
