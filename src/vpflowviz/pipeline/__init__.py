"""Pipeline modules.

- runner: Batch runner sequencing the vp stages
"""

from vpflowviz.pipeline.runner import FlowvizPipeline, PipelineSummary

__all__ = [
    "FlowvizPipeline",
    "PipelineSummary",
]
