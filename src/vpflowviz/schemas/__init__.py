"""Pydantic configuration schemas for the vpflowviz pipeline.

All configuration validation, coercion, and normalization happens at
schema validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    Project settings file (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from vpflowviz.schemas.resolve import resolve_config
from vpflowviz.schemas.internal import InternalConfig
from vpflowviz.schemas.param import ParamConfig
from vpflowviz.schemas.user import UserConfig
from vpflowviz.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
