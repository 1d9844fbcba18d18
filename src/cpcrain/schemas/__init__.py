"""Pydantic configuration schemas for cpcrain.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from cpcrain.schemas.resolve import resolve_config
from cpcrain.schemas.internal import InternalConfig
from cpcrain.schemas.param import ParamConfig, GridConfig
from cpcrain.schemas.user import UserConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'GridConfig',
    'UserConfig',
]
