"""Configuration resolution and merging logic.

resolve_config() is the single entrypoint: it merges ParamConfig, UserConfig
and call-site overrides (in increasing priority) and returns a validated,
frozen InternalConfig.
"""

from typing import Optional, Union
from cpcrain.schemas.param import ParamConfig
from cpcrain.schemas.user import UserConfig
from cpcrain.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 4}})
    {'a': 1, 'b': {'c': 2, 'd': 4}}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    param_cfg: Union[dict, ParamConfig, None] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    overrides: Optional[dict] = None,
) -> InternalConfig:
    """Resolve final runtime configuration from param and user configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Expert configuration. Defaults to ParamConfig().
    user_cfg : dict or UserConfig, optional
        User overrides.
    overrides : dict, optional
        Nested call-site overrides (highest priority), e.g.
        ``{"data": {"data_dir": "/data/cpc"}}``.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration

    Raises
    ------
    ValidationError
        If any config fails validation, including a missing data_dir.

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(DATA_DIR="/data/cpc"))
    >>> config.data.filename_pattern
    'cpcRain_{year}.nc'
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if user_cfg is None or (isinstance(user_cfg, dict) and not user_cfg):
        user = UserConfig()
    elif not isinstance(user_cfg, UserConfig):
        user = UserConfig.model_validate(user_cfg)
    else:
        user = user_cfg

    merged = deep_merge(param.model_dump(), user.to_internal_overrides(), overrides or {})

    return InternalConfig.model_validate(merged)
