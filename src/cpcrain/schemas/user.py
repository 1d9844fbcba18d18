"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat uppercase aliases (DATA_DIR, TIDY, ...) as well as nested
overrides. Users only specify what they want to change from the expert
defaults; unknown keys are ignored.
"""

from pathlib import Path
from typing import Optional, Union
from pydantic import Field
from cpcrain.schemas.base import CpcBaseModel, FilenamePattern


class UserDataConfig(CpcBaseModel):
    """User-facing data location config."""
    data_dir: Optional[str] = None
    filename_pattern: Optional[FilenamePattern] = None
    variable: Optional[str] = None


class UserGridConfig(CpcBaseModel):
    """User-facing grid config."""
    lon_start: Optional[float] = None
    lon_step: Optional[float] = None
    lon_count: Optional[int] = None
    lat_start: Optional[float] = None
    lat_step: Optional[float] = None
    lat_count: Optional[int] = None


class UserConfig(CpcBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(DATA_DIR="/data/cpc", TIDY=False)
        internal = resolve_config(ParamConfig(), user_cfg)
    """

    data_dir: Optional[Union[str, Path]] = Field(None, alias="DATA_DIR")
    filename_pattern: Optional[FilenamePattern] = Field(None, alias="FILENAME_PATTERN")
    variable: Optional[str] = Field(None, alias="VARIABLE")
    tidy: Optional[bool] = Field(None, alias="TIDY")
    round_to_grid: Optional[bool] = Field(None, alias="ROUND_TO_GRID")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")

    # Nested overrides (advanced users)
    data: Optional[UserDataConfig] = None
    grid: Optional[UserGridConfig] = None
    coord_names: Optional[dict[str, str]] = None

    model_config = CpcBaseModel.model_config.copy()
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        data = {}
        if self.data_dir is not None:
            data["data_dir"] = str(self.data_dir)
        if self.filename_pattern is not None:
            data["filename_pattern"] = self.filename_pattern
        if self.variable is not None:
            data["variable"] = self.variable
        if self.data is not None:
            data.update(self.data.model_dump(exclude_none=True))
        if data:
            overrides["data"] = data

        if self.grid is not None:
            grid = self.grid.model_dump(exclude_none=True)
            if grid:
                overrides["grid"] = grid

        if self.coord_names:
            overrides["coord_names"] = dict(self.coord_names)

        query = {}
        if self.tidy is not None:
            query["tidy"] = self.tidy
        if self.round_to_grid is not None:
            query["round_to_grid"] = self.round_to_grid
        if query:
            overrides["query"] = query

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level.upper()}

        return overrides
