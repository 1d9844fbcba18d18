"""ParamConfig: Expert defaults for cpcrain.

Single source of truth for defaults. Runtime code never reads from
ParamConfig directly - it only receives InternalConfig.

The default grid is the CPC global unified gauge analysis at 0.5 degree:
720 longitudes from 0.25 to 359.75 and 360 latitudes from -89.75 to 89.75.
"""

from typing import Optional
from pydantic import Field
from cpcrain.schemas.base import CpcBaseModel, FilenamePattern, LogLevel


class DataConfig(CpcBaseModel):
    """Location and layout of the per-year files."""
    data_dir: Optional[str] = None
    filename_pattern: FilenamePattern = "cpcRain_{year}.nc"
    variable: str = "precip"


class GridConfig(CpcBaseModel):
    """Regular lon/lat grid definition (cell centres)."""
    lon_start: float = 0.25
    lon_step: float = Field(0.5, gt=0)
    lon_count: int = Field(720, ge=1)
    lat_start: float = -89.75
    lat_step: float = Field(0.5, gt=0)
    lat_count: int = Field(360, ge=1)


class CoordNamesConfig(CpcBaseModel):
    """Dimension names inside the year files."""
    lon: str = "lon"
    lat: str = "lat"
    time: str = "time"


class QueryConfig(CpcBaseModel):
    """Default query behaviour."""
    tidy: bool = True
    round_to_grid: bool = True


class LoggingConfig(CpcBaseModel):
    """Logging configuration."""
    level: LogLevel = "INFO"


class ParamConfig(CpcBaseModel):
    """Complete expert configuration with defaults for every field."""
    data: DataConfig = Field(default_factory=DataConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    coord_names: CoordNamesConfig = Field(default_factory=CoordNamesConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
