"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
frozen, and has no optional fields that query code depends on.
"""

from pydantic import Field
from cpcrain.schemas.base import CpcBaseModel, FilenamePattern, LogLevel


class InternalDataConfig(CpcBaseModel):
    """Runtime data location. data_dir is mandatory: there is no default."""
    data_dir: str = Field(min_length=1)
    filename_pattern: FilenamePattern
    variable: str


class InternalGridConfig(CpcBaseModel):
    """Runtime grid definition."""
    lon_start: float
    lon_step: float = Field(gt=0)
    lon_count: int = Field(ge=1)
    lat_start: float
    lat_step: float = Field(gt=0)
    lat_count: int = Field(ge=1)


class InternalCoordNamesConfig(CpcBaseModel):
    """Runtime dimension names."""
    lon: str
    lat: str
    time: str


class InternalQueryConfig(CpcBaseModel):
    """Runtime query defaults."""
    tidy: bool
    round_to_grid: bool


class InternalLoggingConfig(CpcBaseModel):
    """Runtime logging configuration."""
    level: LogLevel


class InternalConfig(CpcBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.variable = config.data.variable  # NOT .get()

    All validation happens during config resolution, not in runtime code.
    """

    data: InternalDataConfig
    grid: InternalGridConfig
    coord_names: InternalCoordNamesConfig
    query: InternalQueryConfig
    logging: InternalLoggingConfig

    model_config = {**CpcBaseModel.model_config, "frozen": True}
