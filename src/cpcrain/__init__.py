"""`cpcrain` - Read CPC global daily precipitation from per-year netCDF files.

Subpackages:
- grid: Canonical longitude/latitude catalogue
- io: Year file discovery and windowed reading
- query: Request resolution, date segmentation, stitching
- transform: Dense array <-> long-form table
- schemas: Pydantic configuration
- contracts: Error taxonomy and boundary checks
"""

from cpcrain.contracts import CpcError, InvalidInput, DataUnavailable, CorruptData
from cpcrain.query.stitcher import Stitcher, read_cpc
from cpcrain.transform.tidy import melt, densify
from cpcrain.logging_setup import configure_logging

__version__ = "0.1.0"

__all__ = [
    "read_cpc",
    "Stitcher",
    "melt",
    "densify",
    "configure_logging",
    "CpcError",
    "InvalidInput",
    "DataUnavailable",
    "CorruptData",
]
