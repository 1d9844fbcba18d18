"""Query resolution and stitching.

- segments: Calendars and per-year date segments
- resolver: Request validation and grid snapping
- stitcher: Multi-year orchestration and the read_cpc entry point
"""

from cpcrain.query.segments import YearSegment, split_by_year, year_calendar
from cpcrain.query.resolver import BoundingBox, RangeResolver, ResolvedRequest
from cpcrain.query.stitcher import Stitcher, read_cpc

__all__ = [
    "YearSegment",
    "split_by_year",
    "year_calendar",
    "BoundingBox",
    "RangeResolver",
    "ResolvedRequest",
    "Stitcher",
    "read_cpc",
]
