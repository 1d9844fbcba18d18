"""Validate and normalize a query against the grid and the files on disk.

Checks run in a fixed order: dates, limit pairs, year availability, then
grid membership. Nothing is opened here; a missing year fails the query
before any file is read.
"""

import logging
import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime
from collections.abc import Sequence
from typing import Collection

import numpy as np
import pandas as pd

from cpcrain.contracts import DataUnavailable, InvalidInput, require
from cpcrain.grid.catalog import GridCatalog, LAT_DOMAIN, LON_DOMAIN

__all__ = ['BoundingBox', 'ResolvedRequest', 'RangeResolver', 'coerce_date']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    """Geographic window. After resolution every bound is a grid point."""
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


@dataclass(frozen=True)
class ResolvedRequest:
    """Normalized query: validated dates, grid-aligned box, years to read."""
    start_date: date
    end_date: date
    box: BoundingBox
    years: tuple[int, ...]


def coerce_date(value, name: str) -> date:
    """Turn a date-like value into a ``datetime.date``.

    Accepts dates, datetimes (truncated), pandas Timestamps, numpy
    datetime64 and ISO strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (str, np.datetime64)):
        try:
            ts = pd.Timestamp(value)
        except (ValueError, TypeError) as e:
            raise InvalidInput(f"{name} is not a valid date: {value!r}") from e
        require(not pd.isna(ts), f"{name} is not a valid date: {value!r}", InvalidInput)
        return ts.date()
    raise InvalidInput(f"{name} must be a date, got {type(value).__name__}")


def _check_lims(lims, name: str, domain: tuple[float, float]) -> tuple[float, float]:
    require(
        isinstance(lims, (Sequence, np.ndarray)) and not isinstance(lims, str),
        f"{name} must be a sequence of 2 numbers",
        InvalidInput,
    )
    require(len(lims) == 2, f"{name} must be length 2, got {len(lims)}", InvalidInput)
    for v in lims:
        require(
            isinstance(v, numbers.Real) and not isinstance(v, bool),
            f"{name} must be numeric, got {v!r}",
            InvalidInput,
        )
        require(math.isfinite(v), f"{name} must be finite, got {v!r}", InvalidInput)
    lo, hi = domain
    require(
        min(lims) >= lo and max(lims) <= hi,
        f"{name} must be between {lo:g} and {hi:g}, got {list(lims)}",
        InvalidInput,
    )
    return float(lims[0]), float(lims[1])


class RangeResolver:
    """Validate a request and align its bounding box with the grid.

    Parameters
    ----------
    catalog : GridCatalog
        Canonical grid every year file conforms to.

    Examples
    --------
    >>> resolver = RangeResolver(cpc_global())
    >>> req = resolver.resolve(date(2010, 12, 15), date(2011, 1, 10),
    ...                        (10.3, 20.0), (100.0, 110.0), {2010, 2011})
    >>> req.years
    (2010, 2011)
    """

    def __init__(self, catalog: GridCatalog):
        self.catalog = catalog

    def resolve(self, start_date, end_date, lat_lims, lon_lims,
                available_years: Collection[int], round_to_grid: bool = True) -> ResolvedRequest:
        """Validate and normalize one query.

        Raises
        ------
        InvalidInput
            Bad dates, bad limit pairs, or off-grid limits without snapping.
        DataUnavailable
            A requested year has no file.
        """
        start = coerce_date(start_date, "start_date")
        end = coerce_date(end_date, "end_date")
        require(
            start <= end,
            f"start_date {start} is after end_date {end}",
            InvalidInput,
        )

        lats = _check_lims(lat_lims, "lat_lims", LAT_DOMAIN)
        lons = _check_lims(lon_lims, "lon_lims", LON_DOMAIN)

        years = tuple(range(start.year, end.year + 1))
        available = {int(y) for y in available_years}
        missing = [y for y in years if y not in available]
        if missing:
            raise DataUnavailable(
                f"Not all requested years are available; missing {missing}. "
                "Materialize them before querying."
            )

        lats = self._align("lat", lats, round_to_grid)
        lons = self._align("lon", lons, round_to_grid)

        box = BoundingBox(
            lat_min=min(lats), lat_max=max(lats),
            lon_min=min(lons), lon_max=max(lons),
        )
        logger.debug("Resolved %s..%s over %s (years %s)", start, end, box, years)
        return ResolvedRequest(start, end, box, years)

    def _align(self, axis: str, lims: tuple[float, float], round_to_grid: bool) -> tuple[float, float]:
        if all(self.catalog.contains(axis, v) for v in lims):
            return lims
        require(
            round_to_grid,
            f"Invalid {axis}_lims {list(lims)}: not on the grid and rounding is disabled",
            InvalidInput,
        )
        snapped = tuple(self.catalog.nearest(axis, v) for v in lims)
        logger.warning("Adjusting %s_lims %s to nearest grid points %s", axis, list(lims), list(snapped))
        return snapped
