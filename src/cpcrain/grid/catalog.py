"""Canonical longitude/latitude catalogue shared by every year file.

The CPC global unified gauge analysis lives on a fixed 0.5 degree grid of
cell centres. Every per-year file conforms to it, so queries resolve to
contiguous index windows along each axis of this catalogue.
"""

import logging
from functools import lru_cache
from typing import Literal

import numpy as np

from cpcrain.contracts import InvalidInput, require
from cpcrain.schemas.param import GridConfig

__all__ = ['GridCatalog', 'cpc_global']

logger = logging.getLogger(__name__)

Axis = Literal["lon", "lat"]

LON_DOMAIN = (0.0, 360.0)
LAT_DOMAIN = (-90.0, 90.0)


def _frozen(values, name: str, domain: tuple[float, float]) -> np.ndarray:
    arr = np.array(values, dtype="float64").ravel()
    require(arr.size > 0, f"{name} vector is empty", InvalidInput)
    require(bool(np.all(np.isfinite(arr))), f"{name} vector has non-finite values", InvalidInput)
    require(bool(np.all(np.diff(arr) > 0)), f"{name} vector must be strictly ascending", InvalidInput)
    lo, hi = domain
    require(
        arr[0] >= lo and arr[-1] <= hi,
        f"{name} vector must lie within [{lo}, {hi}], got [{arr[0]}, {arr[-1]}]",
        InvalidInput,
    )
    arr.setflags(write=False)
    return arr


class GridCatalog:
    """Fixed, immutable lon/lat coordinate vectors.

    Parameters
    ----------
    lons : array-like
        Ascending longitudes in [0, 360).
    lats : array-like
        Ascending latitudes in [-90, 90].

    Examples
    --------
    >>> catalog = cpc_global()
    >>> catalog.lons()[:2]
    array([0.25, 0.75])
    >>> catalog.nearest("lat", 10.3)
    10.25
    """

    def __init__(self, lons, lats):
        self._lons = _frozen(lons, "lon", LON_DOMAIN)
        self._lats = _frozen(lats, "lat", LAT_DOMAIN)

    @classmethod
    def from_config(cls, grid: GridConfig) -> "GridCatalog":
        """Build a regular grid from start/step/count per axis."""
        lons = grid.lon_start + grid.lon_step * np.arange(grid.lon_count)
        lats = grid.lat_start + grid.lat_step * np.arange(grid.lat_count)
        return cls(lons, lats)

    def lons(self) -> np.ndarray:
        return self._lons

    def lats(self) -> np.ndarray:
        return self._lats

    def axis(self, axis: Axis) -> np.ndarray:
        if axis == "lon":
            return self._lons
        if axis == "lat":
            return self._lats
        raise InvalidInput(f"Unknown grid axis: {axis!r}")

    def contains(self, axis: Axis, value: float) -> bool:
        """Exact membership test (no tolerance)."""
        values = self.axis(axis)
        i = int(np.searchsorted(values, value))
        return i < values.size and values[i] == value

    def index_of(self, axis: Axis, value: float) -> int:
        """Position of an exact catalogue member."""
        values = self.axis(axis)
        i = int(np.searchsorted(values, value))
        require(
            i < values.size and values[i] == value,
            f"{value} is not a {axis} grid point",
            InvalidInput,
        )
        return i

    def nearest(self, axis: Axis, value: float) -> float:
        """Nearest catalogue value by absolute distance.

        Binary search over the ascending vector. On an exact tie the lower
        value wins, which is the one a scan in stored order meets first.
        """
        values = self.axis(axis)
        i = int(np.searchsorted(values, value))
        if i == 0:
            return float(values[0])
        if i == values.size:
            return float(values[-1])
        below, above = values[i - 1], values[i]
        if abs(below - value) <= abs(above - value):
            return float(below)
        return float(above)

    def __repr__(self):
        return (
            f"GridCatalog(lon=[{self._lons[0]}..{self._lons[-1]}] n={self._lons.size}, "
            f"lat=[{self._lats[0]}..{self._lats[-1]}] n={self._lats.size})"
        )


@lru_cache(maxsize=1)
def cpc_global() -> GridCatalog:
    """Process-wide default CPC 0.5 degree catalogue."""
    catalog = GridCatalog.from_config(GridConfig())
    logger.debug("Built default CPC grid: %r", catalog)
    return catalog
