"""Windowed reads of one year file into a labeled (lon, lat, time) block.

Each year file holds a dense precipitation grid covering the whole
catalogue and every day of its year. A read computes the index window
implied by a date segment and a grid-aligned bounding box, opens the file,
loads only that window, and closes the file before returning.

Coordinate labels on the result come from the catalogue and the calendar,
never from the file, so downstream code never recomputes them.
"""

from datetime import date
from pathlib import Path
import logging

import numpy as np
import pandas as pd
import xarray as xr

from cpcrain.contracts import (
    CorruptData,
    DataUnavailable,
    InvalidInput,
    SUBARRAY_DIMS,
    require,
)
from cpcrain.grid.catalog import GridCatalog
from cpcrain.query.segments import year_calendar

__all__ = ['YearSliceReader', 'VALUE_NAME']

logger = logging.getLogger(__name__)

VALUE_NAME = "precip_mm"


class YearSliceReader:
    """Extract a labeled sub-array from one year file.

    Parameters
    ----------
    catalog : GridCatalog
        Grid every year file conforms to.
    variable : str, default "precip"
        Name of the 3-D precipitation variable inside each file.
    coord_names : mapping, optional
        File dimension names for ``lon``, ``lat`` and ``time``. Defaults to
        the same names.

    Notes
    -----
    - No file handle is cached; every call opens and releases its own.
    - Dimension order inside the file does not matter; the result is always
      transposed to (lon, lat, time).

    Examples
    --------
    >>> reader = YearSliceReader(cpc_global())
    >>> block = reader.read_year(2012, date(2012, 3, 1), date(2012, 3, 31),
    ...                          box, "/data/cpc/cpcRain_2012.nc")
    >>> block.dims
    ('lon', 'lat', 'time')
    """

    def __init__(self, catalog: GridCatalog, variable: str = "precip", coord_names=None):
        self.catalog = catalog
        self.variable = variable
        names = dict(coord_names or {})
        self.dim_names = {axis: names.get(axis, axis) for axis in SUBARRAY_DIMS}

    @classmethod
    def from_config(cls, config, catalog: GridCatalog) -> "YearSliceReader":
        """Build from an InternalConfig."""
        return cls(catalog, config.data.variable, config.coord_names.model_dump())

    def read_year(self, year: int, segment_start: date, segment_end: date, box,
                  file_path: Path | str) -> xr.DataArray:
        """Read the block for ``[segment_start, segment_end]`` inside ``box``.

        Parameters
        ----------
        year : int
            Calendar year of the file.
        segment_start, segment_end : date
            Inclusive date range, both inside ``year``.
        box : BoundingBox
            Bounds that are exact catalogue members.
        file_path : Path or str
            The year file.

        Returns
        -------
        xr.DataArray
            Values in mm with dims (lon, lat, time) and lon/lat/time labels.

        Raises
        ------
        InvalidInput
            Segment outside the year, or box bounds off the grid.
        DataUnavailable
            File missing or cannot be opened.
        CorruptData
            File does not match the grid, the calendar, or the variable
            contract.
        """
        calendar = year_calendar(year)
        require(
            segment_start <= segment_end
            and segment_start.year == year and segment_end.year == year,
            f"Segment {segment_start}..{segment_end} is not inside year {year}",
            InvalidInput,
        )

        lon0 = self.catalog.index_of("lon", box.lon_min)
        lon1 = self.catalog.index_of("lon", box.lon_max)
        lat0 = self.catalog.index_of("lat", box.lat_min)
        lat1 = self.catalog.index_of("lat", box.lat_max)
        t0 = (segment_start - date(year, 1, 1)).days
        t1 = (segment_end - date(year, 1, 1)).days
        windows = {
            "lon": slice(lon0, lon1 + 1),
            "lat": slice(lat0, lat1 + 1),
            "time": slice(t0, t1 + 1),
        }

        path = Path(file_path)
        if not path.is_file():
            raise DataUnavailable(f"Year file not found for {year}: {path}")

        logger.debug(
            "Reading %s: lon[%d:%d] lat[%d:%d] time[%d:%d]",
            path.name, lon0, lon1 + 1, lat0, lat1 + 1, t0, t1 + 1,
        )
        try:
            ds = xr.open_dataset(path, decode_times=False)
        except (OSError, ValueError) as e:
            raise DataUnavailable(f"Cannot open year file {path}: {e}") from e

        with ds:
            values = self._extract(ds, path, calendar, windows)

        return xr.DataArray(
            values,
            dims=SUBARRAY_DIMS,
            coords={
                "lon": self.catalog.lons()[windows["lon"]],
                "lat": self.catalog.lats()[windows["lat"]],
                "time": calendar[windows["time"]],
            },
            name=VALUE_NAME,
            attrs={"units": "mm"},
        )

    def _extract(self, ds: xr.Dataset, path: Path, calendar: pd.DatetimeIndex,
                 windows: dict) -> np.ndarray:
        """Check the file against the grid contract and load the window."""
        require(
            self.variable in ds.data_vars,
            f"{path.name}: variable '{self.variable}' not found",
        )
        var = ds[self.variable]

        expected = {
            self.dim_names["lon"]: self.catalog.lons().size,
            self.dim_names["lat"]: self.catalog.lats().size,
            self.dim_names["time"]: len(calendar),
        }
        require(
            set(var.dims) == set(expected),
            f"{path.name}: '{self.variable}' has dims {var.dims}, expected {tuple(expected)}",
        )
        for dim, size in expected.items():
            require(
                var.sizes[dim] == size,
                f"{path.name}: dimension '{dim}' has length {var.sizes[dim]}, expected {size}",
            )

        for axis in ("lon", "lat"):
            dim = self.dim_names[axis]
            if dim in ds.coords:
                stored = np.asarray(ds[dim].values, dtype="float64")
                require(
                    np.allclose(stored, self.catalog.axis(axis)),
                    f"{path.name}: stored {axis} coordinates do not match the grid",
                )

        time_dim = self.dim_names["time"]
        if time_dim in ds.coords:
            stored = self._decode_days(ds, time_dim, path)
            require(
                np.array_equal(stored, calendar.values.astype("datetime64[D]")),
                f"{path.name}: stored dates {stored[0]}..{stored[-1]} "
                f"do not match the calendar {calendar[0].date()}..{calendar[-1].date()}",
            )

        selection = {self.dim_names[axis]: window for axis, window in windows.items()}
        order = [self.dim_names[axis] for axis in SUBARRAY_DIMS]
        try:
            block = var.isel(selection).transpose(*order).load()
        except (IndexError, ValueError, RuntimeError) as e:
            raise CorruptData(f"{path.name}: cannot read '{self.variable}' at window: {e}") from e

        return np.asarray(block.values)

    @staticmethod
    def _decode_days(ds: xr.Dataset, time_dim: str, path: Path) -> np.ndarray:
        """Decode the stored CF time coordinate to datetime64[D] days."""
        raw = xr.Dataset(coords={time_dim: ds[time_dim].variable})
        try:
            decoded = xr.decode_cf(raw)[time_dim].values
            return np.asarray(decoded).astype("datetime64[D]")
        except (TypeError, ValueError) as e:
            raise CorruptData(f"{path.name}: cannot decode '{time_dim}' as dates: {e}") from e
