"""Convert between a labeled (lon, lat, time) block and a long-form table.

melt() emits one row per cell, no-data cells included; filtering is left
to the caller. densify() is its inverse.
"""

import numpy as np
import pandas as pd
import xarray as xr

from cpcrain.contracts import InvalidInput, SUBARRAY_DIMS, assert_subarray, require
from cpcrain.io.reader import VALUE_NAME

__all__ = ['melt', 'densify', 'TIDY_COLUMNS']

TIDY_COLUMNS = ["date", "lon", "lat", VALUE_NAME]


def melt(da: xr.DataArray) -> pd.DataFrame:
    """Reshape a SubArray into rows of (date, lon, lat, precip_mm).

    Rows are ordered by date, then latitude, with longitude varying fastest.

    Parameters
    ----------
    da : xr.DataArray
        Block with dims (lon, lat, time) and matching coordinate labels.

    Returns
    -------
    pd.DataFrame
        ``lon * lat * time`` rows with columns date, lon, lat, precip_mm.

    Raises
    ------
    InvalidInput
        If ``da`` is not a well-formed SubArray.

    Examples
    --------
    >>> df = melt(block)
    >>> list(df.columns)
    ['date', 'lon', 'lat', 'precip_mm']
    """
    assert_subarray(da)

    lons = np.asarray(da["lon"].values)
    lats = np.asarray(da["lat"].values)
    dates = pd.DatetimeIndex(da["time"].values)
    n_lon, n_lat, n_time = da.shape

    # (time, lat, lon) in C order puts lon fastest
    values = np.asarray(da.values).transpose(2, 1, 0).reshape(-1)

    return pd.DataFrame({
        "date": np.repeat(dates.values, n_lat * n_lon),
        "lon": np.tile(lons, n_time * n_lat),
        "lat": np.tile(np.repeat(lats, n_lon), n_time),
        VALUE_NAME: values,
    })


def densify(df: pd.DataFrame) -> xr.DataArray:
    """Rebuild a SubArray from long-form rows.

    Axes are the sorted unique lon, lat and date values in ``df``; cells
    with no row are NaN.

    Raises
    ------
    InvalidInput
        Missing columns, or more than one row for a (date, lon, lat) cell.
    """
    require(isinstance(df, pd.DataFrame), f"Expected DataFrame, got {type(df).__name__}", InvalidInput)
    missing = [c for c in TIDY_COLUMNS if c not in df.columns]
    require(not missing, f"Long-form table is missing columns {missing}", InvalidInput)
    require(
        not df.duplicated(subset=["date", "lon", "lat"]).any(),
        "Long-form table has duplicate (date, lon, lat) rows",
        InvalidInput,
    )

    indexed = df.set_index(["lon", "lat", "date"])[VALUE_NAME]
    da = xr.DataArray.from_series(indexed).rename({"date": "time"})
    da = da.sortby(list(SUBARRAY_DIMS)).transpose(*SUBARRAY_DIMS)
    da.name = VALUE_NAME
    return da
