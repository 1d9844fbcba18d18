"""SubArray contract.

A SubArray is a 3-D DataArray with dims (lon, lat, time) whose coordinate
labels line up index-for-index with the data. Every consumer of a SubArray
checks this before trusting the labels.
"""

import xarray as xr

from cpcrain.contracts.base import require
from cpcrain.contracts.failure import InvalidInput

SUBARRAY_DIMS = ("lon", "lat", "time")


def assert_subarray(da: xr.DataArray) -> None:
    """Enforce the SubArray contract.

    Parameters
    ----------
    da : xr.DataArray
        Output of YearSliceReader.read_year() or Stitcher.query().

    Raises
    ------
    InvalidInput
        If the array is not a labeled (lon, lat, time) block. This is a
        programming-contract violation, not a data condition.
    """
    require(
        isinstance(da, xr.DataArray),
        f"SubArray contract violated: got {type(da).__name__}, expected DataArray",
        InvalidInput,
    )
    require(
        tuple(da.dims) == SUBARRAY_DIMS,
        f"SubArray contract violated: dims are {tuple(da.dims)}, expected {SUBARRAY_DIMS}",
        InvalidInput,
    )
    for dim, size in zip(SUBARRAY_DIMS, da.shape):
        require(
            dim in da.coords,
            f"SubArray contract violated: missing '{dim}' labels",
            InvalidInput,
        )
        n_labels = da.coords[dim].size
        require(
            n_labels == size,
            f"SubArray contract violated: {n_labels} '{dim}' labels for axis of length {size}",
            InvalidInput,
        )
