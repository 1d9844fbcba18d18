"""Tests for the error taxonomy and boundary checks."""

import numpy as np
import pytest
import xarray as xr

from cpcrain.contracts import (
    CorruptData,
    CpcError,
    DataUnavailable,
    InvalidInput,
    assert_subarray,
    require,
)

pytestmark = pytest.mark.unit


class TestTaxonomy:

    def test_all_errors_share_base(self):
        for error in (InvalidInput, DataUnavailable, CorruptData):
            assert issubclass(error, CpcError)

    def test_builtin_families(self):
        assert issubclass(InvalidInput, ValueError)
        assert issubclass(DataUnavailable, FileNotFoundError)
        assert issubclass(CorruptData, RuntimeError)


class TestRequire:

    def test_passes_silently(self):
        require(True, "never raised")

    def test_defaults_to_corrupt_data(self):
        with pytest.raises(CorruptData, match="broken"):
            require(False, "broken")

    def test_raises_requested_error(self):
        with pytest.raises(InvalidInput, match="bad request"):
            require(False, "bad request", InvalidInput)


class TestSubArrayContract:

    def test_valid_subarray(self):
        da = xr.DataArray(
            np.zeros((2, 1, 3)),
            dims=("lon", "lat", "time"),
            coords={"lon": [0.25, 0.75], "lat": [0.25], "time": np.arange(3)},
        )
        assert_subarray(da)

    def test_missing_time_labels(self):
        da = xr.DataArray(
            np.zeros((2, 1, 3)),
            dims=("lon", "lat", "time"),
            coords={"lon": [0.25, 0.75], "lat": [0.25]},
        )
        with pytest.raises(InvalidInput, match="missing 'time' labels"):
            assert_subarray(da)
