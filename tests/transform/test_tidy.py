import numpy as np
import pandas as pd
import pytest
import xarray as xr

from cpcrain.contracts import InvalidInput
from cpcrain.transform import TIDY_COLUMNS, densify, melt

pytestmark = pytest.mark.unit


@pytest.fixture
def block():
    lons = [100.25, 100.75, 101.25]
    lats = [9.25, 9.75]
    times = pd.date_range("2011-12-31", periods=3, freq="D")
    values = np.arange(18, dtype="float64").reshape(3, 2, 3)
    values[2, 1, 0] = np.nan
    return xr.DataArray(
        values,
        dims=("lon", "lat", "time"),
        coords={"lon": lons, "lat": lats, "time": times},
        name="precip_mm",
    )


class TestMelt:

    def test_one_row_per_cell(self, block):
        df = melt(block)
        assert list(df.columns) == TIDY_COLUMNS
        assert len(df) == block.size

    def test_rows_carry_cell_values(self, block):
        df = melt(block)
        for row in df.itertuples(index=False):
            cell = block.sel(lon=row.lon, lat=row.lat, time=row.date)
            np.testing.assert_equal(row.precip_mm, cell.item())

    def test_row_order_lon_fastest(self, block):
        df = melt(block)
        head = df.head(4)
        assert list(head["lon"]) == [100.25, 100.75, 101.25, 100.25]
        assert list(head["lat"]) == [9.25, 9.25, 9.25, 9.75]
        assert (head["date"] == pd.Timestamp("2011-12-31")).all()
        assert df["date"].is_monotonic_increasing

    def test_missing_values_are_kept(self, block):
        df = melt(block)
        assert df["precip_mm"].isna().sum() == 1

    def test_single_cell(self):
        da = xr.DataArray(
            np.array([[[4.5]]]),
            dims=("lon", "lat", "time"),
            coords={"lon": [0.25], "lat": [-89.75], "time": pd.to_datetime(["2000-01-01"])},
        )
        df = melt(da)
        assert len(df) == 1
        assert df.iloc[0]["precip_mm"] == 4.5

    def test_wrong_dim_order(self, block):
        with pytest.raises(InvalidInput, match="dims"):
            melt(block.transpose("lat", "lon", "time"))

    def test_not_three_dimensional(self, block):
        with pytest.raises(InvalidInput, match="dims"):
            melt(block.isel(time=0))

    def test_missing_labels(self):
        da = xr.DataArray(np.zeros((2, 2, 2)), dims=("lon", "lat", "time"))
        with pytest.raises(InvalidInput, match="missing 'lon' labels"):
            melt(da)

    def test_not_a_dataarray(self, block):
        with pytest.raises(InvalidInput, match="expected DataArray"):
            melt(block.values)


class TestDensify:

    def test_round_trip(self, block):
        xr.testing.assert_equal(densify(melt(block)), block)

    def test_row_order_does_not_matter(self, block):
        shuffled = melt(block).sample(frac=1.0, random_state=0)
        xr.testing.assert_equal(densify(shuffled), block)

    def test_absent_rows_become_nan(self, block):
        df = melt(block).iloc[1:]
        da = densify(df)
        assert da.shape == block.shape
        assert np.isnan(da.values[0, 0, 0])

    def test_duplicates_rejected(self, block):
        df = melt(block)
        with pytest.raises(InvalidInput, match="duplicate"):
            densify(pd.concat([df, df.head(1)]))

    def test_missing_column_rejected(self, block):
        with pytest.raises(InvalidInput, match="precip_mm"):
            densify(melt(block).drop(columns="precip_mm"))
