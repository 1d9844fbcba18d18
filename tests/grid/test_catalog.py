import numpy as np
import pytest

from cpcrain.contracts import InvalidInput
from cpcrain.grid import GridCatalog, cpc_global

pytestmark = pytest.mark.unit


def brute_force_nearest(values, v):
    """Linear scan in stored order; argmin keeps the first minimum."""
    return float(values[np.argmin(np.abs(values - v))])


class TestDefaultGrid:

    def test_cpc_global_shape(self):
        catalog = cpc_global()
        assert catalog.lons().size == 720
        assert catalog.lats().size == 360
        assert catalog.lons()[0] == 0.25 and catalog.lons()[-1] == 359.75
        assert catalog.lats()[0] == -89.75 and catalog.lats()[-1] == 89.75

    def test_cpc_global_is_cached(self):
        assert cpc_global() is cpc_global()

    def test_vectors_are_read_only(self):
        with pytest.raises(ValueError):
            cpc_global().lons()[0] = 1.0


class TestValidation:

    def test_rejects_unsorted(self):
        with pytest.raises(InvalidInput, match="ascending"):
            GridCatalog([1.0, 0.5], [0.0, 1.0])

    def test_rejects_out_of_domain(self):
        with pytest.raises(InvalidInput, match="lat vector"):
            GridCatalog([0.5, 1.0], [-95.0, 0.0])

    def test_rejects_empty(self):
        with pytest.raises(InvalidInput, match="empty"):
            GridCatalog([], [0.0])


class TestLookup:

    def test_contains_is_exact(self, small_catalog):
        assert small_catalog.contains("lat", 10.25)
        assert not small_catalog.contains("lat", 10.2500001)
        assert not small_catalog.contains("lon", 200.0)

    def test_index_of(self, small_catalog):
        assert small_catalog.index_of("lon", 100.25) == 0
        assert small_catalog.index_of("lat", 11.25) == 4

    def test_index_of_off_grid_fails(self, small_catalog):
        with pytest.raises(InvalidInput, match="not a lon grid point"):
            small_catalog.index_of("lon", 100.3)

    def test_unknown_axis(self, small_catalog):
        with pytest.raises(InvalidInput, match="Unknown grid axis"):
            small_catalog.axis("time")

    @pytest.mark.parametrize("v", [
        -90.0, 0.0, 9.0, 9.25, 9.3, 9.5, 9.74, 10.0, 10.3, 10.5, 11.0, 11.25, 11.26, 50.0,
    ])
    def test_nearest_matches_linear_scan(self, small_catalog, v):
        lats = small_catalog.lats()
        assert small_catalog.nearest("lat", v) == brute_force_nearest(lats, v)

    def test_nearest_tie_prefers_first_in_stored_order(self, small_catalog):
        # 10.5 is equidistant from 10.25 and 10.75
        assert small_catalog.nearest("lat", 10.5) == 10.25

    def test_nearest_on_default_grid(self):
        catalog = cpc_global()
        rng = np.random.default_rng(0)
        for v in rng.uniform(0, 360, size=200):
            assert catalog.nearest("lon", v) == brute_force_nearest(catalog.lons(), v)
