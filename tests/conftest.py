"""Root-level pytest fixtures for the cpcrain test suite.

Tests run against a tiny synthetic grid so year files stay small.
"""

import pytest

from cpcrain.grid import GridCatalog
from cpcrain.io import YearFileLocator
from cpcrain.query import Stitcher
from cpcrain.schemas import ParamConfig, resolve_config
from tests.helpers.fake_cpc import SMALL_GRID, write_year_file


@pytest.fixture
def small_catalog():
    return GridCatalog.from_config(SMALL_GRID)


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "cpc"
    d.mkdir()
    return d


@pytest.fixture
def make_config(data_dir):
    """Factory for InternalConfig on the small grid.

    Examples
    --------
    >>> def test_array(make_config):
    ...     config = make_config(TIDY=False)
    """
    def _make(**user_overrides):
        param = ParamConfig(grid=SMALL_GRID)
        return resolve_config(param, user_overrides, {"data": {"data_dir": str(data_dir)}})

    return _make


@pytest.fixture
def internal_config(make_config):
    return make_config()


@pytest.fixture
def year_files(data_dir, small_catalog):
    """Write year files on the small grid; returns {year: values (lon, lat, time)}."""
    def _write(*years, **kwargs):
        written = {}
        locator = YearFileLocator(data_dir)
        for year in years:
            written[year] = write_year_file(
                locator.path_for(year), year,
                small_catalog.lons(), small_catalog.lats(), **kwargs,
            )
        return written

    return _write


@pytest.fixture
def stitcher(internal_config, small_catalog):
    return Stitcher(internal_config, catalog=small_catalog)
