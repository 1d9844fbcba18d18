"""Multi-year query orchestration.

Resolves a request, reads one block per year in ascending order, and
concatenates the blocks along time. Any failure aborts the whole query;
there is no best-effort mode.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd
import xarray as xr

from cpcrain.contracts import CorruptData, InvalidInput, require
from cpcrain.grid.catalog import GridCatalog, cpc_global
from cpcrain.io.locator import YearFileLocator
from cpcrain.io.reader import YearSliceReader
from cpcrain.query.resolver import RangeResolver, ResolvedRequest
from cpcrain.query.segments import split_by_year
from cpcrain.schemas import InternalConfig, GridConfig, ParamConfig, UserConfig, resolve_config
from cpcrain.transform.tidy import melt

__all__ = ['Stitcher', 'read_cpc']

logger = logging.getLogger(__name__)


def _catalog_for(config: InternalConfig) -> GridCatalog:
    grid = GridConfig(**config.grid.model_dump())
    if grid == GridConfig():
        return cpc_global()
    return GridCatalog.from_config(grid)


class Stitcher:
    """Answer spatiotemporal queries across per-year files.

    Parameters
    ----------
    config : InternalConfig
        Resolved runtime configuration.
    locator : YearFileLocator, optional
        File discovery. Built from ``config.data`` when omitted.
    catalog : GridCatalog, optional
        Grid. Built from ``config.grid`` when omitted.

    Notes
    -----
    - Years are read one after another; only one file is open at a time.
    - Per-year lon/lat labels must agree; a mismatch is CorruptData.

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(DATA_DIR="/data/cpc"))
    >>> stitcher = Stitcher(config)
    >>> df = stitcher.query("2010-12-15", "2011-01-10", (30, 40), (260, 270))
    """

    def __init__(self, config: InternalConfig, locator: Optional[YearFileLocator] = None,
                 catalog: Optional[GridCatalog] = None):
        self.config = config
        self.locator = locator if locator is not None else YearFileLocator.from_config(config)
        self.catalog = catalog if catalog is not None else _catalog_for(config)
        self.resolver = RangeResolver(self.catalog)
        self.reader = YearSliceReader.from_config(config, self.catalog)

    def resolve(self, start_date, end_date, lat_lims, lon_lims,
                round_to_grid: Optional[bool] = None) -> ResolvedRequest:
        """Validate a request against the grid and the files on disk."""
        if round_to_grid is None:
            round_to_grid = self.config.query.round_to_grid
        require(
            self.locator.data_dir.is_dir(),
            f"Invalid data directory: {self.locator.data_dir}",
            InvalidInput,
        )
        return self.resolver.resolve(
            start_date, end_date, lat_lims, lon_lims,
            self.locator.available_years(), round_to_grid,
        )

    def query(self, start_date, end_date, lat_lims, lon_lims,
              tidy: Optional[bool] = None,
              round_to_grid: Optional[bool] = None) -> Union[pd.DataFrame, xr.DataArray]:
        """Extract and stitch the requested block.

        Parameters
        ----------
        start_date, end_date : date-like
            Inclusive date range; may span years.
        lat_lims, lon_lims : sequence of 2 floats
            Latitude in [-90, 90], longitude in [0, 360].
        tidy : bool, optional
            Return a long-form DataFrame instead of a 3-D array. Defaults to
            ``config.query.tidy``.
        round_to_grid : bool, optional
            Snap off-grid limits to the nearest grid point instead of
            failing. Defaults to ``config.query.round_to_grid``.

        Returns
        -------
        pd.DataFrame or xr.DataArray
            Rows (date, lon, lat, precip_mm), or a (lon, lat, time) array.

        Raises
        ------
        InvalidInput, DataUnavailable, CorruptData
        """
        if tidy is None:
            tidy = self.config.query.tidy

        request = self.resolve(start_date, end_date, lat_lims, lon_lims, round_to_grid)

        blocks = []
        for segment in split_by_year(request.start_date, request.end_date):
            block = self.reader.read_year(
                segment.year, segment.start, segment.end, request.box,
                self.locator.path_for(segment.year),
            )
            if blocks:
                self._check_labels(blocks[0], block, segment.year)
            blocks.append(block)

        logger.info(
            "Read %d year(s) %s..%s: %d lon x %d lat x %d days",
            len(blocks), request.start_date, request.end_date,
            blocks[0].sizes["lon"], blocks[0].sizes["lat"],
            sum(b.sizes["time"] for b in blocks),
        )

        if tidy:
            return pd.concat([melt(b) for b in blocks], ignore_index=True)

        if len(blocks) == 1:
            return blocks[0]
        return xr.concat(blocks, dim="time", coords="minimal", join="exact")

    @staticmethod
    def _check_labels(first: xr.DataArray, block: xr.DataArray, year: int) -> None:
        for axis in ("lon", "lat"):
            require(
                np.array_equal(first[axis].values, block[axis].values),
                f"{axis} labels for {year} differ from the first year of the query",
                CorruptData,
            )


def read_cpc(start_date, end_date, lat_lims, lon_lims, data_dir: Union[str, Path],
             tidy: bool = True, round_to_grid: bool = True,
             config: Optional[Union[dict, UserConfig]] = None) -> Union[pd.DataFrame, xr.DataArray]:
    """Query CPC precipitation from the year files in ``data_dir``.

    Single entry point. ``data_dir`` is required; there is no default
    directory.

    Parameters
    ----------
    start_date, end_date : date-like
        Inclusive date range.
    lat_lims, lon_lims : sequence of 2 floats
        Bounding box limits.
    data_dir : str or Path
        Directory containing the per-year files.
    tidy : bool, default True
        Long-form DataFrame if True, (lon, lat, time) DataArray if False.
    round_to_grid : bool, default True
        Snap off-grid limits instead of failing.
    config : dict or UserConfig, optional
        Further overrides (file pattern, variable name, grid).

    Returns
    -------
    pd.DataFrame or xr.DataArray
        Dates are ``datetime64`` values, not ISO strings; use
        ``df["date"].dt.strftime("%Y-%m-%d")`` when text labels are needed.

    Examples
    --------
    >>> df = read_cpc(date(2012, 6, 1), date(2012, 6, 30),
    ...               lat_lims=(35, 45), lon_lims=(250, 260),
    ...               data_dir="/data/cpc")
    >>> df.columns.tolist()
    ['date', 'lon', 'lat', 'precip_mm']
    """
    internal = resolve_config(ParamConfig(), config, {"data": {"data_dir": str(data_dir)}})
    return Stitcher(internal).query(
        start_date, end_date, lat_lims, lon_lims,
        tidy=tidy, round_to_grid=round_to_grid,
    )
