"""Canonical grid catalogue."""

from cpcrain.grid.catalog import GridCatalog, cpc_global

__all__ = ["GridCatalog", "cpc_global"]
