"""Centralized error taxonomy for cpcrain.

Queries fail fast, loud, and once. Every failure raised by this package
derives from CpcError, so callers can catch the whole family at once or
pick the specific condition they know how to handle.
"""


class CpcError(Exception):
    """Base class for all cpcrain failures."""


class InvalidInput(CpcError, ValueError):
    """Raised for malformed request parameters.

    Bad dates, wrong-length limit pairs, out-of-domain coordinates, off-grid
    coordinates when snapping is disabled, or malformed data passed between
    components. Never retried.
    """


class DataUnavailable(CpcError, FileNotFoundError):
    """Raised when a requested year's file is missing or cannot be opened.

    The caller is expected to materialize the missing year and re-run the
    whole query. Nothing here fetches data.
    """


class CorruptData(CpcError, RuntimeError):
    """Raised when a present file breaks the grid/dimension/calendar contract.

    Also raised when per-year coordinate labels disagree during stitching.
    Always fatal to the query.
    """
