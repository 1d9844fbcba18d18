"""Year file access.

- locator: Year <-> filename mapping and discovery
- reader: Windowed extraction from one year file
"""

from cpcrain.io.locator import YearFileLocator
from cpcrain.io.reader import YearSliceReader

__all__ = [
    "YearFileLocator",
    "YearSliceReader",
]
