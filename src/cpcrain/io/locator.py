"""Year file discovery.

The only place that knows how year files are named. Everything else deals
in years and paths.
"""

import logging
import re
from pathlib import Path

__all__ = ['YearFileLocator']

logger = logging.getLogger(__name__)


class YearFileLocator:
    """Map years to files under one directory, and list the years present.

    Parameters
    ----------
    data_dir : Path or str
        Directory holding the per-year files.
    filename_pattern : str
        Filename with a ``{year}`` placeholder, e.g. ``cpcRain_{year}.nc``.

    Examples
    --------
    >>> locator = YearFileLocator("/data/cpc")
    >>> locator.path_for(2012)
    PosixPath('/data/cpc/cpcRain_2012.nc')
    >>> sorted(locator.available_years())
    [2011, 2012]
    """

    def __init__(self, data_dir: Path | str, filename_pattern: str = "cpcRain_{year}.nc"):
        if "{year}" not in filename_pattern:
            raise ValueError(f"filename_pattern must contain '{{year}}', got {filename_pattern!r}")
        self.data_dir = Path(data_dir).expanduser()
        self.filename_pattern = filename_pattern
        prefix, _, suffix = filename_pattern.partition("{year}")
        self._regex = re.compile(rf"^{re.escape(prefix)}(\d{{4}}){re.escape(suffix)}$")
        self._glob = f"{prefix}*{suffix}"

    @classmethod
    def from_config(cls, config) -> "YearFileLocator":
        """Build from an InternalConfig."""
        return cls(config.data.data_dir, config.data.filename_pattern)

    def path_for(self, year: int) -> Path:
        return self.data_dir / self.filename_pattern.format(year=int(year))

    def available_years(self) -> set[int]:
        """Years with a matching file in ``data_dir``.

        Returns an empty set when the directory does not exist.
        """
        if not self.data_dir.is_dir():
            logger.debug("Data directory does not exist: %s", self.data_dir)
            return set()

        years = set()
        for path in self.data_dir.glob(self._glob):
            match = self._regex.match(path.name)
            if match and path.is_file():
                years.add(int(match.group(1)))

        logger.debug("Found %d year files in %s", len(years), self.data_dir)
        return years

    def __repr__(self):
        return f"YearFileLocator({str(self.data_dir)!r}, {self.filename_pattern!r})"
