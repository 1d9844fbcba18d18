"""Calendar helpers: per-year date sequences and YearSegment splitting."""

from dataclasses import dataclass
from datetime import date

import pandas as pd

__all__ = ['YearSegment', 'year_calendar', 'split_by_year']


@dataclass(frozen=True)
class YearSegment:
    """Portion of a requested date range that falls within one calendar year."""
    year: int
    start: date
    end: date

    @property
    def n_days(self) -> int:
        return (self.end - self.start).days + 1


def year_calendar(year: int) -> pd.DatetimeIndex:
    """Every date of ``year``, Jan 1 to Dec 31 (365 or 366 entries)."""
    return pd.date_range(date(year, 1, 1), date(year, 12, 31), freq="D")


def split_by_year(start: date, end: date) -> list[YearSegment]:
    """Split an inclusive date range into one segment per calendar year.

    The first segment starts at ``start`` and the last ends at ``end``;
    interior years cover Jan 1 to Dec 31. Concatenated, the segments cover
    the range with no gap and no overlap.

    Examples
    --------
    >>> split_by_year(date(2010, 12, 15), date(2011, 1, 10))
    [YearSegment(year=2010, start=datetime.date(2010, 12, 15), end=datetime.date(2010, 12, 31)),
     YearSegment(year=2011, start=datetime.date(2011, 1, 1), end=datetime.date(2011, 1, 10))]
    """
    if start > end:
        return []
    segments = []
    for year in range(start.year, end.year + 1):
        seg_start = start if year == start.year else date(year, 1, 1)
        seg_end = end if year == end.year else date(year, 12, 31)
        segments.append(YearSegment(year, seg_start, seg_end))
    return segments

