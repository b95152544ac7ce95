"""
workdays.cache
~~~~~~~~~~~~~~

In-memory workday calendar.  Every cached year holds one DayRecord per date,
in chronological order, telling whether that date is a workday and, if not,
why (weekend, public holiday, substitution).

Basic usage::

    from datetime import date
    from workdays.cache import HolidayType, WorkdayCache

    cache = WorkdayCache()
    cache.init_year(2024)                      # 366 default Mon–Fri records
    cache.put(date(2024, 12, 25), False,
              HolidayType.PUBLIC_HOLIDAY, None, "Christmas")
    cache.is_workday(date(2024, 12, 25))       # → False

Vectorized reporting::

    mask = cache.workday_mask(2024)            # numpy bool array, Jan 1 → Dec 31
    int(mask.sum())                            # → number of workdays

Public API
----------
WorkdayCache       The cache.
DayRecord          Immutable classification of one date.
HolidayType        Reasons a date is not a workday.
WorkdayCacheError  Raised for malformed (non-None) years and dates.
is_weekday         Mon–Fri test used for the default classification.
"""

from __future__ import annotations

from workdays.cache._exceptions import WorkdayCacheError
from workdays.cache.cache import WorkdayCache
from workdays.cache.records import DayRecord, HolidayType, is_weekday

__all__ = [
    "DayRecord",
    "HolidayType",
    "WorkdayCache",
    "WorkdayCacheError",
    "is_weekday",
]
