from __future__ import annotations

import calendar
import contextlib
import logging
import threading
import warnings
from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Any, ContextManager, Optional

import numpy as np

from ._exceptions import WorkdayCacheError
from .records import DayRecord, HolidayType

logger = logging.getLogger(__name__)

YearDays = dict[date, DayRecord]

# put() without a holiday_type: WEEKEND for non-workdays, None otherwise.
_DEFAULT_TYPE: Any = object()


def _check_year(year: Any) -> int:
    if isinstance(year, bool) or not isinstance(year, (int, np.integer)):
        raise WorkdayCacheError(f"Year must be an integer; got {year!r}.")
    year = int(year)
    if not MINYEAR <= year <= MAXYEAR:
        raise WorkdayCacheError(
            f"Year must be between {MINYEAR} and {MAXYEAR}; got {year}."
        )
    return year


def _check_date(day: Any) -> date:
    # datetime is a date subclass but carries a time of day.
    if isinstance(day, datetime) or not isinstance(day, date):
        raise WorkdayCacheError(f"Expected a datetime.date; got {day!r}.")
    return day


def _build_year(year: int) -> YearDays:
    n_days = 366 if calendar.isleap(year) else 365
    days = np.datetime64(date(year, 1, 1), "D") + np.arange(n_days)
    return {day: DayRecord.default(day) for day in days.tolist()}


class WorkdayCache:
    """
    In-memory workday calendar: year -> {date -> DayRecord}.

    A year is either absent or holds every one of its days in ascending date
    order.  Years are materialized with a default Mon–Fri classification by
    init_year(), or lazily by the first put() that touches them.

    The host constructs one instance and hands it to whoever needs it.  With
    ``synchronized=True`` (the default) all writes and copying reads go through
    a re-entrant lock; get_cache() always returns the live, unguarded mapping.

    None years and dates are silently ignored.  Any other year that is not an
    int in 1..9999, or date that is not a plain datetime.date, raises
    WorkdayCacheError (a ValueError).
    """

    def __init__(self, *, synchronized: bool = True) -> None:
        self._cache: dict[int, YearDays] = {}
        self._synchronized: bool = bool(synchronized)
        self._lock: ContextManager[Any] = (
            threading.RLock() if self._synchronized else contextlib.nullcontext()
        )

    # ── mutation ─────────────────────────────────────────────────────────

    def init_year(self, year: Optional[int]) -> None:
        """
        Fill ``year`` with default records, replacing whatever was there.

        Overrides previously put() into that year are discarded.  ``None`` is
        ignored.
        """
        if year is None:
            logger.debug("init_year() called without a year; ignored.")
            return
        year = _check_year(year)

        days = _build_year(year)
        with self._lock:
            previous = self._cache.get(year)
            self._cache[year] = days

        if previous is not None:
            discarded = sum(1 for day, rec in previous.items() if rec != days[day])
            if discarded:
                logger.info(
                    "Re-initialized year %d; discarded %d overridden date(s).",
                    year, discarded,
                )
        logger.debug("Initialized year %d with %d days.", year, len(days))

    def put(
        self,
        day: Optional[date],
        is_workday: bool,
        holiday_type: Optional[HolidayType] = _DEFAULT_TYPE,
        substituted_day: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """
        Store a record for ``day`` built from exactly the given fields.

        The record at ``day`` is replaced, never merged.  If the year of
        ``day`` is not cached yet it is initialized first.  ``None`` is ignored.

        Left out, ``holiday_type`` becomes WEEKEND for a non-workday and None
        for a workday; pass None explicitly to store a non-workday untyped.
        """
        if day is None:
            logger.debug("put() called without a date; ignored.")
            return
        day = _check_date(day)
        if substituted_day is not None:
            substituted_day = _check_date(substituted_day)
        if holiday_type is _DEFAULT_TYPE:
            holiday_type = None if is_workday else HolidayType.WEEKEND

        record = DayRecord(
            day, bool(is_workday), holiday_type, substituted_day, description
        )
        with self._lock:
            if day.year not in self._cache:
                self.init_year(day.year)
            self._cache[day.year][day] = record
        logger.debug("Stored %s.", record)

    def put_workday(self, day: Optional[date], is_workday: bool) -> None:
        """Deprecated: put(day, is_workday) does the same."""
        warnings.warn(
            "put_workday() is deprecated; use put().",
            DeprecationWarning,
            stacklevel=2,
        )
        self.put(day, is_workday)

    # ── reads ────────────────────────────────────────────────────────────

    def get_cache(self) -> dict[int, YearDays]:
        return self._cache

    def get(self, day: Optional[date]) -> Optional[DayRecord]:
        if day is None:
            return None
        day = _check_date(day)
        with self._lock:
            year_days = self._cache.get(day.year)
            return year_days.get(day) if year_days is not None else None

    def is_workday(self, day: Optional[date]) -> Optional[bool]:
        """Stored classification of ``day``, or None if its year is not cached."""
        record = self.get(day)
        return record.is_workday if record is not None else None

    def days(self, year: Optional[int]) -> list[DayRecord]:
        if year is None:
            return []
        year = _check_year(year)
        with self._lock:
            return list(self._cache.get(year, {}).values())

    def workday_mask(self, year: Optional[int]) -> np.ndarray:
        records = self.days(year)
        return np.fromiter(
            (rec.is_workday for rec in records), dtype=bool, count=len(records)
        )

    def snapshot(self) -> dict[int, YearDays]:
        # Records are frozen, so copying both mapping levels is enough.
        with self._lock:
            return {year: dict(days) for year, days in self._cache.items()}

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def synchronized(self) -> bool:
        return self._synchronized

    @property
    def years(self) -> list[int]:
        with self._lock:
            return sorted(self._cache)

    def __contains__(self, year: object) -> bool:
        return year in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return (
            f"WorkdayCache(years={self.years}, "
            f"synchronized={self._synchronized})"
        )
