from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from typing import Optional

import numpy as np


class HolidayType(str, enum.Enum):
    """
    Why a date is not a workday.

    The member set belongs to the rule engine that feeds the cache; the cache
    itself only ever assigns WEEKEND.
    """

    WEEKEND = "WEEKEND"
    PUBLIC_HOLIDAY = "PUBLIC_HOLIDAY"
    SUBSTITUTED_HOLIDAY = "SUBSTITUTED_HOLIDAY"   # day off in exchange for a worked day
    SUBSTITUTED_WORKDAY = "SUBSTITUTED_WORKDAY"   # normally free day that is worked


WEEKMASK = "1111100"   # Mon–Fri


def is_weekday(day: Optional[date]) -> bool:
    if day is None:
        return False
    return bool(np.is_busday(np.datetime64(day, "D"), weekmask=WEEKMASK))


@dataclass(frozen=True, slots=True)
class DayRecord:
    """
    Classification of a single calendar date.

    Optional fields are None when not applicable.  ``holiday_type`` and
    ``description`` carry no meaning for workdays but are stored as given.
    """

    date: date
    is_workday: bool
    holiday_type: Optional[HolidayType] = None
    substituted_day: Optional[date] = None
    description: Optional[str] = None

    @classmethod
    def default(cls, day: date) -> "DayRecord":
        workday = is_weekday(day)
        return cls(day, workday, None if workday else HolidayType.WEEKEND)
