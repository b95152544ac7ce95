from __future__ import annotations

import dataclasses
from datetime import date, timedelta

import pytest

from workdays.cache import DayRecord, HolidayType, is_weekday


def test_is_weekday_monday_to_friday() -> None:
    # 2024-01-08 is a Monday
    for offset in range(5):
        assert is_weekday(date(2024, 1, 8 + offset))


def test_is_weekday_saturday_and_sunday() -> None:
    assert not is_weekday(date(2024, 1, 6))
    assert not is_weekday(date(2024, 1, 7))


def test_is_weekday_none_is_false() -> None:
    assert is_weekday(None) is False


def test_default_record_for_weekday() -> None:
    rec = DayRecord.default(date(2024, 1, 8))
    assert rec == DayRecord(date(2024, 1, 8), True)
    assert rec.holiday_type is None
    assert rec.substituted_day is None
    assert rec.description is None


def test_default_record_for_weekend() -> None:
    rec = DayRecord.default(date(2024, 1, 6))
    assert rec.is_workday is False
    assert rec.holiday_type is HolidayType.WEEKEND


def test_record_is_immutable() -> None:
    rec = DayRecord(date(2024, 1, 8), True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.is_workday = False  # type: ignore[misc]


def test_record_equality_covers_all_fields() -> None:
    a = DayRecord(date(2024, 12, 25), False, HolidayType.PUBLIC_HOLIDAY, None, "Christmas")
    b = DayRecord(date(2024, 12, 25), False, HolidayType.PUBLIC_HOLIDAY, None, "Xmas")
    assert a != b
    assert a == dataclasses.replace(b, description="Christmas")


def test_workday_may_carry_holiday_metadata() -> None:
    # Worked Saturday compensating for a bridge holiday.
    rec = DayRecord(
        date(2024, 12, 7), True, HolidayType.SUBSTITUTED_WORKDAY, date(2024, 12, 27), "Worked Saturday"
    )
    assert rec.is_workday
    assert rec.holiday_type is HolidayType.SUBSTITUTED_WORKDAY


def test_holiday_type_is_str_enum() -> None:
    assert HolidayType.WEEKEND == "WEEKEND"
    assert HolidayType("PUBLIC_HOLIDAY") is HolidayType.PUBLIC_HOLIDAY


def test_is_weekday_agrees_with_date_weekday() -> None:
    day = date(2023, 12, 1)
    for _ in range(60):
        assert is_weekday(day) == (day.weekday() < 5)
        day += timedelta(days=1)
