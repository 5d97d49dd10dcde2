from datetime import datetime, timedelta, timezone as dt_timezone
from zoneinfo import ZoneInfo

import pytest
from django.test import override_settings
from freezegun import freeze_time

from apps.limits.limit import TimeRangeCalculator
from apps.limits.limit.time_range import (
    RESOLUTION,
    end_of_month,
    end_of_quarter,
    end_of_year,
    start_of_month,
    start_of_quarter,
    start_of_year,
)

SHANGHAI = ZoneInfo("Asia/Shanghai")


@pytest.fixture
def calculator():
    return TimeRangeCalculator()


@pytest.mark.parametrize("rule_type, start, end", [
    ("BUY_DAILY", datetime(2024, 5, 15), datetime(2024, 5, 15, 23, 59, 59, 999999)),
    ("BUY_MONTH", datetime(2024, 5, 1), datetime(2024, 5, 31, 23, 59, 59, 999999)),
    ("BUY_QUARTER", datetime(2024, 4, 1), datetime(2024, 6, 30, 23, 59, 59, 999999)),
    ("BUY_YEAR", datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 59, 59, 999999)),
])
def test_windows_contain_now(calculator, rule_type, start, end):
    now = datetime(2024, 5, 15, 13, 45, 12)

    window = calculator.get_time_range(rule_type, now)

    assert window.start == start
    assert window.end == end
    assert now in window


def test_unknown_type_falls_back_to_day(calculator):
    now = datetime(2024, 2, 29, 8, 0)

    window = calculator.get_time_range("BUY_TOTAL", now)

    assert window == calculator.get_time_range("BUY_DAILY", now)


def test_enum_members_are_accepted(calculator):
    from apps.limits.limit import SpuLimitType

    now = datetime(2024, 11, 3)
    window = calculator.get_time_range(SpuLimitType.BUY_QUARTER, now)

    assert window.start == datetime(2024, 10, 1)


def test_same_instant_gives_same_window(calculator):
    now = datetime(2023, 8, 31, 23, 59, 59)

    for rule_type in ("BUY_DAILY", "BUY_MONTH", "BUY_QUARTER", "BUY_YEAR"):
        assert calculator.get_time_range(rule_type, now) == calculator.get_time_range(rule_type, now)


@pytest.mark.parametrize("moment", [
    datetime(2024, 1, 31, 12),
    datetime(2024, 2, 29, 23, 59, 59),
    datetime(2023, 2, 28),
    datetime(2024, 12, 31, 23, 59, 59, 999999),
])
def test_month_windows_are_contiguous(moment):
    following = end_of_month(moment) + RESOLUTION

    assert following.day == 1
    assert following == start_of_month(following)
    assert end_of_month(moment) < following


@pytest.mark.parametrize("month", range(1, 13))
def test_quarter_windows_are_contiguous(month):
    moment = datetime(2024, month, 10)
    end = end_of_quarter(moment)

    assert start_of_quarter(moment).month in (1, 4, 7, 10)
    assert (end + RESOLUTION) == start_of_quarter(end + RESOLUTION)
    assert (end + RESOLUTION).month in (1, 4, 7, 10)


def test_year_windows_are_contiguous():
    end = end_of_year(datetime(2024, 7, 1))

    assert end + RESOLUTION == start_of_year(datetime(2025, 3, 1))


@override_settings(TIME_ZONE="Asia/Shanghai")
def test_aware_now_is_aligned_to_local_time(calculator):
    # 17:00 UTC on 31 March is already 1 April in Shanghai.
    now = datetime(2024, 3, 31, 17, 0, tzinfo=dt_timezone.utc)

    window = calculator.get_time_range("BUY_QUARTER", now)

    assert window.start == datetime(2024, 4, 1, tzinfo=SHANGHAI)
    assert window.end == datetime(2024, 6, 30, 23, 59, 59, 999999, tzinfo=SHANGHAI)
    assert now in window


@override_settings(TIME_ZONE="Asia/Shanghai")
@freeze_time("2024-05-15 20:30:00")
def test_defaults_to_current_local_time(calculator):
    window = calculator.get_time_range("BUY_DAILY")

    # 20:30 UTC is 04:30 the next morning in Shanghai.
    assert window.start == datetime(2024, 5, 16, tzinfo=SHANGHAI)
    assert window.end - window.start == timedelta(days=1) - RESOLUTION
