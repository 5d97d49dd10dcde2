"""Calendar windows for the period-based purchase caps."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from django.utils import timezone

# Smallest step between the end of one window and the start of the next.
RESOLUTION = timedelta(microseconds=1)


@dataclass(frozen=True)
class TimeRange:
    """An inclusive ``[start, end]`` window."""
    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=23, minute=59, second=59, microsecond=999999)


def start_of_month(moment: datetime) -> datetime:
    return start_of_day(moment).replace(day=1)


def end_of_month(moment: datetime) -> datetime:
    first = start_of_month(moment)
    if first.month == 12:
        following = first.replace(year=first.year + 1, month=1)
    else:
        following = first.replace(month=first.month + 1)
    return following - RESOLUTION


def start_of_quarter(moment: datetime) -> datetime:
    first_month = 3 * ((moment.month - 1) // 3) + 1
    return start_of_day(moment).replace(month=first_month, day=1)


def end_of_quarter(moment: datetime) -> datetime:
    last_month = start_of_quarter(moment).month + 2
    return end_of_month(moment.replace(month=last_month, day=1))


def start_of_year(moment: datetime) -> datetime:
    return start_of_day(moment).replace(month=1, day=1)


def end_of_year(moment: datetime) -> datetime:
    return end_of_day(moment).replace(month=12, day=31)


class TimeRangeCalculator:
    """
    Map a rule type to the calendar window that contains ``now``.

    Windows are aligned in the project's reference timezone
    (``settings.TIME_ZONE``); aware datetimes are converted to it first.
    Unknown types fall back to the current day.
    """

    _BOUNDS = {
        "BUY_DAILY": (start_of_day, end_of_day),
        "BUY_MONTH": (start_of_month, end_of_month),
        "BUY_QUARTER": (start_of_quarter, end_of_quarter),
        "BUY_YEAR": (start_of_year, end_of_year),
    }

    def get_time_range(self, rule_type, now: Optional[datetime] = None) -> TimeRange:
        if now is None:
            now = timezone.localtime()
        elif timezone.is_aware(now):
            now = timezone.localtime(now)

        start, end = self._BOUNDS.get(str(rule_type), (start_of_day, end_of_day))
        return TimeRange(start=start(now), end=end(now))
