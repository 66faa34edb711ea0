"""Calendar date-times with second precision, and spans of seconds between them."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from functools import total_ordering

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60

# 3.1.2000 was a Monday; weekdays are numbered 1 (Monday) to 7 (Sunday).
_REFERENCE_MONDAY_DAYS = 10959

_DATE_TIME_PATTERN = re.compile(
    r"\s*(-?\d+)\.(\d+)\.(-?\d+)\s+(\d+):(\d+):(\d+)\s*"
)


def is_leap_year(year: int) -> bool:
    """Report whether ``year`` has a 29th of February."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"month {month} is out of range 1..12")


def is_valid(year: int, month: int, day: int, hour: int, minute: int, second: int) -> bool:
    """Report whether the fields name an existing moment."""
    if not 1 <= month <= 12:
        return False
    return (
        1 <= day <= days_in_month(year, month)
        and 0 <= hour <= 23
        and 0 <= minute <= 59
        and 0 <= second <= 59
    )


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _days_from_civil(year: int, month: int, day: int) -> int:
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


def _civil_from_days(days: int) -> tuple[int, int, int]:
    days += 719468
    era = days // 146097
    day_of_era = days - era * 146097
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + (3 if shifted_month < 10 else -9)
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


@dataclass(frozen=True, order=True)
class TimeSpan:
    """A signed number of seconds."""

    seconds: int = 0

    def minutes(self) -> int:
        """Return the whole minutes, truncated toward zero."""
        return _truncating_div(self.seconds, SECONDS_PER_MINUTE)

    def hours(self) -> int:
        """Return the whole hours, truncated toward zero."""
        return _truncating_div(self.seconds, SECONDS_PER_HOUR)

    def days(self) -> int:
        """Return the whole days, truncated toward zero."""
        return _truncating_div(self.seconds, SECONDS_PER_DAY)

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-self.seconds)

    def __add__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.seconds + other.seconds)

    def __str__(self) -> str:
        return str(self.seconds)


@total_ordering
@dataclass(frozen=True)
class DateTime:
    """A moment given by calendar fields; 1.1.1970 0:0:0 by default."""

    day: int = 1
    month: int = 1
    year: int = 1970
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __init__(
        self,
        day: int = 1,
        month: int = 1,
        year: int = 1970,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        if not is_valid(year, month, day, hour, minute, second):
            raise ValueError(
                f"no such date-time: {day}.{month}.{year} {hour}:{minute}:{second}"
            )
        for name, value in (
            ("day", day),
            ("month", month),
            ("year", year),
            ("hour", hour),
            ("minute", minute),
            ("second", second),
        ):
            object.__setattr__(self, name, value)

    @classmethod
    def from_unixtime(cls, unixtime: int) -> DateTime:
        """Return the moment ``unixtime`` seconds after 1.1.1970 0:0:0."""
        days, rest = divmod(int(unixtime), SECONDS_PER_DAY)
        year, month, day = _civil_from_days(days)
        hour, rest = divmod(rest, SECONDS_PER_HOUR)
        minute, second = divmod(rest, SECONDS_PER_MINUTE)
        return cls(day, month, year, hour, minute, second)

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Read the form ``day.month.year hour:minute:second``."""
        match = _DATE_TIME_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a date-time: {text!r}")
        return cls(*(int(group) for group in match.groups()))

    @classmethod
    def now(cls) -> DateTime:
        """Return the current moment in UTC."""
        return cls.from_unixtime(int(time.time()))

    def unixtime(self) -> int:
        """Return the seconds elapsed since 1.1.1970 0:0:0."""
        days = _days_from_civil(self.year, self.month, self.day)
        return (
            days * SECONDS_PER_DAY
            + self.hour * SECONDS_PER_HOUR
            + self.minute * SECONDS_PER_MINUTE
            + self.second
        )

    def day_of_week(self) -> int:
        """Return the weekday, 1 for Monday through 7 for Sunday."""
        days = _days_from_civil(self.year, self.month, self.day)
        return (days - _REFERENCE_MONDAY_DAYS) % 7 + 1

    def _with_date(self, year: int, month: int, day: int) -> DateTime:
        day = min(day, days_in_month(year, month))
        return DateTime(day, month, year, self.hour, self.minute, self.second)

    def add_years(self, years: int) -> DateTime:
        """Return the moment ``years`` later; a 29th of February may become the 28th."""
        return self._with_date(self.year + years, self.month, self.day)

    def add_months(self, months: int) -> DateTime:
        """Return the moment ``months`` later, clamping the day to the new month."""
        year, month_index = divmod(self.year * 12 + self.month - 1 + months, 12)
        return self._with_date(year, month_index + 1, self.day)

    def add_days(self, days: int) -> DateTime:
        """Return the moment ``days`` later."""
        return self.add_seconds(days * SECONDS_PER_DAY)

    def add_hours(self, hours: int) -> DateTime:
        """Return the moment ``hours`` later."""
        return self.add_seconds(hours * SECONDS_PER_HOUR)

    def add_minutes(self, minutes: int) -> DateTime:
        """Return the moment ``minutes`` later."""
        return self.add_seconds(minutes * SECONDS_PER_MINUTE)

    def add_seconds(self, seconds: int) -> DateTime:
        """Return the moment ``seconds`` later."""
        return DateTime.from_unixtime(self.unixtime() + seconds)

    def __add__(self, span: object) -> DateTime:
        if not isinstance(span, TimeSpan):
            return NotImplemented
        return self.add_seconds(span.seconds)

    def __sub__(self, other: object) -> DateTime | TimeSpan:
        if isinstance(other, DateTime):
            return TimeSpan(self.unixtime() - other.unixtime())
        if isinstance(other, TimeSpan):
            return self.add_seconds(-other.seconds)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._fields() < other._fields()

    def _fields(self) -> tuple[int, ...]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return (
            f"{self.day}.{self.month}.{self.year} "
            f"{self.hour}:{self.minute}:{self.second}"
        )