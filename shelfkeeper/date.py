"""Calendar dates with validation status, as used for library checkout dates."""

from __future__ import annotations

import re
import time
from contextlib import contextmanager
from enum import IntEnum
from functools import total_ordering
from typing import Iterator

MIN_YEAR = 1500

_fixed_today: tuple[int, int, int] | None = None

_DATE_PATTERN = re.compile(
    r"\s*([+-]?\d+)\D\s*([+-]?\d+)\D\s*([+-]?\d+)"
)


class DateStatus(IntEnum):
    """Validation state of a :class:`Date`."""

    NO_ERROR = 0
    CIN_FAILED = 1
    YEAR_ERROR = 2
    MON_ERROR = 3
    DAY_ERROR = 4

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def __str__(self) -> str:
        return self.message


_MESSAGES = {
    DateStatus.NO_ERROR: "No Error",
    DateStatus.CIN_FAILED: "cin Failed",
    DateStatus.YEAR_ERROR: "Bad Year Value",
    DateStatus.MON_ERROR: "Bad Month Value",
    DateStatus.DAY_ERROR: "Bad Day Value",
}


@contextmanager
def fixed_today(year: int, month: int, day: int) -> Iterator[None]:
    """Within the block, treat the given date as today's date."""
    global _fixed_today
    previous = _fixed_today
    _fixed_today = (year, month, day)
    try:
        yield
    finally:
        _fixed_today = previous


def system_today() -> tuple[int, int, int]:
    """Return today's (year, month, day), honouring :func:`fixed_today`."""
    if _fixed_today is not None:
        return _fixed_today
    now = time.localtime()
    return now.tm_year, now.tm_mon, now.tm_mday


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@total_ordering
class Date:
    """A year/month/day triple carrying its own validation status."""

    __slots__ = ("_year", "_month", "_day", "_status", "_current_year")

    def __init__(self, year: int, month: int, day: int) -> None:
        self._year = year
        self._month = month
        self._day = day
        self._current_year = system_today()[0]
        self._status = self._validate()

    @classmethod
    def today(cls) -> Date:
        """Return today's date (or the fixed date set by :func:`fixed_today`)."""
        year, month, day = system_today()
        date = cls(year, month, day)
        date._status = DateStatus.NO_ERROR
        return date

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse ``year<sep>month<sep>day``; failure gives a CIN_FAILED date."""
        match = _DATE_PATTERN.match(text)
        if match is None:
            date = cls(0, 0, 0)
            date._status = DateStatus.CIN_FAILED
            return date
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def _month_days(self) -> int:
        if not 1 <= self._month <= 12:
            return -1
        extra = 1 if self._month == 2 and _is_leap(self._year) else 0
        return _MONTH_DAYS[self._month - 1] + extra

    def _validate(self) -> DateStatus:
        if self._year < MIN_YEAR or self._year > self._current_year + 1:
            return DateStatus.YEAR_ERROR
        if not 1 <= self._month <= 12:
            return DateStatus.MON_ERROR
        if not 1 <= self._day <= self._month_days():
            return DateStatus.DAY_ERROR
        return DateStatus.NO_ERROR

    def status(self) -> DateStatus:
        """Return the validation status."""
        return self._status

    def current_year(self) -> int:
        """Return the system year recorded when the date was created."""
        return self._current_year

    def days_since_epoch(self) -> int:
        """Return the day number counted from 0001/01/01 (which is day 1)."""
        year, month = self._year, self._month
        if month < 3:
            year -= 1
            month += 12
        return (
            365 * year
            + _tdiv(year, 4)
            - _tdiv(year, 100)
            + _tdiv(year, 400)
            + _tdiv(153 * month - 457, 5)
            + self._day
            - 306
        )

    def __str__(self) -> str:
        if self._status is not DateStatus.NO_ERROR:
            return self._status.message
        return f"{self._year}/{self._month:02d}/{self._day:02d}"

    def __repr__(self) -> str:
        return (
            f"Date({self._year}, {self._month}, {self._day}, "
            f"status={self._status.name})"
        )

    def __bool__(self) -> bool:
        return self._status is DateStatus.NO_ERROR

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.days_since_epoch() == other.days_since_epoch()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.days_since_epoch() < other.days_since_epoch()

    def __hash__(self) -> int:
        return hash(self.days_since_epoch())

    def __sub__(self, other: object) -> int:
        if not isinstance(other, Date):
            return NotImplemented
        return self.days_since_epoch() - other.days_since_epoch()