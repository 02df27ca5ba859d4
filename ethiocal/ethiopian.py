"""A module for the Ethiopian calendar.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
EthiopianDate -- An immutable Ethiopian (year, month, day).

Exported Functions:
is_leap_year -- True if the Ethiopian year has a six day Pagume.

The Ethiopian year has twelve months of 30 days followed by Pagume, the
thirteenth month, of 5 days (6 in a leap year).  Every fourth year is a
leap year, with no century correction, so a four year cycle is exactly
1461 days long.
"""

__all__ = ['EthiopianDate', 'is_leap_year', 'AMHARIC_MONTHS',
           'AMHARIC_WEEKDAYS', 'PAGUME']

from typing import Any, Tuple  # pylint: disable=unused-import

from .exception import InternalError
from .calendar import EPOCH_OFFSET, LEAP_CYCLE, quotient, mod_op, floor_jdn

PAGUME = 13

AMHARIC_MONTHS = ("መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት",
                  "መጋቢት", "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜ")

# Sunday first.
AMHARIC_WEEKDAYS = ("እሁድ", "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ")


def is_leap_year(year):
    # type: (int) -> bool
    """Return True if Ethiopian YEAR ends with a six day Pagume."""
    return year % 4 == 3


class EthiopianDate(object):
    """A date in the Ethiopian calendar.

    The triple is stored as given: nothing is validated on construction.
    Instances are immutable and compare equal by value.
    """

    __slots__ = ('_year', '_month', '_day')

    def __init__(self, year, month, day):
        # type: (int, int, int) -> None
        object.__setattr__(self, '_year', year)
        object.__setattr__(self, '_month', month)
        object.__setattr__(self, '_day', day)

    def __setattr__(self, name, value):
        # type: (str, Any) -> None
        raise AttributeError("EthiopianDate is immutable")

    def __delattr__(self, name):
        # type: (str) -> None
        raise AttributeError("EthiopianDate is immutable")

    @property
    def year(self):
        # type: () -> int
        return self._year

    @property
    def month(self):
        # type: () -> int
        return self._month

    @property
    def day(self):
        # type: () -> int
        return self._day

    @classmethod
    def from_jdn(cls, jdn):
        # type: (float) -> EthiopianDate
        """Return the Ethiopian date of day number JDN.

        Every division below must be floored: JDN may be fractional or
        fall before the epoch.
        """
        days = jdn - EPOCH_OFFSET
        r = mod_op(days, LEAP_CYCLE)
        n = mod_op(r, 365) + 365 * quotient(r, 1460)

        year = 4 * quotient(days, LEAP_CYCLE) + quotient(r, 365) - quotient(r, 1460)
        month = quotient(n, 30) + 1
        day = floor_jdn(mod_op(n, 30)) + 1
        return cls(int(year), int(month), int(day))

    @classmethod
    def from_gregorian(cls, gregorian):
        # type: (Any) -> EthiopianDate
        """Convert a GregorianDate (anything with to_jdn()) to Ethiopian."""
        return cls.from_jdn(gregorian.to_jdn())

    def to_jdn(self):
        # type: () -> float
        """Return the day number of this date."""
        return (EPOCH_OFFSET + 365
                + 365 * (self._year - 1)
                + quotient(self._year, 4)
                + 30 * self._month
                + (self._day - 31))

    def ymd(self):
        # type: () -> Tuple[int, int, int]
        return (self._year, self._month, self._day)

    def is_leap_year(self):
        # type: () -> bool
        return is_leap_year(self._year)

    def days_in_month(self):
        # type: () -> int
        """Number of days in this date's month."""
        if self._month == PAGUME:
            return 6 if self.is_leap_year() else 5
        return 30

    def weekday(self):
        # type: () -> int
        """Day of the week, Sunday is 0 and Saturday is 6."""
        return int(floor_jdn(self.to_jdn()) + 1) % 7

    def amharic_weekday(self):
        # type: () -> str
        return AMHARIC_WEEKDAYS[self.weekday()]

    def amharic_month(self):
        # type: () -> str
        if not 1 <= self._month <= PAGUME:
            raise InternalError("Ethiopian month out of range: %r" % (self._month,))
        return AMHARIC_MONTHS[self._month - 1]

    def formatted_year(self):
        # type: () -> str
        return "%04d" % (self._year,)

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, EthiopianDate):
            return NotImplemented
        return self.ymd() == other.ymd()

    def __hash__(self):
        # type: () -> int
        return hash((EthiopianDate, self.ymd()))

    def __reduce__(self):
        return (EthiopianDate, self.ymd())

    def __repr__(self):
        # type: () -> str
        return "EthiopianDate(%r, %r, %r)" % self.ymd()

    def __str__(self):
        # type: () -> str
        return "%s-%02d-%02d" % (self.formatted_year(), self._month, self._day)
