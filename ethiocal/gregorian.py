"""A module for the proleptic Gregorian calendar.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
GregorianDate -- An immutable Gregorian (year, month, day).

The Gregorian rules are applied to every year, including those before the
1582 reform, so 1582-10-10 is a valid date here even though it was never
observed.  Day number arithmetic is done by jdcal.
"""

__all__ = ['GregorianDate', 'ENGLISH_MONTHS', 'ENGLISH_WEEKDAYS']

import datetime
from typing import Any, Tuple  # pylint: disable=unused-import

from .exception import InternalError, DataError
from .calendar import floor_jdn, gregorian_to_jd, jd_to_gregorian

ENGLISH_MONTHS = ("January", "February", "March", "April", "May", "June",
                  "July", "August", "September", "October", "November",
                  "December")

ENGLISH_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday",
                    "Friday", "Saturday")


class GregorianDate(object):
    """A date in the proleptic Gregorian calendar.

    Like EthiopianDate this is a plain immutable triple: nothing is
    validated on construction.
    """

    __slots__ = ('_year', '_month', '_day')

    def __init__(self, year, month, day):
        # type: (int, int, int) -> None
        object.__setattr__(self, '_year', year)
        object.__setattr__(self, '_month', month)
        object.__setattr__(self, '_day', day)

    def __setattr__(self, name, value):
        # type: (str, Any) -> None
        raise AttributeError("GregorianDate is immutable")

    def __delattr__(self, name):
        # type: (str) -> None
        raise AttributeError("GregorianDate is immutable")

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
        # type: (float) -> GregorianDate
        """Return the Gregorian date of day number JDN."""
        return cls(*jd_to_gregorian(jdn))

    @classmethod
    def from_ethiopian(cls, ethiopian):
        # type: (Any) -> GregorianDate
        """Convert an EthiopianDate (anything with to_jdn()) to Gregorian."""
        return cls.from_jdn(ethiopian.to_jdn())

    @classmethod
    def from_date(cls, value):
        # type: (datetime.date) -> GregorianDate
        return cls(value.year, value.month, value.day)

    def to_date(self):
        # type: () -> datetime.date
        """Return the equivalent datetime.date.

        datetime only covers years 1 - 9999 and rejects impossible days.
        """
        try:
            return datetime.date(self._year, self._month, self._day)
        except ValueError as e:
            raise DataError("Cannot represent %s as a date: %s" % (self, e))

    def to_jdn(self):
        # type: () -> float
        """Return the day number of this date."""
        return gregorian_to_jd(self._year, self._month, self._day)

    def ymd(self):
        # type: () -> Tuple[int, int, int]
        return (self._year, self._month, self._day)

    def weekday(self):
        # type: () -> int
        """Day of the week, Sunday is 0 and Saturday is 6."""
        return int(floor_jdn(self.to_jdn()) + 1) % 7

    def english_weekday(self):
        # type: () -> str
        return ENGLISH_WEEKDAYS[self.weekday()]

    def english_month(self):
        # type: () -> str
        if not 1 <= self._month <= 12:
            raise InternalError("Gregorian month out of range: %r" % (self._month,))
        return ENGLISH_MONTHS[self._month - 1]

    def formatted_year(self):
        # type: () -> str
        return "%04d" % (self._year,)

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self.ymd() == other.ymd()

    def __hash__(self):
        # type: () -> int
        return hash((GregorianDate, self.ymd()))

    def __reduce__(self):
        return (GregorianDate, self.ymd())

    def __repr__(self):
        # type: () -> str
        return "GregorianDate(%r, %r, %r)" % self.ymd()

    def __str__(self):
        # type: () -> str
        return "%s-%02d-%02d" % (self.formatted_year(), self._month, self._day)
