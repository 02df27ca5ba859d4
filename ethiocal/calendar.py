"""A module for the Julian Day arithmetic shared by both calendars.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Day numbers handled here are noon-anchored: the integral Julian Day
Number N names the civil day whose noon falls at JD N.0, so

   +--------------+----------------------------+
   |  day number  | (year,month,day) Gregorian |
   |--------------+----------------------------|
   |      1724221 | (8,8,27)                   |
   |      2299161 | (1582,10,15)               |
   |      2454720 | (2008,9,10)                |
   +--------------+----------------------------+

A fractional day number is floored before it is turned into a date, so
2454720.5 and 2454720.0 are the same day.

The Ethiopian calendar is computed in closed form and only needs the
floored quotient and remainder below.  The Gregorian calendar is handed
to jdcal, which implements the proleptic Gregorian calendar.
"""

from typing import Tuple  # pylint: disable=unused-import
import math

import jdcal

__all__ = ['EPOCH_OFFSET', 'LEAP_CYCLE', 'quotient', 'mod_op', 'floor_jdn',
           'gregorian_to_jd', 'jd_to_gregorian']

# Amete Mihret: day number of the Ethiopian epoch, less one year.
EPOCH_OFFSET = 1723856.0

# Days in four Ethiopian years, three common and one leap.
LEAP_CYCLE = 1461.0


def quotient(a, b):
    # type: (float, float) -> float
    """Floored quotient of A by B.

    Unlike int(a / b) this rounds towards negative infinity, so it stays
    correct for negative or fractional operands:

      quotient(7, 2)  == 3.0
      quotient(-7, 2) == -4.0
      quotient(2.5, 1) == 2.0
    """
    return float(math.floor(a / b))


def mod_op(a, b):
    # type: (float, float) -> float
    """Floored remainder of A by B; the result has the sign of B."""
    return a - b * quotient(a, b)


def floor_jdn(jdn):
    # type: (float) -> float
    """Return the integral day number containing JDN."""
    return float(math.floor(jdn))


def gregorian_to_jd(year, month, day):
    # type: (int, int, int) -> float
    """
    Converts a proleptic Gregorian year, month, day to its day number.
      year  - any year jdcal supports (year 0 is 1 BCE)
      month - 1 - 12
      day   - 1 - 31 (depending upon month and year)
    No validation is performed.
    """
    # jdcal reports midnight at the start of the day (N - 0.5).
    return sum(jdcal.gcal2jd(year, month, day)) + 0.5


def jd_to_gregorian(jdn):
    # type: (float) -> Tuple[int, int, int]
    """
    Converts a day number to a proleptic Gregorian tuple (year,month,day).
    """
    y, m, d, _ = jdcal.jd2gcal(floor_jdn(jdn), 0.0)
    return int(y), int(m), int(d)
