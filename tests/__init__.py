"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from typing import List, Tuple  # pylint: disable=unused-import

YMD = Tuple[int, int, int]

# From https://www.geez.org/Calendars/EthiopicCalendarTest.java
#   (day number, Ethiopian (y, m, d), Gregorian (y, m, d))
REFERENCE_DATES = [
    (1724221, (1, 1, 1), (8, 8, 27)),
    (1724586, (2, 1, 1), (9, 8, 27)),
    (1724951, (3, 1, 1), (10, 8, 27)),
    (1724585, (1, 13, 5), (9, 8, 26)),
    (1724950, (2, 13, 5), (10, 8, 26)),
    (1725315, (3, 13, 5), (11, 8, 26)),
    (1725316, (3, 13, 6), (11, 8, 27)),
    (2299159, (1575, 2, 6), (1582, 10, 13)),
    (2299160, (1575, 2, 7), (1582, 10, 14)),
    (2299161, (1575, 2, 8), (1582, 10, 15)),
    (2299162, (1575, 2, 9), (1582, 10, 16)),
    (2401443, (1855, 2, 20), (1862, 10, 29)),
    (2402423, (1857, 10, 29), (1865, 7, 5)),
    (2402631, (1858, 5, 22), (1866, 1, 29)),
    (2402709, (1858, 8, 10), (1866, 4, 17)),
    (2402972, (1859, 4, 28), (1867, 1, 5)),
    (2403345, (1860, 5, 5), (1868, 1, 13)),
    (2415021, (1892, 4, 23), (1900, 1, 1)),
    (2453372, (1997, 4, 23), (2005, 1, 1)),
    (2454720, (2000, 13, 5), (2008, 9, 10)),
    (2415385, (1893, 4, 22), (1900, 12, 31)),
    (2448988, (1985, 4, 22), (1992, 12, 31)),
    (2450449, (1989, 4, 22), (1996, 12, 31)),
    (2451910, (1993, 4, 22), (2000, 12, 31)),
    (2453371, (1997, 4, 22), (2004, 12, 31)),
    (2817152, (2993, 4, 14), (3000, 12, 31)),
    (3182395, (3993, 4, 7), (4000, 12, 31)),
    (3912880, (5993, 3, 22), (6000, 12, 31)),
]  # type: List[Tuple[int, YMD, YMD]]
