"""Month and year grids of the Ethiopian calendar.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A month renders as:

         መስከረም 2017
    Su Mo Tu We Th Fr Sa
           1  2  3  4  5
     6  7  8  9 10 11 12
    ...

The layout only uses EthiopianDate.days_in_month() and weekday() of the
first day of each month.
"""

__all__ = ['HEADER', 'WIDTH', 'colorize', 'format_month', 'format_year']

from typing import List, Optional, Tuple  # pylint: disable=unused-import

from .ethiopian import EthiopianDate, PAGUME

HEADER = "Su Mo Tu We Th Fr Sa"
WIDTH = len(HEADER)

# ANSI SGR codes
RESET = '\033[0m'
BOLD = '\033[1m'
RED = '\033[31m'
GREEN = '\033[32m'
WHITE = '\033[37m'
ON_BLACK = '\033[40m'

MONTHS_PER_ROW = 3


def colorize(text, *codes, **kwargs):
    # type: (str, *str, **bool) -> str
    """Wrap TEXT in the given ANSI CODES unless color=False is passed."""
    if not kwargs.get('color', True) or not codes:
        return text
    return ''.join(codes) + text + RESET


def format_month(year, month, highlight_day=None, color=True):
    # type: (int, int, Optional[int], bool) -> List[str]
    """Return the lines of the grid for an Ethiopian YEAR and MONTH."""
    first = EthiopianDate(year, month, 1)
    ndays = first.days_in_month()

    title = ("%s %s" % (first.amharic_month(), first.formatted_year())).center(WIDTH)
    lines = [colorize(title, GREEN, BOLD, color=color),
             colorize(HEADER, GREEN, BOLD, color=color)]

    day = 1
    weekday = first.weekday()
    while day <= ndays:
        cells = []
        width = 0
        if day == 1:
            cells.append(' ' * (weekday * 3))
            width += weekday * 3
        while weekday < 7 and day <= ndays:
            cell = '%2d' % day
            if day == highlight_day:
                cell = colorize(cell, WHITE, BOLD, ON_BLACK, color=color)
            cells.append(cell + ' ')
            width += 3
            day += 1
            weekday += 1
        weekday = 0
        # pad on visible width; escape codes take no columns
        cells.append(' ' * max(WIDTH - width, 0))
        lines.append(''.join(cells))

    return lines


def format_year(year, highlight=None, color=True):
    # type: (int, Optional[Tuple[int, int]], bool) -> List[str]
    """Return the lines of all thirteen months of an Ethiopian YEAR.

    HIGHLIGHT is an optional (month, day) to mark.  Months are laid out
    MONTHS_PER_ROW to a row, so Pagume sits alone on the last row.
    """
    lines = []  # type: List[str]
    group = []  # type: List[List[str]]
    for month in range(1, PAGUME + 1):
        highlight_day = None
        if highlight is not None and highlight[0] == month:
            highlight_day = highlight[1]
        group.append(format_month(year, month, highlight_day, color=color))

        if month % MONTHS_PER_ROW == 0 or month == PAGUME:
            height = max(len(g) for g in group)
            blank = ' ' * WIDTH
            for i in range(height):
                lines.append(''.join((g[i] if i < len(g) else blank) + '\t'
                                     for g in group))
            lines.append('')
            group = []

    return lines
