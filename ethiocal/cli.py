"""Command line interface for ethiocal.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

    ethiocal now
    ethiocal g2e 2008 9 10      # Gregorian to Ethiopian
    ethiocal e2g 2000 13 5      # Ethiopian to Gregorian
    ethiocal cal                # this month
    ethiocal year               # this year

Ranges are checked here, before any date is built: the calendar classes
themselves accept whatever they are given.
"""

import argparse
import logging
import os
import sys

from typing import List, Optional  # pylint: disable=unused-import

from . import __version__
from .exception import DataError
from .ethiopian import EthiopianDate, PAGUME
from .gregorian import GregorianDate
from .bridge import ethiopian_to_gregorian, gregorian_to_ethiopian
from .grid import GREEN, BOLD, RED, colorize, format_month, format_year
from . import localdate

_log = logging.getLogger("ethiocal")


def check_triple(year, month, day, max_month, max_day):
    # type: (int, int, int, int, int) -> None
    """Raise DataError if the triple can't be a date of the calendar."""
    if year < 1:
        raise DataError("Invalid year.")
    if month < 1 or month > max_month:
        raise DataError("Invalid month.")
    if day < 1 or day > max_day:
        raise DataError("Invalid day.")


def format_ethiopian(date):
    # type: (EthiopianDate) -> str
    return "%s ፣ %s %d ቀን %s ዓ/ም" % (date.amharic_weekday(), date.amharic_month(),
                                      date.day, date.formatted_year())


def format_gregorian(date):
    # type: (GregorianDate) -> str
    return "%s, %s %d, %s" % (date.english_weekday(), date.english_month(),
                              date.day, date.formatted_year())


def _today(args):
    # type: (argparse.Namespace) -> EthiopianDate
    zone = localdate.LOCALZONE
    if args.timezone:
        zone = localdate.get_timezone(args.timezone)
    return localdate.today_ethiopian(zone)


def do_now(args):
    # type: (argparse.Namespace) -> None
    print(colorize(format_ethiopian(_today(args)), GREEN, color=args.color))


def do_gregorian_to_ethiopian(args):
    # type: (argparse.Namespace) -> None
    check_triple(args.year, args.month, args.day, 12, 31)
    ethiopian = gregorian_to_ethiopian(GregorianDate(args.year, args.month, args.day))
    print(colorize(format_ethiopian(ethiopian), GREEN, BOLD, color=args.color))


def do_ethiopian_to_gregorian(args):
    # type: (argparse.Namespace) -> None
    check_triple(args.year, args.month, args.day, PAGUME, 30)
    gregorian = ethiopian_to_gregorian(EthiopianDate(args.year, args.month, args.day))
    print(colorize(format_gregorian(gregorian), GREEN, color=args.color))


def do_calendar(args):
    # type: (argparse.Namespace) -> None
    today = _today(args)
    for line in format_month(today.year, today.month, today.day, color=args.color):
        print(colorize(line, GREEN, color=args.color))


def do_year(args):
    # type: (argparse.Namespace) -> None
    today = _today(args)
    for line in format_year(today.year, (today.month, today.day), color=args.color):
        print(colorize(line, GREEN, color=args.color) if line else line)


def _add_triple(parser):
    # type: (argparse.ArgumentParser) -> None
    parser.add_argument('year', type=int)
    parser.add_argument('month', type=int)
    parser.add_argument('day', type=int)


def build_parser():
    # type: () -> argparse.ArgumentParser
    parser = argparse.ArgumentParser(
        prog='ethiocal',
        description="Simple program for handling Ethiopian dates.")
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Log conversions to stderr.")
    parser.add_argument('--no-color', dest='color', action='store_false',
                        default=None, help="Do not color the output.")
    parser.add_argument('--timezone', metavar='NAME',
                        help="Time zone used for today's date "
                             "(default: the local zone).")

    sub = parser.add_subparsers(dest='action', metavar='ACTION')
    sub.required = True

    p = sub.add_parser('now', help="Get today's date in the Ethiopian calendar.")
    p.set_defaults(func=do_now)

    p = sub.add_parser('gregorian-to-ethiopian', aliases=['g2e'],
                       help="Get the Ethiopian date for a given Gregorian date.")
    _add_triple(p)
    p.set_defaults(func=do_gregorian_to_ethiopian)

    p = sub.add_parser('ethiopian-to-gregorian', aliases=['e2g'],
                       help="Get the Gregorian date for a given Ethiopian date.")
    _add_triple(p)
    p.set_defaults(func=do_ethiopian_to_gregorian)

    p = sub.add_parser('calendar', aliases=['cal'],
                       help="Display the current month in the Ethiopian calendar.")
    p.set_defaults(func=do_calendar)

    p = sub.add_parser('year',
                       help="Display the current year in the Ethiopian calendar.")
    p.set_defaults(func=do_year)

    return parser


def use_color(requested):
    # type: (Optional[bool]) -> bool
    if requested is not None:
        return requested
    if os.environ.get('NO_COLOR'):
        return False
    return sys.stdout.isatty()


def main(argv=None):
    # type: (Optional[List[str]]) -> int
    args = build_parser().parse_args(argv)
    args.color = use_color(args.color)

    logging.basicConfig(stream=sys.stderr,
                        format='%(levelname)s %(name)s: %(message)s',
                        level=logging.DEBUG if args.verbose else logging.WARNING)
    _log.debug("Running %s", args.action)

    try:
        args.func(args)
    except DataError as e:
        print(colorize(str(e), RED, color=args.color))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
