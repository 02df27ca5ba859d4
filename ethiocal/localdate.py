"""Today's date, as seen from a time zone.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Only the wall clock of the zone is read; dates themselves carry no zone.
"""

__all__ = ['LOCALZONE', 'get_timezone', 'today_gregorian', 'today_ethiopian']

import logging
from datetime import datetime, tzinfo  # pylint: disable=unused-import
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from .exception import DataError
from .gregorian import GregorianDate
from .ethiopian import EthiopianDate
from .bridge import gregorian_to_ethiopian

_log = logging.getLogger("ethiocal")

LOCALZONE = tzlocal.get_localzone()


def get_timezone(name):
    # type: (str) -> tzinfo
    """ get tzinfo by name """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise DataError("Unknown timezone: %s" % (name,))


def _now(zoneinfo):
    # type: (tzinfo) -> datetime
    return datetime.now(zoneinfo)


def today_gregorian(zoneinfo=LOCALZONE):
    # type: (tzinfo) -> GregorianDate
    now = _now(zoneinfo)
    _log.debug("Current time in %s: %s", zoneinfo, now.isoformat())
    return GregorianDate.from_date(now.date())


def today_ethiopian(zoneinfo=LOCALZONE):
    # type: (tzinfo) -> EthiopianDate
    return gregorian_to_ethiopian(today_gregorian(zoneinfo))
