"""Conversion between the Ethiopian and Gregorian calendars.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

The two calendars never look at each other's fields: a date is turned
into its day number and the day number into a date of the other calendar.
"""

__all__ = ['ethiopian_to_gregorian', 'gregorian_to_ethiopian']

import logging

from .ethiopian import EthiopianDate
from .gregorian import GregorianDate

_log = logging.getLogger("ethiocal")


def ethiopian_to_gregorian(ethiopian):
    # type: (EthiopianDate) -> GregorianDate
    jdn = ethiopian.to_jdn()
    gregorian = GregorianDate.from_jdn(jdn)
    _log.debug("%r -> JDN %s -> %r", ethiopian, jdn, gregorian)
    return gregorian


def gregorian_to_ethiopian(gregorian):
    # type: (GregorianDate) -> EthiopianDate
    jdn = gregorian.to_jdn()
    ethiopian = EthiopianDate.from_jdn(jdn)
    _log.debug("%r -> JDN %s -> %r", gregorian, jdn, ethiopian)
    return ethiopian
