# -*- coding: utf-8 -*-
"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime
import logging

import ethiocal
from ethiocal import (EthiopianDate, GregorianDate,
                      ethiopian_to_gregorian, gregorian_to_ethiopian)

from . import REFERENCE_DATES


class TestBridge(object):
    """Conversion between the calendars through the day number."""

    def test_new_year_2008(self):
        gregorian = GregorianDate(2008, 9, 10)
        ethiopian = gregorian_to_ethiopian(gregorian)
        assert ethiopian == EthiopianDate(2000, 13, 5)
        assert ethiopian.amharic_month() == "ጳጉሜ"
        assert ethiopian_to_gregorian(ethiopian) == gregorian

    def test_reference_dates(self):
        for _, eth, greg in REFERENCE_DATES:
            assert gregorian_to_ethiopian(GregorianDate(*greg)) == EthiopianDate(*eth)
            assert ethiopian_to_gregorian(EthiopianDate(*eth)) == GregorianDate(*greg)

    def test_classmethods(self):
        assert EthiopianDate.from_gregorian(GregorianDate(2024, 12, 25)) == \
            EthiopianDate(2017, 4, 16)
        assert GregorianDate.from_ethiopian(EthiopianDate(2017, 4, 16)) == \
            GregorianDate(2024, 12, 25)

    def test_leap_pagume(self):
        # 2011 is a leap year: Pagume 6 precedes the new year on 12 September
        assert gregorian_to_ethiopian(GregorianDate(2019, 9, 11)) == EthiopianDate(2011, 13, 6)
        assert gregorian_to_ethiopian(GregorianDate(2019, 9, 12)) == EthiopianDate(2012, 1, 1)
        assert gregorian_to_ethiopian(GregorianDate(2024, 9, 11)) == EthiopianDate(2017, 1, 1)

    def test_ethiopian_round_trip(self):
        for year in range(1, 6001, 7):
            for month in range(1, 14):
                last = EthiopianDate(year, month, 1).days_in_month()
                for day in (1, 15, last):
                    if day > last:
                        continue
                    date = EthiopianDate(year, month, day)
                    assert gregorian_to_ethiopian(ethiopian_to_gregorian(date)) == date

    def test_gregorian_round_trip(self):
        date = datetime.date(1583, 1, 1)
        while date.year < 2200:
            gregorian = GregorianDate.from_date(date)
            assert ethiopian_to_gregorian(gregorian_to_ethiopian(gregorian)) == gregorian
            date += datetime.timedelta(days=3)

    def test_weekday_agrees(self):
        for jdn in range(2450000, 2450000 + 4 * 1461, 5):
            gregorian = GregorianDate.from_jdn(jdn)
            ethiopian = gregorian_to_ethiopian(gregorian)
            assert ethiopian.weekday() == gregorian.weekday()
            assert ethiopian.amharic_weekday() == \
                ethiocal.AMHARIC_WEEKDAYS[gregorian.weekday()]

    def test_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="ethiocal")
        ethiopian_to_gregorian(EthiopianDate(2000, 13, 5))
        assert "JDN 2454720" in caplog.text
        assert "GregorianDate(2008, 9, 10)" in caplog.text


class TestPackage(object):
    def test_module_globals(self):
        assert ethiocal.__version__ == '1.0.0'
        assert issubclass(ethiocal.InternalError, ethiocal.Error)
        assert issubclass(ethiocal.DataError, ethiocal.Error)
        assert str(ethiocal.DataError("Invalid day.")) == "Invalid day."
