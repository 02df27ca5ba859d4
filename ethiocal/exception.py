"""Classes containing the exceptions for reporting errors.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Error', 'InternalError', 'DataError']


class Error(Exception):
    def __init__(self, value):
        Exception.__init__(self, value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class InternalError(Error):
    """A broken invariant inside the calendar engines.

    Raised when a value that can only come from bypassing the documented
    preconditions (for example a month outside 1-13) reaches a lookup
    table.  It is a defect and is never handled within the package.
    """

    def __init__(self, value):
        Error.__init__(self, value)


class DataError(Error):
    """User supplied data that was rejected before reaching the core."""

    def __init__(self, value):
        Error.__init__(self, value)
