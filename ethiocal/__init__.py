"""Ethiopian and Gregorian calendar conversion.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .ethiopian import *   # pylint: disable=wildcard-import
from .gregorian import *   # pylint: disable=wildcard-import
from .bridge import *      # pylint: disable=wildcard-import
from .exception import *   # pylint: disable=wildcard-import
