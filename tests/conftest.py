"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
from datetime import datetime, timezone

import pytest

from ethiocal import localdate

_log = logging.getLogger("ethiocaltest")

# Wednesday, 16 Tahsas 2017
FROZEN_NOW = datetime(2024, 12, 25, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the wall clock read by ethiocal.localdate to FROZEN_NOW."""
    def _now(zoneinfo):
        return FROZEN_NOW.astimezone(zoneinfo)

    _log.info("Freezing clock at %s", FROZEN_NOW.isoformat())
    monkeypatch.setattr(localdate, '_now', _now)
    monkeypatch.setattr(localdate, 'LOCALZONE', timezone.utc)
    return FROZEN_NOW


@pytest.fixture(autouse=True)
def _no_color_env(monkeypatch):
    monkeypatch.delenv('NO_COLOR', raising=False)
