"""Pytest plugin providing shared test fixtures for microtime.

Auto-registers ``fake_clock`` and ``fake_localtime`` fixtures for any
test suite that depends on microtime.

Discovered automatically via the ``pytest11`` entry point — no explicit
``pytest_plugins`` import is needed in consumer ``conftest.py`` files.

**Why lazy imports?** This module is loaded by pytest during plugin
discovery — *before* coverage measurement starts.  Deferring imports
into the fixture bodies ensures all microtime code is first touched
while coverage is active.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from microtime.testing._clock import FakeClock, FakeLocalTime


@pytest.fixture
def fake_clock() -> FakeClock:
    """FakeClock starting at the epoch."""
    from microtime.testing._clock import FakeClock

    return FakeClock()


@pytest.fixture
def fake_localtime() -> FakeLocalTime:
    """FakeLocalTime converting in UTC."""
    from microtime.testing._clock import FakeLocalTime

    return FakeLocalTime()
