"""Public test-support utilities for microtime.

Re-exports test doubles and factories so that consumer test suites
can import everything from a single ``microtime.testing`` namespace
instead of reaching into private modules.

Provided symbols:

- :class:`FakeClock` — deterministic wall clock.
- :class:`FakeLocalTime` — deterministic local-time converter.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.
- :class:`IsolatedSettings` — ``Settings`` subclass for ``build_cli``.
"""

from microtime.testing._clock import FakeClock, FakeLocalTime
from microtime.testing._settings import IsolatedSettings, make_settings

__all__ = [
    "FakeClock",
    "FakeLocalTime",
    "IsolatedSettings",
    "make_settings",
]
