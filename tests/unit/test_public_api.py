"""Unit tests for the microtime top-level public API surface.

Test Techniques Used:
    - Specification-based Testing: ``__all__`` completeness against the
      documented public API contract.
    - Importability: Every name in ``__all__`` resolves to a real object
      via ``getattr``.
"""

from __future__ import annotations

import microtime
from microtime._timepoint import TimePoint


class TestMicrotimePublicAPI:
    """All expected symbols are importable and listed in ``__all__``."""

    EXPECTED_NAMES = {
        # Version
        "__version__",
        # Values
        "DurationView",
        "TimePoint",
        # Clock
        "CalendarFields",
        "ClockPort",
        "LocalTimePort",
        "SystemClock",
        "SystemLocalTime",
        # Errors
        "InvalidOperandError",
        "LocalTimeError",
        "MicrotimeError",
        # Logging
        "JsonFormatter",
        "configure_logging",
        # Settings
        "DisplaySettings",
        "LoggingSettings",
        "Settings",
    }

    def test_all_contains_expected_symbols(self) -> None:
        """``__all__`` matches the documented public API exactly.

        Technique: Specification-based — verifying module contract.
        """
        assert set(microtime.__all__) == self.EXPECTED_NAMES

    def test_all_symbols_importable(self) -> None:
        """Every name in ``__all__`` resolves to an attribute on the module.

        Technique: Specification-based — importability check.
        """
        for name in microtime.__all__:
            obj = getattr(microtime, name, None)
            assert obj is not None, f"{name!r} listed in __all__ but not importable"

    def test_reexport_is_same_object(self) -> None:
        assert microtime.TimePoint is TimePoint
