"""microtime.

Microsecond-resolution time values with exact arithmetic and
duration formatting.
"""

from importlib.metadata import PackageNotFoundError, version

from microtime._clock import (
    CalendarFields,
    ClockPort,
    LocalTimePort,
    SystemClock,
    SystemLocalTime,
)
from microtime._duration import DurationView
from microtime._errors import (
    InvalidOperandError,
    LocalTimeError,
    MicrotimeError,
)
from microtime._logging import JsonFormatter, configure_logging
from microtime._settings import DisplaySettings, LoggingSettings, Settings
from microtime._timepoint import TimePoint

try:
    __version__ = version("microtime")
except PackageNotFoundError:
    # Last resort fallback for source checkouts without metadata
    __version__ = "0.0.0+unknown"

__all__ = [
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
]
