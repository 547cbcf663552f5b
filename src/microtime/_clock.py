"""Wall-clock and local-time ports with system adapters.

Provides two Protocol-based ports and their production adapters:

* :class:`ClockPort` / :class:`SystemClock` — read the current
  wall-clock time as a ``(seconds, microseconds)`` pair.
* :class:`LocalTimePort` / :class:`SystemLocalTime` — break a
  seconds-since-epoch value down into local calendar fields.

**Why wall-clock and not monotonic?** A :class:`~microtime.TimePoint`
is an absolute instant that gets printed and compared across
processes.  ``time.monotonic()`` has an arbitrary epoch, so it cannot
produce one.  Callers that only measure elapsed time can still feed
monotonic readings into ``TimePoint`` arithmetic through a custom
port.

Both ports are the *only* places that touch the host.  Tests inject
:class:`~microtime.testing.FakeClock` and
:class:`~microtime.testing.FakeLocalTime` for reproducible results.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from microtime._errors import LocalTimeError

logger = logging.getLogger(__name__)

MICROS_PER_SECOND = 1_000_000
_NANOS_PER_MICRO = 1_000


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Broken-down local calendar fields.

    Values follow the host's raw ``struct tm`` convention: ``month``
    is 0-based (January is ``0``) and ``year`` counts from 1900.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


@runtime_checkable
class ClockPort(Protocol):
    """Wall clock with microsecond resolution.

    The default implementation wraps ``time.time_ns()``.  Tests
    inject a deterministic fake clock.
    """

    def now(self) -> tuple[int, int]:
        """Return the current time.

        Returns:
            ``(seconds_since_epoch, microseconds)`` where
            ``microseconds`` is in ``[0, 1_000_000)``.
        """
        ...


@runtime_checkable
class LocalTimePort(Protocol):
    """Converter from seconds-since-epoch to local calendar fields."""

    def localtime(self, seconds: int) -> CalendarFields:
        """Break *seconds* down into :class:`CalendarFields`."""
        ...


class SystemClock:
    """Production clock wrapping ``time.time_ns()``.

    Satisfies :class:`ClockPort` via structural subtyping — no
    base-class inheritance required (PEP 544).

    Usage::

        clock = SystemClock()
        seconds, micros = clock.now()
    """

    def now(self) -> tuple[int, int]:
        """Return ``(seconds, microseconds)`` since the Unix epoch."""
        micros = time.time_ns() // _NANOS_PER_MICRO
        seconds, micros = divmod(micros, MICROS_PER_SECOND)
        logger.debug("Read wall clock: %d.%06d", seconds, micros)
        return seconds, micros


class SystemLocalTime:
    """Production converter wrapping ``time.localtime()``.

    The result depends on the host timezone at call time.
    """

    def localtime(self, seconds: int) -> CalendarFields:
        """Convert *seconds* using the host's local timezone.

        Raises:
            LocalTimeError: The host could not represent *seconds*
                (out of range for the platform ``time_t``).
        """
        try:
            tm = time.localtime(seconds)
        except (OverflowError, OSError, ValueError) as exc:
            logger.warning("Local time conversion failed for %d: %s", seconds, exc)
            raise LocalTimeError(
                f"cannot convert {seconds} seconds to local time"
            ) from exc
        return CalendarFields(
            year=tm.tm_year - 1900,
            month=tm.tm_mon - 1,
            day=tm.tm_mday,
            hour=tm.tm_hour,
            minute=tm.tm_min,
            second=tm.tm_sec,
        )
