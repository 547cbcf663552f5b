"""TimePoint — an instant with microsecond resolution.

A :class:`TimePoint` is an immutable ``(seconds, micros)`` pair.  It
represents either an absolute instant (seconds since the Unix epoch)
or a relative offset, and supports the arithmetic needed to combine
the two without hand-written carry logic at every call site::

    start = TimePoint.now()
    ...
    elapsed = TimePoint.now() - start
    average = elapsed / iterations
    deadline = start + TimePoint(30)

**Normalisation.** After any arithmetic operation ``micros`` lies in
``[0, 1_000_000)`` and ``seconds`` carries the sign.  Negative values
use floor-style borrow, the same convention as the C ``timersub``
macro: half a second before the epoch is ``TimePoint(-1, 500_000)``.

**Construction is trusting.** ``TimePoint(seconds, micros)`` stores
its arguments unchanged; an out-of-range ``micros`` is corrected the
first time the value goes through arithmetic.

**Compound assignment.** ``+=``, ``-=``, ``*=`` and ``/=`` rebind the
name to a fresh value, exactly as for ``int``.  Other references to
the previous value are unaffected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Self, TextIO

from microtime._clock import (
    MICROS_PER_SECOND,
    CalendarFields,
    ClockPort,
    LocalTimePort,
    SystemClock,
    SystemLocalTime,
)
from microtime._errors import InvalidOperandError

_SYSTEM_LOCALTIME = SystemLocalTime()


@dataclass(frozen=True, slots=True, eq=False)
class TimePoint:
    """Seconds plus microseconds, ordered by :attr:`total_micros`.

    Attributes:
        seconds: Whole seconds (signed).
        micros: Sub-second microseconds, normally in
            ``[0, 1_000_000)``.
    """

    seconds: int = 0
    micros: int = 0

    # -- alternate constructors ---------------------------------------------

    @classmethod
    def from_micros(cls, count: int) -> Self:
        """Build a value from a raw microsecond count."""
        seconds, micros = divmod(count, MICROS_PER_SECOND)
        return cls(seconds, micros)

    @classmethod
    def from_timeval(cls, timeval: tuple[int, int]) -> Self:
        """Copy a raw ``(tv_sec, tv_usec)`` pair without validation."""
        seconds, micros = timeval
        return cls(seconds, micros)

    @classmethod
    def from_ns(cls, nanoseconds: int) -> Self:
        """Build a value from nanoseconds, truncating toward the past."""
        return cls.from_micros(nanoseconds // 1_000)

    @classmethod
    def from_timestamp(cls, timestamp: float) -> Self:
        """Build a value from a float POSIX timestamp.

        Rounds to the nearest microsecond, so
        ``TimePoint.from_timestamp(record.created)`` does not lose a
        microsecond to binary float representation.
        """
        return cls.from_micros(round(timestamp * MICROS_PER_SECOND))

    @classmethod
    def now(cls, clock: ClockPort | None = None) -> Self:
        """Return the current wall-clock time read from *clock*."""
        resolved = clock if clock is not None else SystemClock()
        return cls.from_timeval(resolved.now())

    @classmethod
    def future(cls, delta_seconds: int, clock: ClockPort | None = None) -> Self:
        """Return the current time moved *delta_seconds* forward.

        Only whole seconds are added; the sub-second part of the
        clock reading is kept as-is.
        """
        current = cls.now(clock)
        return cls(current.seconds + delta_seconds, current.micros)

    @classmethod
    def past(cls, delta_seconds: int, clock: ClockPort | None = None) -> Self:
        """Return the current time moved *delta_seconds* back."""
        current = cls.now(clock)
        return cls(current.seconds - delta_seconds, current.micros)

    @classmethod
    def _normalized(cls, seconds: int, micros: int) -> Self:
        carry, micros = divmod(micros, MICROS_PER_SECOND)
        return cls(seconds + carry, micros)

    # -- accessors ----------------------------------------------------------

    @property
    def millis(self) -> int:
        """Sub-second part in whole milliseconds."""
        return self.micros // 1_000

    @property
    def total_micros(self) -> int:
        """``seconds * 1_000_000 + micros`` — the ordering key."""
        return self.seconds * MICROS_PER_SECOND + self.micros

    def as_timeval(self) -> tuple[int, int]:
        """Return the raw ``(seconds, micros)`` pair."""
        return self.seconds, self.micros

    def to_timedelta(self) -> timedelta:
        """Convert to a :class:`datetime.timedelta`."""
        return timedelta(seconds=self.seconds, microseconds=self.micros)

    # -- calendar fields ----------------------------------------------------

    def localtime(self, converter: LocalTimePort | None = None) -> CalendarFields:
        """Break :attr:`seconds` down into local calendar fields.

        Args:
            converter: Local-time port.  Defaults to the host's
                ``time.localtime()``.

        Raises:
            LocalTimeError: The conversion failed.
        """
        resolved = converter if converter is not None else _SYSTEM_LOCALTIME
        return resolved.localtime(self.seconds)

    @property
    def hour(self) -> int:
        return self.localtime().hour

    @property
    def minute(self) -> int:
        return self.localtime().minute

    @property
    def second(self) -> int:
        return self.localtime().second

    @property
    def day(self) -> int:
        return self.localtime().day

    @property
    def month(self) -> int:
        """Month of year, 0-based (January is ``0``)."""
        return self.localtime().month

    @property
    def year(self) -> int:
        """Years since 1900."""
        return self.localtime().year

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.total_micros == other.total_micros

    def __hash__(self) -> int:
        return hash(self.total_micros)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.total_micros < other.total_micros

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.total_micros <= other.total_micros

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.total_micros > other.total_micros

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.total_micros >= other.total_micros

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other: object) -> TimePoint:
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            other = TimePoint.from_micros(other)
        if not isinstance(other, TimePoint):
            return NotImplemented
        return TimePoint._normalized(
            self.seconds + other.seconds,
            self.micros + other.micros,
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> TimePoint:
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            other = TimePoint.from_micros(other)
        if not isinstance(other, TimePoint):
            return NotImplemented
        return TimePoint._normalized(
            self.seconds - other.seconds,
            self.micros - other.micros,
        )

    def __mul__(self, multiplier: object) -> TimePoint:
        if isinstance(multiplier, bool) or not isinstance(multiplier, int):
            return NotImplemented
        if multiplier < 0:
            raise InvalidOperandError("*", multiplier)
        carry, micros = divmod(self.micros * multiplier, MICROS_PER_SECOND)
        return TimePoint(self.seconds * multiplier + carry, micros)

    __rmul__ = __mul__

    def __truediv__(self, denominator: object) -> TimePoint:
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            return NotImplemented
        if denominator < 0:
            raise InvalidOperandError("/", denominator)
        if denominator == 0:
            raise ZeroDivisionError("TimePoint division by zero")
        if self.seconds >= denominator:
            seconds, remainder = divmod(self.seconds, denominator)
            micros = (remainder * MICROS_PER_SECOND + self.micros) // denominator
        else:
            seconds = 0
            micros = self.total_micros // denominator
        return TimePoint._normalized(seconds, micros)

    __floordiv__ = __truediv__

    # -- formatting ---------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.seconds}.{self.micros:06d}s"

    def write(self, stream: TextIO) -> TextIO:
        """Write ``str(self)`` to *stream* and return the stream."""
        stream.write(str(self))
        return stream
