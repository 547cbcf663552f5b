"""Human-readable rendering of elapsed time.

:class:`DurationView` renders a ``(seconds, micros)`` pair as
``[Nd ]HH:MM:SS[.uuuuuu]``::

    str(DurationView(3661, 0))                       # '01:01:01'
    str(DurationView.of(TimePoint(90000)))           # '1d 01:00:00'
    str(DurationView(5, 250000, show_micros=True))   # '00:00:05.250000'

Negative durations render their magnitude behind a ``-`` sign.
An out-of-range ``micros`` is folded into the seconds before rendering.

The view copies the two integers at construction, so it never sees
what happens to the :class:`~microtime.TimePoint` it came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from microtime._clock import MICROS_PER_SECOND

if TYPE_CHECKING:
    from microtime._timepoint import TimePoint

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


@dataclass(frozen=True, slots=True)
class DurationView:
    """One-shot formatter for an elapsed ``(seconds, micros)`` pair.

    Args:
        seconds: Whole seconds of the duration.
        micros: Sub-second microseconds.
        show_micros: Append ``.uuuuuu`` when ``True``.
    """

    seconds: int
    micros: int = 0
    show_micros: bool = False

    @classmethod
    def of(cls, timepoint: TimePoint, show_micros: bool = False) -> DurationView:
        """Capture *timepoint*'s fields for rendering."""
        return cls(timepoint.seconds, timepoint.micros, show_micros)

    def __str__(self) -> str:
        total = self.seconds * MICROS_PER_SECOND + self.micros
        sign = "-" if total < 0 else ""
        s, micros = divmod(abs(total), MICROS_PER_SECOND)

        days, s = divmod(s, _DAY)
        hours, s = divmod(s, _HOUR)
        minutes, s = divmod(s, _MINUTE)

        text = f"{days}d " if days > 0 else ""
        text += f"{hours:02d}:{minutes:02d}:{s:02d}"
        if self.show_micros:
            text += f".{micros:06d}"
        return sign + text

    def write(self, stream: TextIO) -> TextIO:
        """Write ``str(self)`` to *stream* and return the stream."""
        stream.write(str(self))
        return stream
