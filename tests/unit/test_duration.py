"""Unit tests for microtime._duration — DurationView rendering.

Test Techniques Used:
    - Specification-based Testing: ``[Nd ]HH:MM:SS[.uuuuuu]`` layout
    - Boundary Value Analysis: Day/hour/minute roll-over points
    - Snapshot Isolation: View does not observe later source changes
"""

from __future__ import annotations

import io

import pytest

from microtime._duration import DurationView
from microtime._timepoint import TimePoint


class TestRendering:
    """Technique: Specification-based Testing — rendered text."""

    def test_hours_minutes_seconds(self) -> None:
        """3661 seconds renders as 01:01:01."""
        assert str(DurationView.of(TimePoint(3661, 0))) == "01:01:01"

    def test_days_prefix(self) -> None:
        """90000 seconds renders with a day prefix."""
        assert str(DurationView.of(TimePoint(90000, 0))) == "1d 01:00:00"

    def test_show_micros(self) -> None:
        """Sub-second part is appended when requested."""
        view = DurationView.of(TimePoint(5, 250000), True)
        assert str(view) == "00:00:05.250000"

    def test_micros_hidden_by_default(self) -> None:
        assert str(DurationView(5, 250000)) == "00:00:05"

    def test_micros_zero_padded(self) -> None:
        assert str(DurationView(0, 7, show_micros=True)) == "00:00:00.000007"

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "00:00:00"),
            (59, "00:00:59"),
            (60, "00:01:00"),
            (3599, "00:59:59"),
            (3600, "01:00:00"),
            (86399, "23:59:59"),
            (86400, "1d 00:00:00"),
            (10 * 86400 + 45296, "10d 12:34:56"),
        ],
    )
    def test_roll_over_points(self, seconds: int, expected: str) -> None:
        """Technique: Boundary Value Analysis — unit boundaries."""
        assert str(DurationView(seconds)) == expected

    def test_negative_duration_has_sign(self) -> None:
        """Negative values render their magnitude behind '-'."""
        delta = TimePoint(10) - TimePoint(3671, 500000)
        assert str(DurationView.of(delta, show_micros=True)) == "-01:01:01.500000"

    def test_unnormalised_micros_carry_into_seconds(self) -> None:
        assert str(DurationView(59, 1_000_000)) == "00:01:00"

    def test_write_returns_stream(self) -> None:
        buf = io.StringIO()
        DurationView(61).write(buf).write("!")
        assert buf.getvalue() == "00:01:01!"


class TestSnapshot:
    """Technique: Snapshot Isolation — value copy at construction."""

    def test_view_unaffected_by_rebinding_source(self) -> None:
        source = TimePoint(3661)
        view = DurationView.of(source)
        source += TimePoint(86400)
        assert str(view) == "01:01:01"
        assert (view.seconds, view.micros) == (3661, 0)

    def test_view_is_immutable(self) -> None:
        view = DurationView(1)
        with pytest.raises(AttributeError):
            view.show_micros = True  # type: ignore[misc]
