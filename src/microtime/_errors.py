"""Exception hierarchy for microtime.

All exceptions raised by the package derive from
:class:`MicrotimeError`, so callers can catch one type at the
boundary (the CLI does exactly that).

Two conditions are deliberately *not* wrapped:

- Division by zero surfaces as the built-in ``ZeroDivisionError``,
  the same as for every other Python number.
- Operands of the wrong type make the operator return
  ``NotImplemented``, so Python raises ``TypeError``.
"""

from __future__ import annotations


class MicrotimeError(Exception):
    """Base class for all microtime errors."""


class InvalidOperandError(MicrotimeError, ValueError):
    """Scalar operand outside the domain of an arithmetic operator.

    Raised for negative multipliers and negative denominators.
    Subclasses :class:`ValueError` so generic numeric error handling
    keeps working.
    """

    def __init__(self, operator: str, operand: int) -> None:
        super().__init__(f"invalid operand for {operator}: {operand!r}")
        self.operator = operator
        self.operand = operand


class LocalTimeError(MicrotimeError):
    """The host could not convert seconds-since-epoch to local time."""
