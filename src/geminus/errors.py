"""Exception hierarchy for geminus.

The Result container never raises on its own behalf during normal use. These
errors signal caller misuse only; exceptions raised by caller-supplied
functions propagate untouched.
"""

from __future__ import annotations


class GeminusError(Exception):
    """Base exception for all geminus errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(GeminusError):
    """A payload was read from the channel the Result does not hold."""


class ResultTypeError(GeminusError, TypeError):
    """A flat mapper returned something other than Success or Failure."""
