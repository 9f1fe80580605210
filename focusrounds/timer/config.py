"""Timer configuration for FocusRounds.

Three integer fields, each at least 1.  Every update goes through
:func:`coerce_positive_int`, which never raises: anything that does not
parse to a positive number becomes the field's default.

Usage::

    config = TimerConfig()
    config.set_focus_minutes("50")
    config.set_rounds("lots")   # -> 4 (default)
    snapshot = config.snapshot()
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import Settings


# ── defaults ──────────────────────────────────────────────────────────────

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_ROUNDS = 4


def coerce_positive_int(value: object, default: int) -> int:
    """Parse *value* as a number and return its integer part, at least 1.

    Strings are stripped first.  ``None``, empty strings, non-numeric text,
    NaN/infinity, zero and negatives all yield *default*.  Positive values
    below 1 clamp to 1.
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    if number <= 0:
        return default
    return max(1, int(number))


@dataclass(frozen=True)
class SessionConfig:
    """Values captured by the engine when a session starts."""

    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    rounds: int = DEFAULT_ROUNDS

    @property
    def focus_seconds(self) -> int:
        return self.focus_minutes * 60

    @property
    def break_seconds(self) -> int:
        return self.break_minutes * 60


class TimerConfig:
    """User-editable durations and round count."""

    def __init__(
        self,
        focus_minutes: object = DEFAULT_FOCUS_MINUTES,
        break_minutes: object = DEFAULT_BREAK_MINUTES,
        rounds: object = DEFAULT_ROUNDS,
    ) -> None:
        self._focus_minutes = DEFAULT_FOCUS_MINUTES
        self._break_minutes = DEFAULT_BREAK_MINUTES
        self._rounds = DEFAULT_ROUNDS
        self.set_focus_minutes(focus_minutes)
        self.set_break_minutes(break_minutes)
        self.set_rounds(rounds)

    # ── fields ────────────────────────────────────────────────────────────

    @property
    def focus_minutes(self) -> int:
        return self._focus_minutes

    @property
    def break_minutes(self) -> int:
        return self._break_minutes

    @property
    def rounds(self) -> int:
        return self._rounds

    def set_focus_minutes(self, value: object) -> None:
        self._focus_minutes = coerce_positive_int(value, DEFAULT_FOCUS_MINUTES)

    def set_break_minutes(self, value: object) -> None:
        self._break_minutes = coerce_positive_int(value, DEFAULT_BREAK_MINUTES)

    def set_rounds(self, value: object) -> None:
        self._rounds = coerce_positive_int(value, DEFAULT_ROUNDS)

    # ── snapshots / settings ──────────────────────────────────────────────

    def snapshot(self) -> SessionConfig:
        """Frozen copy for a running session; later edits don't leak in."""
        return SessionConfig(
            focus_minutes=self._focus_minutes,
            break_minutes=self._break_minutes,
            rounds=self._rounds,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> TimerConfig:
        return cls(
            focus_minutes=settings.focus_minutes,
            break_minutes=settings.break_minutes,
            rounds=settings.rounds,
        )

    def apply_to(self, settings: Settings) -> None:
        """Copy the current values onto *settings* (caller saves)."""
        settings.focus_minutes = self._focus_minutes
        settings.break_minutes = self._break_minutes
        settings.rounds = self._rounds

    def __repr__(self) -> str:
        return (
            f"<TimerConfig focus={self._focus_minutes}m "
            f"break={self._break_minutes}m rounds={self._rounds}>"
        )
