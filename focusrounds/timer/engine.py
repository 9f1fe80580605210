"""Phase state machine for FocusRounds.

Phases
------
FOCUS   Focus interval counting down.
BREAK   Break interval counting down.
DONE    All rounds finished.  Terminal.

Transitions (only from an expired tick)
---------------------------------------
FOCUS → BREAK                       (same round)
BREAK → FOCUS                       (round < rounds, round + 1)
BREAK → DONE                        (round == rounds)

Controls
--------
start()   FOCUS, round 1, new deadline.  No-op while running.
stop()    Halt ticking and clear the deadline.  Phase/round untouched.
reset()   stop(), then back to FOCUS round 1.  Does not restart.

The engine keeps an absolute deadline rather than decrementing a counter,
so a late or skipped tick never stretches a phase.  The clock is
injectable; tests advance a fake clock and call :meth:`tick` directly.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .config import SessionConfig, TimerConfig
from .notify import (
    NotificationKind,
    Notifier,
    NullNotifier,
    NullWindowController,
    WindowController,
)

logger = logging.getLogger(__name__)


# ── enums / state ─────────────────────────────────────────────────────────


class Phase(Enum):
    FOCUS = "focus"
    BREAK = "break"
    DONE = "done"


PHASE_LABELS: dict[Phase, str] = {
    Phase.FOCUS: "Focus",
    Phase.BREAK: "Break",
    Phase.DONE: "Done",
}


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot; the engine swaps in a new one on every change."""

    phase: Phase = Phase.FOCUS
    current_round: int = 1
    deadline: float | None = None
    running: bool = False


INITIAL_STATE = SessionState()

TICK_INTERVAL_MS = 1000


def format_mmss(seconds: int) -> str:
    """``65`` → ``"01:05"``.  Minutes are not wrapped at 60."""
    m, s = divmod(max(0, int(seconds)), 60)
    return f"{m:02d}:{s:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class PhaseEngine(QObject):
    """Qt-driven focus/break session timer.

    Signals
    -------
    state_changed(state: SessionState)
        Emitted after every mutation (start, transition, stop, reset).
    remaining_changed(remaining_seconds: int)
        Emitted on every processed tick while running.
    phase_completed(data: dict)
        Emitted when a FOCUS or BREAK phase ends naturally.  Keys:
        ``phase``, ``round_number``, ``rounds``, ``duration_seconds``.
    session_finished()
        Emitted once when DONE is entered.
    """

    state_changed = pyqtSignal(object)
    remaining_changed = pyqtSignal(int)
    phase_completed = pyqtSignal(object)
    session_finished = pyqtSignal()

    def __init__(
        self,
        config: TimerConfig | None = None,
        parent: QObject | None = None,
        *,
        notifier: Notifier | None = None,
        window: WindowController | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)

        self._config: TimerConfig = config if config is not None else TimerConfig()
        self._session_config: SessionConfig = self._config.snapshot()
        self._notifier: Notifier = notifier or NullNotifier()
        self._window: WindowController = window or NullWindowController()
        self._clock = clock

        self._state: SessionState = INITIAL_STATE
        self._phase_duration: int = 0  # seconds; for percent_complete

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self.tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def current_round(self) -> int:
        return self._state.current_round

    @property
    def deadline(self) -> float | None:
        return self._state.deadline

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def config(self) -> TimerConfig:
        """The editable configuration (read by the next ``start()``)."""
        return self._config

    @property
    def session_config(self) -> SessionConfig:
        """The values captured by the current or most recent session."""
        return self._session_config

    @property
    def rounds(self) -> int:
        return self._session_config.rounds

    @property
    def timer_active(self) -> bool:
        return self._qt_timer.isActive()

    # ── derived display values ────────────────────────────────────────

    @property
    def remaining_seconds(self) -> int:
        """Whole seconds left, rounded up; 0 when no deadline is set."""
        deadline = self._state.deadline
        if deadline is None:
            return 0
        return math.ceil(max(0.0, deadline - self._clock()))

    @property
    def formatted_remaining(self) -> str:
        return format_mmss(self.remaining_seconds)

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the active phase."""
        if self._state.deadline is None or self._phase_duration <= 0:
            return 1.0 if self._state.phase == Phase.DONE else 0.0
        elapsed = self._phase_duration - (self._state.deadline - self._clock())
        return max(0.0, min(1.0, elapsed / self._phase_duration))

    @property
    def phase_label(self) -> str:
        return PHASE_LABELS[self._state.phase]

    @property
    def round_label(self) -> str:
        return f"Round {self._state.current_round} of {self.rounds}"

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin a new session at FOCUS round 1.

        Calling this while a session is running is a caller error; it is
        ignored.  Stop or reset first.
        """
        if self._state.running:
            logger.warning("start() ignored: a session is already running")
            return

        self._session_config = self._config.snapshot()
        logger.info(
            "Session started: %d x (%d min focus + %d min break)",
            self._session_config.rounds,
            self._session_config.focus_minutes,
            self._session_config.break_minutes,
        )
        self._begin_phase(Phase.FOCUS, 1)
        self._qt_timer.start()
        self._call_safely(self._window.dismiss)

    def stop(self) -> None:
        """Halt ticking and clear the deadline.  Safe to call repeatedly.

        Only interrupting a running session is announced.
        """
        was_running = self._state.running
        self._qt_timer.stop()
        self._set_state(replace(self._state, deadline=None, running=False))
        self._phase_duration = 0
        if was_running:
            logger.info("Session stopped")
            self._notify(NotificationKind.FAILURE, "Pomodoro stopped")

    def reset(self) -> None:
        """Stop, then rewind to FOCUS round 1 without restarting."""
        self.stop()
        self._set_state(INITIAL_STATE)
        logger.info("Session reset")

    # ══════════════════════════════════════════════════════════════════
    #  TICK / TRANSITIONS
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> None:
        """Periodic check.  Fires at most one transition per expiry.

        A transition always installs a fresh deadline or enters DONE, so
        repeated calls before the next deadline do nothing.
        """
        state = self._state
        if not state.running or state.deadline is None:
            return

        if self._clock() >= state.deadline:
            self._transition()

        if self._state.running:
            self.remaining_changed.emit(self.remaining_seconds)

    def _transition(self) -> None:
        """Advance one step.  Only called from an expired tick."""
        cfg = self._session_config
        state = self._state
        completed = {
            "phase": state.phase.value,
            "round_number": state.current_round,
            "rounds": cfg.rounds,
            "duration_seconds": self._phase_duration,
        }

        if state.phase == Phase.FOCUS:
            logger.debug("Round %d: focus complete", state.current_round)
            self._notify(
                NotificationKind.STATUS, "Focus complete, time for a break",
            )
            self._begin_phase(Phase.BREAK, state.current_round)

        elif state.phase == Phase.BREAK:
            if state.current_round < cfg.rounds:
                next_round = state.current_round + 1
                logger.debug("Break over, starting round %d", next_round)
                self._notify(
                    NotificationKind.STATUS,
                    f"Round {next_round} of {cfg.rounds}",
                )
                self._begin_phase(Phase.FOCUS, next_round)
            else:
                self._finish()

        self.phase_completed.emit(completed)

    def _begin_phase(self, phase: Phase, round_number: int) -> None:
        cfg = self._session_config
        if phase == Phase.FOCUS:
            minutes = cfg.focus_minutes
            title = f"Focus #{round_number}"
        else:
            minutes = cfg.break_minutes
            title = "Break"

        self._phase_duration = minutes * 60
        self._set_state(SessionState(
            phase=phase,
            current_round=round_number,
            deadline=self._clock() + self._phase_duration,
            running=True,
        ))
        self._notify(NotificationKind.TRANSIENT, title, f"{minutes} min")

    def _finish(self) -> None:
        self._qt_timer.stop()
        self._phase_duration = 0
        self._set_state(replace(
            self._state, phase=Phase.DONE, deadline=None, running=False,
        ))
        logger.info("Session finished after %d rounds", self._session_config.rounds)
        self._notify(NotificationKind.SUCCESS, "\U0001F389 Done!")
        self.session_finished.emit()

    def _set_state(self, new_state: SessionState) -> None:
        self._state = new_state
        self.state_changed.emit(new_state)

    # ── capability calls ──────────────────────────────────────────────

    def _notify(
        self, kind: NotificationKind, title: str, message: str | None = None,
    ) -> None:
        self._call_safely(self._notifier.notify, kind, title, message)

    @staticmethod
    def _call_safely(fn: Callable, *args) -> None:
        """Fire-and-forget: a failing collaborator must not break a tick."""
        try:
            fn(*args)
        except Exception:
            logger.exception("%r failed", fn)
