"""Timer package."""

from .config import (
    TimerConfig,
    SessionConfig,
    coerce_positive_int,
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_BREAK_MINUTES,
    DEFAULT_ROUNDS,
)
from .engine import (
    PhaseEngine,
    Phase,
    SessionState,
    INITIAL_STATE,
    TICK_INTERVAL_MS,
    format_mmss,
)
from .notify import (
    Notification,
    NotificationKind,
    Notifier,
    NullNotifier,
    WindowController,
    NullWindowController,
)

__all__ = [
    "TimerConfig",
    "SessionConfig",
    "coerce_positive_int",
    "DEFAULT_FOCUS_MINUTES",
    "DEFAULT_BREAK_MINUTES",
    "DEFAULT_ROUNDS",
    "PhaseEngine",
    "Phase",
    "SessionState",
    "INITIAL_STATE",
    "TICK_INTERVAL_MS",
    "format_mmss",
    "Notification",
    "NotificationKind",
    "Notifier",
    "NullNotifier",
    "WindowController",
    "NullWindowController",
]
