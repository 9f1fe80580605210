"""Shared test helpers for FocusRounds."""

from focusrounds.timer.engine import PhaseEngine
from focusrounds.timer.notify import (
    Notification, NotificationKind, Notifier, WindowController,
)


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def __call__(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingNotifier(Notifier):
    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, kind, title, message=None):
        self.notifications.append(Notification(kind, title, message))

    def of_kind(self, kind: NotificationKind) -> list[Notification]:
        return [n for n in self.notifications if n.kind == kind]

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def clear(self):
        self.notifications.clear()


class ExplodingNotifier(Notifier):
    def notify(self, kind, title, message=None):
        raise RuntimeError("notification service down")


class RecordingWindow(WindowController):
    def __init__(self):
        self.dismiss_count = 0

    def dismiss(self):
        self.dismiss_count += 1


def expire_phase(engine: PhaseEngine, clock: FakeClock) -> None:
    """Jump the clock to the current deadline and tick once."""
    assert engine.deadline is not None, "no active phase to expire"
    clock.now = engine.deadline
    engine.tick()


def run_to_completion(engine: PhaseEngine, clock: FakeClock) -> None:
    """Expire phases until the session leaves the running state."""
    for _ in range(2 * engine.rounds):
        expire_phase(engine, clock)
