"""Capability interfaces the engine calls into.

The engine never talks to the desktop directly.  It is handed a
:class:`Notifier` (toasts, status messages) and a :class:`WindowController`
(hide the main window when a session starts).  The Qt implementations
live in ``focusrounds.ui.tray`` and ``focusrounds.app``; the null ones
here are what the engine uses when nothing is injected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationKind(Enum):
    TRANSIENT = "transient"  # short-lived toast: "Focus #2, 25 min"
    STATUS = "status"        # persistent status line: "Round 2 of 4"
    SUCCESS = "success"      # session finished
    FAILURE = "failure"      # session stopped by the user


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    title: str
    message: str | None = None


class Notifier:
    """Receives one notification per phase transition, start and stop."""

    def notify(
        self, kind: NotificationKind, title: str, message: str | None = None,
    ) -> None:
        raise NotImplementedError


class NullNotifier(Notifier):
    def notify(
        self, kind: NotificationKind, title: str, message: str | None = None,
    ) -> None:
        pass


class WindowController:
    """Host window operations the engine may request."""

    def dismiss(self) -> None:
        raise NotImplementedError


class NullWindowController(WindowController):
    def dismiss(self) -> None:
        pass
