"""System-tray icon and the notifier that speaks through it."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QIcon, QImage, QPainter, QPen, QPixmap
from PyQt6.QtWidgets import QSystemTrayIcon

from ..settings import Settings
from ..timer.engine import Phase
from ..timer.notify import NotificationKind, Notifier

# How long each kind stays on screen (ms).  The OS may ignore this.
_DISPLAY_MS: dict[NotificationKind, int] = {
    NotificationKind.TRANSIENT: 3000,
    NotificationKind.STATUS:    8000,
    NotificationKind.SUCCESS:   10000,
    NotificationKind.FAILURE:   5000,
}

_MESSAGE_ICONS: dict[NotificationKind, QSystemTrayIcon.MessageIcon] = {
    NotificationKind.TRANSIENT: QSystemTrayIcon.MessageIcon.Information,
    NotificationKind.STATUS:    QSystemTrayIcon.MessageIcon.Information,
    NotificationKind.SUCCESS:   QSystemTrayIcon.MessageIcon.Information,
    NotificationKind.FAILURE:   QSystemTrayIcon.MessageIcon.Warning,
}


def make_tray_icon(phase: Phase | None) -> QIcon:
    """Generate a 32×32 monochrome template icon for the menu bar.

    - no session:  thin circle outline
    - FOCUS:       filled circle
    - BREAK:       circle outline with a centre dot
    - DONE:        same as no session
    """
    size = 64  # draw at 2× for Retina
    img = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)
    p = QPainter(img)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    colour = QColor(0, 0, 0, 220)
    cx, cy, r = size // 2, size // 2, size // 2 - 4

    if phase == Phase.FOCUS:
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(colour)
        p.drawEllipse(cx - r, cy - r, r * 2, r * 2)
    else:
        p.setPen(QPen(colour, 4))
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawEllipse(cx - r, cy - r, r * 2, r * 2)
        if phase == Phase.BREAK:
            p.setPen(Qt.PenStyle.NoPen)
            p.setBrush(colour)
            dot_r = 6
            p.drawEllipse(cx - dot_r, cy - dot_r, dot_r * 2, dot_r * 2)

    p.end()
    img.setDevicePixelRatio(2.0)
    return QIcon(QPixmap.fromImage(img))


class TrayNotifier(Notifier):
    """Shows engine notifications as tray balloons / macOS banners."""

    def __init__(self, tray_icon: QSystemTrayIcon, settings: Settings) -> None:
        self._tray_icon = tray_icon
        self._settings = settings

    def notify(
        self, kind: NotificationKind, title: str, message: str | None = None,
    ) -> None:
        if not self._settings.notifications_enabled:
            return
        if not self._tray_icon.supportsMessages():
            return
        self._tray_icon.showMessage(
            title,
            message or "",
            _MESSAGE_ICONS[kind],
            _DISPLAY_MS[kind],
        )
