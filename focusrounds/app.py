"""Main application window for FocusRounds."""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QStackedWidget, QSystemTrayIcon, QMenu, QWidget,
)

from .settings import Settings, load_settings, save_settings
from .timer.config import TimerConfig
from .timer.engine import Phase, PhaseEngine, SessionState
from .timer.notify import Notifier, WindowController
from .ui.setup_form import SetupForm
from .ui.status_view import StatusView
from .ui.styles import build_stylesheet
from .ui.tray import TrayNotifier, make_tray_icon

logger = logging.getLogger(__name__)

FORM_PAGE = "form"
STATUS_PAGE = "status"


class MainWindowController(WindowController):
    """Hides the main window when a session starts.

    Skipped when the user turned it off, or when there is no visible tray
    icon to bring the window back from.
    """

    def __init__(
        self,
        window: QWidget,
        settings: Settings,
        tray_icon: QSystemTrayIcon | None = None,
    ) -> None:
        self._window = window
        self._settings = settings
        self._tray_icon = tray_icon

    def dismiss(self) -> None:
        if not self._settings.hide_window_on_start:
            return
        if self._tray_icon is not None and not self._tray_icon.isVisible():
            return
        self._window.hide()


class FocusRoundsApp(QMainWindow):
    """Setup form and status view on a stacked page, plus a tray icon."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        notifier: Notifier | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.setWindowTitle("FocusRounds")
        self.setMinimumSize(380, 320)
        self.setStyleSheet(build_stylesheet())

        # ── settings / config ─────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        self._config = TimerConfig.from_settings(self._settings)

        # ── system tray icon ──────────────────────────────────────────
        self._tray_icon = QSystemTrayIcon(self)
        self._tray_icon.setIcon(make_tray_icon(None))
        self._tray_icon.setToolTip("FocusRounds — Ready")
        self._tray_icon.activated.connect(self._on_tray_activated)
        self._build_tray_menu()
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon.show()

        # ── engine ────────────────────────────────────────────────────
        self._engine = PhaseEngine(
            self._config,
            self,
            notifier=notifier or TrayNotifier(self._tray_icon, self._settings),
            window=MainWindowController(self, self._settings, self._tray_icon),
            clock=clock,
        )

        # ── pages ─────────────────────────────────────────────────────
        self._stack = QStackedWidget(self)
        self.setCentralWidget(self._stack)

        self._setup_form = SetupForm(self._config, self._stack)
        self._status_view = StatusView(self._engine, self._stack)
        self._stack.addWidget(self._setup_form)
        self._stack.addWidget(self._status_view)
        self._stack.setCurrentWidget(self._setup_form)

        # ── wire signals ──────────────────────────────────────────────
        self._setup_form.start_requested.connect(self.start_session)
        self._status_view.stop_requested.connect(self.stop_session)
        self._status_view.reset_requested.connect(self.reset_session)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.remaining_changed.connect(self._on_remaining_changed)

        self._restore_geometry()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> PhaseEngine:
        return self._engine

    @property
    def setup_form(self) -> SetupForm:
        return self._setup_form

    @property
    def status_view(self) -> StatusView:
        return self._status_view

    @property
    def current_page(self) -> str:
        if self._stack.currentWidget() is self._status_view:
            return STATUS_PAGE
        return FORM_PAGE

    # ══════════════════════════════════════════════════════════════════
    #  SESSION ACTIONS
    # ══════════════════════════════════════════════════════════════════

    def start_session(self) -> None:
        if self._engine.is_running:
            return
        self._config.apply_to(self._settings)
        self._save_settings()
        self._stack.setCurrentWidget(self._status_view)
        self._engine.start()

    def stop_session(self) -> None:
        self._engine.stop()
        self._show_form()

    def reset_session(self) -> None:
        self._engine.reset()
        self._show_form()

    def _show_form(self) -> None:
        self._setup_form.refresh()
        self._stack.setCurrentWidget(self._setup_form)

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, state: SessionState) -> None:
        self._tray_icon.setIcon(make_tray_icon(state.phase if state.running else None))
        self._tray_stop_action.setEnabled(state.running)
        if state.phase == Phase.DONE:
            self._tray_icon.setToolTip("FocusRounds — Done")
        elif not state.running:
            self._tray_icon.setToolTip("FocusRounds — Ready")

    def _on_remaining_changed(self, remaining: int) -> None:
        self._tray_icon.setToolTip(
            f"FocusRounds — {self._engine.phase_label} "
            f"{self._engine.formatted_remaining}"
        )

    # ══════════════════════════════════════════════════════════════════
    #  SYSTEM TRAY
    # ══════════════════════════════════════════════════════════════════

    def _build_tray_menu(self) -> None:
        menu = QMenu(self)

        show_action = menu.addAction("Show FocusRounds")
        show_action.triggered.connect(self._show_window)

        self._tray_stop_action = menu.addAction("Stop")
        self._tray_stop_action.setEnabled(False)
        self._tray_stop_action.triggered.connect(self.stop_session)

        menu.addSeparator()

        quit_action = menu.addAction("Quit")
        quit_action.triggered.connect(self._quit_app)

        self._tray_icon.setContextMenu(menu)

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        """Left-click on tray icon → show the window."""
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._show_window()

    def _show_window(self) -> None:
        self.show()
        self.raise_()
        self.activateWindow()

    def _quit_app(self) -> None:
        self._shutdown()
        QApplication.instance().quit()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)

    def _save_settings(self) -> None:
        try:
            save_settings(self._settings)
        except OSError:
            logger.warning("Could not save settings", exc_info=True)

    def _shutdown(self) -> None:
        """Release the tick timer and remember the window position."""
        if self._engine.is_running:
            self._engine.stop()
        if self.isVisible():
            pos = self.pos()
            self._settings.window_x = pos.x()
            self._settings.window_y = pos.y()
            self._save_settings()
        self._tray_icon.hide()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Hide to the tray while a session runs, otherwise really close."""
        if self._engine.is_running and self._tray_icon.isVisible():
            event.ignore()
            self.hide()
        else:
            event.accept()
            self._quit_app()
