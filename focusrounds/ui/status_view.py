"""Read-only session status: phase, round, countdown, Stop / Reset.

Re-renders on every ``state_changed`` from the engine and on its own
refresh timer, which runs faster than the engine's one-second tick so the
countdown never looks stale.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QProgressBar,
)

from ..timer.engine import PhaseEngine, Phase, SessionState
from .styles import phase_color

REFRESH_MS = 500


class StatusView(QWidget):
    """Shown while a session is on screen (running or finished)."""

    stop_requested = pyqtSignal()
    reset_requested = pyqtSignal()

    def __init__(self, engine: PhaseEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()

        self._refresh_timer = QTimer(self)
        self._refresh_timer.setInterval(REFRESH_MS)
        self._refresh_timer.timeout.connect(self.refresh)

        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.remaining_changed.connect(lambda _s: self.refresh())
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(10)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._phase_label = QLabel("", self)
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._round_label = QLabel("", self)
        self._round_label.setObjectName("hintLabel")
        self._round_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._round_label)

        self._time_label = QLabel("00:00", self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        self._progress = QProgressBar(self)
        self._progress.setRange(0, 1000)
        self._progress.setTextVisible(False)
        self._progress.setFixedHeight(6)
        layout.addWidget(self._progress)

        layout.addSpacing(12)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._stop_btn = QPushButton("Stop", self)
        self._stop_btn.setObjectName("dangerButton")
        self._stop_btn.clicked.connect(self.stop_requested.emit)

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("secondaryButton")
        self._reset_btn.clicked.connect(self.reset_requested.emit)

        btn_row.addWidget(self._stop_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, state: SessionState) -> None:
        if state.running:
            if not self._refresh_timer.isActive():
                self._refresh_timer.start()
        else:
            self._refresh_timer.stop()
        self.refresh()

    def refresh(self) -> None:
        engine = self._engine
        phase = engine.phase

        self._phase_label.setText(engine.phase_label)
        self._phase_label.setStyleSheet(
            f"font-size: 22px; font-weight: 700; color: {phase_color(phase)};"
        )

        if phase == Phase.DONE:
            self._round_label.setText("\U0001F389")
            self._time_label.setVisible(False)
        else:
            self._round_label.setText(engine.round_label)
            self._time_label.setVisible(True)
            self._time_label.setText(engine.formatted_remaining)

        self._progress.setValue(int(engine.percent_complete * 1000))

    # ── read-back ─────────────────────────────────────────────────────────

    @property
    def phase_text(self) -> str:
        return self._phase_label.text()

    @property
    def round_text(self) -> str:
        return self._round_label.text()

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def time_visible(self) -> bool:
        return not self._time_label.isHidden()

    @property
    def refresh_active(self) -> bool:
        return self._refresh_timer.isActive()
