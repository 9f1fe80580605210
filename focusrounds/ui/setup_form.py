"""Pre-session form: focus minutes, break minutes, rounds, Start.

Each field writes straight into the bound :class:`TimerConfig` on every
edit.  Invalid text is not rejected here; the config normalizes it to the
field default, and the normalized value is what the next session uses.
"""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QLineEdit, QPushButton,
)

from ..timer.config import TimerConfig


class SetupForm(QWidget):
    """Editable configuration plus the Start action."""

    start_requested = pyqtSignal()

    def __init__(self, config: TimerConfig, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._config = config
        self._build_ui()
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        hint = QLabel(
            "Set the durations and start. The window can be closed; "
            "notifications announce every phase change.",
            self,
        )
        hint.setObjectName("hintLabel")
        hint.setWordWrap(True)
        root.addWidget(hint)

        form = QFormLayout()
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._focus_edit = QLineEdit(self)
        self._focus_edit.textChanged.connect(self._config.set_focus_minutes)
        form.addRow("Focus (min):", self._focus_edit)

        self._break_edit = QLineEdit(self)
        self._break_edit.textChanged.connect(self._config.set_break_minutes)
        form.addRow("Break (min):", self._break_edit)

        self._rounds_edit = QLineEdit(self)
        self._rounds_edit.textChanged.connect(self._config.set_rounds)
        form.addRow("Rounds:", self._rounds_edit)

        root.addLayout(form)
        root.addStretch()

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._start_btn = QPushButton("Start Pomodoro", self)
        self._start_btn.setObjectName("primaryButton")
        self._start_btn.clicked.connect(self.start_requested.emit)
        btn_row.addWidget(self._start_btn)
        btn_row.addStretch()
        root.addLayout(btn_row)

    # ── public ────────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Show the config's current (normalized) values."""
        self._focus_edit.setText(str(self._config.focus_minutes))
        self._break_edit.setText(str(self._config.break_minutes))
        self._rounds_edit.setText(str(self._config.rounds))

    @property
    def config(self) -> TimerConfig:
        return self._config
