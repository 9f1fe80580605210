"""QSS stylesheet and phase colours for FocusRounds."""

from __future__ import annotations

from ..timer.engine import Phase

# ── phase accent colours ─────────────────────────────────────────────────

PHASE_COLORS: dict[Phase, str] = {
    Phase.FOCUS: "#FF6B6B",   # warm coral
    Phase.BREAK: "#4ECDC4",   # cool teal
    Phase.DONE:  "#A6E3A1",   # green
}

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def phase_color(phase: Phase) -> str:
    return PHASE_COLORS.get(phase, PALETTE["text"])


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    /* ── inputs ─────────────────────────────────── */
    QLineEdit {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 6px 10px;
    }}

    QLineEdit:focus {{
        border-color: {p['accent']};
    }}

    /* ── buttons ────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-weight: 600;
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 16px;
        padding: 12px 36px;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#secondaryButton {{
        background-color: transparent;
        color: {p['text_muted']};
        font-size: 13px;
        padding: 8px 16px;
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
        font-size: 13px;
        padding: 8px 16px;
    }}

    QPushButton#dangerButton:hover {{
        background-color: {p['danger']};
        color: {p['bg']};
    }}

    /* ── labels ─────────────────────────────────── */
    QLabel#hintLabel {{
        color: {p['text_muted']};
        font-size: 12px;
    }}

    QLabel#timeLabel {{
        font-size: 56px;
        font-weight: 700;
    }}
    """
