"""FocusRounds: a focus/break round timer for the desktop."""

__version__ = "0.1.0"
