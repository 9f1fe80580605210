"""UI package."""

from .setup_form import SetupForm
from .status_view import StatusView
from .tray import TrayNotifier, make_tray_icon

__all__ = [
    "SetupForm",
    "StatusView",
    "TrayNotifier",
    "make_tray_icon",
]
