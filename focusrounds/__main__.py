"""Allow running FocusRounds as a module: python -m focusrounds."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import FocusRoundsApp


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("FOCUSROUNDS_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("FocusRounds")
    app.setOrganizationName("FocusRounds")
    # Keep ticking in the tray after the window is dismissed.
    app.setQuitOnLastWindowClosed(False)

    window = FocusRoundsApp()
    window.show()
    logging.getLogger(__name__).info("FocusRounds ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
