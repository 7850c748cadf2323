"""Application entry point and setup for the MagiCo color mixer."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from magico.core.settings import load_settings, settings_path_from_env
from magico.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, build the mixer window and start the Qt event loop."""
    configure_logging()

    try:
        settings = load_settings(settings_path_from_env())
    except (FileNotFoundError, ValueError) as e:
        logging.error("Could not load settings: %s", e)
        sys.exit(1)

    app = QApplication(sys.argv)
    app.setApplicationName(settings.title)
    app.setApplicationDisplayName(settings.title)

    window = MainWindow(settings=settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
