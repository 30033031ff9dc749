"""Application entry point."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from policy_desk.core.container import build_container
from policy_desk.core.logging_config import configure_logging
from policy_desk.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def run() -> None:
    """Launch the GUI application."""
    container = build_container()
    configure_logging(container.config.logging.level)
    logger.info("Using policy API at %s", container.config.api.base_url)

    app = QApplication(sys.argv)
    window = MainWindow(container.policy_manager)
    window.show()
    try:
        exit_code = app.exec()
    finally:
        container.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
