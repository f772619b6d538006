# src/decayviz/app.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from decayengine.log import setup_logging
from .ui.main_window import MainWindow


def main() -> int:
    """Launch the desktop viewer."""
    setup_logging(logging.INFO)
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec()

