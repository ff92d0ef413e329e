# navigatr/app.py
import sys

from loguru import logger
from PySide6.QtWidgets import QApplication

from .main_window import MainWindow
from .settings import load_settings


class NavigatrApp(QApplication):
    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("Navigatr")


def main():
    settings = load_settings()
    logger.remove()
    logger.add(sys.stderr, level=settings["log"]["level"])

    app = NavigatrApp(sys.argv)
    win = MainWindow(settings=settings)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
