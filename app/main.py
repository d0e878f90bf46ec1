import logging
import sys

from PyQt6.QtWidgets import QApplication

from app.ui.app_shell import AppShell
from core import storage
from core.logging_setup import setup_logging


def main():
    setup_logging()
    storage.init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("ShopSmart")

    window = AppShell()
    window.show()
    logging.info("ShopSmart profile started")
    return app.exec()


# ---------------- ENTRY ----------------
if __name__ == "__main__":
    sys.exit(main())
