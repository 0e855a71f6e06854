"""
Main entry point for PassGen.
"""

import sys
import signal
import argparse
import logging
from typing import List, Optional
from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from passgen.ui import PasswordGeneratorWindow
from passgen.controller import PasswordController
from passgen.crypto import Sha256PasswordGenerator
from passgen.storage import FileConfigManager
from passgen.clipboard import QtClipboardManager
from passgen import config

logger = logging.getLogger(__name__)


class PassGenApp:
    """Main application class for the password generator."""

    def __init__(self, config_path: Optional[str] = None, qt_args: Optional[List[str]] = None):
        """
        Initialize the application.

        Args:
            config_path: Preferences file, defaults to ~/.passgen/config.json
            qt_args: Arguments handed to QApplication
        """
        self.app = QApplication(qt_args if qt_args is not None else sys.argv[:1])
        self.app.setApplicationName(config.APP_NAME)
        self.app.setStyle(config.APP_STYLE)

        self.controller = PasswordController(
            Sha256PasswordGenerator(),
            FileConfigManager(config_path),
            QtClipboardManager(),
        )
        self.window = PasswordGeneratorWindow(self.controller)

        # Handle Ctrl+C gracefully
        signal.signal(signal.SIGINT, signal.SIG_DFL)

    def run(self) -> int:
        """Run the application."""
        self.window.show()
        return self.app.exec_()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Derive per-service passwords from a master password.",
    )
    parser.add_argument(
        "--config",
        help="Preferences file (default: ~/%s/%s)" % (config.CONFIG_DIR_NAME, config.CONFIG_FILE),
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=config.LOG_FORMAT,
    )
    # Enable high DPI scaling
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger.info(f"Starting {config.APP_TITLE}")
    app = PassGenApp(args.config)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
