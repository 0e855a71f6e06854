"""
Clipboard sinks for PassGen.

A sink reports success with its return value. The controller does not
look at it; failures are logged here and shown to nobody else.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


class ClipboardManager:
    """Receives text to place on the clipboard."""

    def copy_to_clipboard(self, text: str) -> bool:
        raise NotImplementedError


class QtClipboardManager(ClipboardManager):
    """Copies through the running QApplication's system clipboard."""

    def copy_to_clipboard(self, text: str) -> bool:
        from PyQt5.QtWidgets import QApplication

        if QApplication.instance() is None:
            logger.error("Error accessing clipboard: no QApplication is running")
            return False

        try:
            clipboard = QApplication.clipboard()
            clipboard.setText(text)
        except RuntimeError as e:
            logger.error(f"Error copying to clipboard: {e}")
            return False

        logger.info("Password copied to clipboard")
        return True


class MockClipboardManager(ClipboardManager):
    """Records copied text instead of touching the system clipboard."""

    def __init__(self):
        self.copied: List[str] = []

    def copy_to_clipboard(self, text: str) -> bool:
        self.copied.append(text)
        logger.info(f"Copied {len(text)} characters to mock clipboard")
        return True
