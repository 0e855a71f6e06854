"""
Password controller for PassGen.

Ties the derivation strategy, the preference store and the clipboard sink
together. Secrets are borrowed per call and never kept on the controller;
the derived password is recomputed on every request.
"""

import logging

from . import config
from .crypto import PasswordGenerator
from .storage import ConfigManager
from .clipboard import ClipboardManager

logger = logging.getLogger(__name__)


class PasswordController:
    """Derives, masks and copies per-service passwords."""

    def __init__(self, password_generator: PasswordGenerator,
                 config_manager: ConfigManager,
                 clipboard_manager: ClipboardManager):
        """
        Initialize the controller and load the stored preferences once.

        Args:
            password_generator: Strategy used to derive passwords
            config_manager: Store for the show_password preference
            clipboard_manager: Sink that receives copied passwords
        """
        self.password_generator = password_generator
        self.config_manager = config_manager
        self.clipboard_manager = clipboard_manager
        self.config = config_manager.load()
        logger.debug(f"Loaded preferences: show_password={self.config.show_password}")

    def generate_password(self, secret: str, service: str) -> str:
        """
        Derive the password for a service.

        Returns:
            The derived password, or "" if either input is empty
        """
        if not secret or not service:
            return ""
        return self.password_generator.generate(secret, service)

    def get_visible_password(self, secret: str, service: str) -> str:
        """
        Get the password as it should be displayed.

        Returns:
            The derived password when visible, a same-length run of
            config.MASK_CHAR when hidden, or "" for incomplete input
        """
        password = self.generate_password(secret, service)
        if not password:
            return ""

        if self.config.show_password:
            return password
        return config.MASK_CHAR * len(password)

    def toggle_password_visibility(self) -> None:
        """Flip the show_password preference and persist it immediately."""
        self.config.show_password = not self.config.show_password
        self.config_manager.save(self.config)
        logger.info(f"Password visibility set to {'shown' if self.config.show_password else 'hidden'}")

    def copy_password_to_clipboard(self, secret: str, service: str) -> bool:
        """
        Copy the derived password to the clipboard.

        Returns:
            True if a password was sent to the clipboard sink, False if
            the input was incomplete and nothing was copied
        """
        password = self.generate_password(secret, service)
        if not password:
            return False

        self.clipboard_manager.copy_to_clipboard(password)
        return True

    def is_password_visible(self) -> bool:
        """Check whether the derived password is shown in clear."""
        return self.config.show_password
