"""
User interface for PassGen.

A single fixed-size window: master password and service name inputs, the
derived password (click to copy) with an eye button to show or hide it,
and a short "Copied!" confirmation. All logic lives in PasswordController;
this module only renders it.
"""

from PyQt5.QtWidgets import (
    QWidget, QFrame, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton
)
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont

from .controller import PasswordController
from . import config


class PasswordGeneratorWindow(QWidget):
    """Main window of the password generator."""

    def __init__(self, controller: PasswordController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.message_timer = QTimer(self)
        self.message_timer.setSingleShot(True)
        self.message_timer.timeout.connect(self.clear_message)
        self.init_ui()
        self.refresh_password()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(config.APP_TITLE)
        self.setFixedSize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
        self.setStyleSheet(f"PasswordGeneratorWindow {{ background-color: {config.BACKGROUND_COLOR}; }}")

        font = QFont()
        font.setPointSize(config.FONT_SIZE)

        layout = QVBoxLayout()
        layout.addSpacing(30)

        panel = QFrame()
        panel.setObjectName("panel")
        panel.setFixedWidth(config.PANEL_WIDTH)
        panel.setStyleSheet(
            f"QFrame#panel {{ background-color: {config.PANEL_COLOR}; "
            f"border: 1px solid {config.PANEL_BORDER_COLOR}; border-radius: 10px; }}"
        )
        panel_layout = QVBoxLayout()
        panel_layout.setContentsMargins(20, 20, 20, 20)

        # Inputs
        self.master_password_input = QLineEdit()
        self.master_password_input.setEchoMode(QLineEdit.Password)
        self.master_password_input.setPlaceholderText(config.MASTER_PASSWORD_PLACEHOLDER)
        self.master_password_input.setAlignment(Qt.AlignCenter)
        self.master_password_input.setMinimumHeight(config.FIELD_HEIGHT)
        self.master_password_input.setFont(font)
        self.master_password_input.textChanged.connect(self.refresh_password)
        panel_layout.addWidget(self.master_password_input)

        panel_layout.addSpacing(10)

        self.service_name_input = QLineEdit()
        self.service_name_input.setPlaceholderText(config.SERVICE_NAME_PLACEHOLDER)
        self.service_name_input.setAlignment(Qt.AlignCenter)
        self.service_name_input.setMinimumHeight(config.FIELD_HEIGHT)
        self.service_name_input.setFont(font)
        self.service_name_input.textChanged.connect(self.refresh_password)
        panel_layout.addWidget(self.service_name_input)

        panel_layout.addSpacing(15)

        # Derived password row
        password_row = QFrame()
        password_row.setObjectName("passwordRow")
        password_row.setStyleSheet("QFrame#passwordRow { background-color: white; border-radius: 4px; }")
        row_layout = QHBoxLayout()
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.setSpacing(0)

        self.password_button = QPushButton()
        self.password_button.setFlat(True)
        self.password_button.setFont(font)
        self.password_button.setCursor(Qt.PointingHandCursor)
        self.password_button.setFixedHeight(config.PASSWORD_FIELD_HEIGHT)
        self.password_button.setStyleSheet("QPushButton { color: black; border: none; }")
        self.password_button.setToolTip("Click to copy")
        self.password_button.clicked.connect(self.copy_password)
        row_layout.addWidget(self.password_button, 1)

        self.toggle_button = QPushButton()
        self.toggle_button.setFont(font)
        self.toggle_button.setFixedSize(config.PASSWORD_FIELD_HEIGHT, config.PASSWORD_FIELD_HEIGHT)
        self.toggle_button.setStyleSheet(
            "QPushButton { color: black; background: transparent; border: none; }"
            "QPushButton:hover { background-color: rgb(200, 200, 200); }"
        )
        self.toggle_button.clicked.connect(self.toggle_password_visibility)
        row_layout.addWidget(self.toggle_button)

        password_row.setLayout(row_layout)
        panel_layout.addWidget(password_row)

        # Copy confirmation
        self.message_label = QLabel("")
        message_font = QFont()
        message_font.setPointSize(config.MESSAGE_FONT_SIZE)
        self.message_label.setFont(message_font)
        self.message_label.setStyleSheet(f"color: {config.MESSAGE_COLOR};")
        self.message_label.setAlignment(Qt.AlignCenter)
        panel_layout.addWidget(self.message_label)

        panel.setLayout(panel_layout)
        layout.addWidget(panel, 0, Qt.AlignHCenter)
        layout.addStretch()

        self.setLayout(layout)

    def refresh_password(self):
        """Re-derive and redraw the password for the current inputs."""
        self.password_button.setText(self.controller.get_visible_password(
            self.master_password_input.text(),
            self.service_name_input.text(),
        ))
        if self.controller.is_password_visible():
            self.toggle_button.setText(config.ICON_PASSWORD_VISIBLE)
            self.toggle_button.setToolTip("Hide password")
        else:
            self.toggle_button.setText(config.ICON_PASSWORD_HIDDEN)
            self.toggle_button.setToolTip("Show password")

    def toggle_password_visibility(self):
        """Show or hide the derived password."""
        self.controller.toggle_password_visibility()
        self.refresh_password()

    def copy_password(self):
        """Copy the derived password to the clipboard."""
        if self.controller.copy_password_to_clipboard(
            self.master_password_input.text(),
            self.service_name_input.text(),
        ):
            # Show temporary notification
            self.message_label.setText(config.CLIPBOARD_COPIED_MESSAGE)
            self.message_timer.start(config.CLIPBOARD_MESSAGE_TIMEOUT_MS)

    def clear_message(self):
        self.message_label.setText("")
