"""
Configuration constants for the PassGen application.
"""

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the application. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "Password Generator"  # Use: Window title and Qt application name. Type: str. Range: Any valid string.
APP_TITLE = f"{APP_NAME} v{APP_VERSION}"  # Use: Title shown on the main window, combining name and version. Type: str (f-string). Range: Derived from APP_NAME and APP_VERSION.

# Derivation Settings
DERIVATION_SEPARATOR = "-"  # Use: Joins the master secret and the service label before hashing. Type: str. Range: Must stay "-" or every derived password changes.
DERIVED_PASSWORD_LENGTH = 16  # Use: Number of hex characters kept from the SHA-256 digest (16 hex = 8 bytes = 64 bits). Type: int. Range: 1 to 64. Changing it changes every derived password.
TEXT_ENCODING = "utf-8"  # Use: Encoding applied to "secret-label" before hashing. Type: str. Range: A Python codec name. Changing it changes non-ASCII results.

# Display Settings
MASK_CHAR = "*"  # Use: Character repeated to hide the derived password, one per hidden character. Type: str. Range: A single character.
ICON_PASSWORD_VISIBLE = "\U0001F441"  # Use: Toggle button label while the password is revealed (eye). Type: str. Range: Any short string.
ICON_PASSWORD_HIDDEN = "\U0001F648"  # Use: Toggle button label while the password is masked (see-no-evil monkey). Type: str. Range: Any short string.
MASTER_PASSWORD_PLACEHOLDER = "Master password"  # Use: Placeholder text of the master secret input. Type: str. Range: Any string.
SERVICE_NAME_PLACEHOLDER = "Service name"  # Use: Placeholder text of the service label input. Type: str. Range: Any string.
CLIPBOARD_COPIED_MESSAGE = "Copied!"  # Use: Confirmation shown under the password field after a copy. Type: str. Range: Any string.
CLIPBOARD_MESSAGE_TIMEOUT_MS = 2000  # Use: How long the copy confirmation stays visible, in milliseconds. Type: int. Range: Positive integer.

# Window Settings
WINDOW_WIDTH = 400  # Use: Fixed width of the main window in pixels. Type: int. Range: Positive integer.
WINDOW_HEIGHT = 300  # Use: Fixed height of the main window in pixels. Type: int. Range: Positive integer.
PANEL_WIDTH = 300  # Use: Width of the central input panel in pixels. Type: int. Range: Less than WINDOW_WIDTH.
FIELD_HEIGHT = 36  # Use: Minimum height of the input fields in pixels. Type: int. Range: Positive integer.
PASSWORD_FIELD_HEIGHT = 30  # Use: Height of the derived password row and size of the toggle button. Type: int. Range: Positive integer.
FONT_SIZE = 16  # Use: Point size for inputs and the derived password. Type: int. Range: Positive integer.
MESSAGE_FONT_SIZE = 12  # Use: Point size for the copy confirmation. Type: int. Range: Positive integer.
BACKGROUND_COLOR = "#913741"  # Use: Window background colour. Type: str. Range: Any Qt colour string.
PANEL_COLOR = "#3c4650"  # Use: Central panel fill. Type: str. Range: Any Qt colour string.
PANEL_BORDER_COLOR = "#646e78"  # Use: Central panel border. Type: str. Range: Any Qt colour string.
MESSAGE_COLOR = "#00ff00"  # Use: Copy confirmation text colour. Type: str. Range: Any Qt colour string.

# Application UI Settings
APP_STYLE = 'Fusion'  # Use: PyQt5 application style. Type: str. Range: Valid PyQt5 style names (e.g., 'Fusion', 'Windows', 'Macintosh').
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'  # Use: Format passed to logging.basicConfig by main(). Type: str. Range: Any logging format string.

# File and Directory Names
CONFIG_DIR_NAME = ".passgen"  # Use: Name of the hidden directory within the user's home directory where PassGen stores its preferences. Type: str. Range: Any valid directory name.
CONFIG_FILE = "config.json"  # Use: Filename of the JSON record holding the show_password preference. Type: str. Range: Any valid filename.
