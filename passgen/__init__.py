"""
PassGen - deterministic per-service password generator.

Each password is derived from a master password and a service name and is
never stored. This is a convenience generator built on a truncated,
unsalted SHA-256; it is not a hardened key derivation function.
"""

from .crypto import derive, PasswordGenerator, Sha256PasswordGenerator
from .storage import Config, ConfigManager, FileConfigManager, MemoryConfigManager

__version__ = "1.0.0"
__all__ = [
    "derive",
    "PasswordGenerator",
    "Sha256PasswordGenerator",
    "Config",
    "ConfigManager",
    "FileConfigManager",
    "MemoryConfigManager",
]
