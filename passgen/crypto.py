"""
Password derivation for PassGen.

The derived password is the first 16 hex characters of
SHA-256("<secret>-<service>"). It is a fast, unsalted, deterministic
convenience generator and NOT a password-hashing KDF: there is no salt,
no iteration count and no memory hardness.
"""

from cryptography.hazmat.primitives import hashes

from . import config


def derive(secret: str, label: str) -> str:
    """
    Derive the password for ``label`` from ``secret``.

    Args:
        secret: The master secret (not validated, may be empty)
        label: The service label (not validated, may be empty)

    Returns:
        Lowercase hex string of config.DERIVED_PASSWORD_LENGTH characters
    """
    data = f"{secret}{config.DERIVATION_SEPARATOR}{label}".encode(config.TEXT_ENCODING)
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize().hex()[:config.DERIVED_PASSWORD_LENGTH]


class PasswordGenerator:
    """Strategy that turns (secret, service) into a password."""

    def generate(self, secret: str, service: str) -> str:
        raise NotImplementedError


class Sha256PasswordGenerator(PasswordGenerator):
    """Truncated SHA-256 derivation, see :func:`derive`."""

    def generate(self, secret: str, service: str) -> str:
        return derive(secret, service)
