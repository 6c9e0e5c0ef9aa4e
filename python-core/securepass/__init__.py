"""
SecurePass - salted password hashing with constant-time verification.

PBKDF2 with a configurable HMAC variant, per-password random salts and
base64 text records suitable for storage.

Modules:
    config: HasherConfig and the one-time process-wide configuration
    kdf: Salt generation and PBKDF2 key derivation
    hasher: PasswordHasher and CredentialRecord
    memory: Password buffer wiping and constant-time comparison
    encoding: Base64 helpers
    errors: Exception hierarchy

Usage:
    >>> import securepass
    >>> securepass.initialize("PBKDF2WithHmacSHA512", 512, 64, 50000)
    >>> hasher = securepass.PasswordHasher()
    >>> record = hasher.compute_hash("Test_Password")
    >>> hasher.authenticate("Test_Password", *record)
    True
"""

from .config import HasherConfig, ConfigurationHolder, initialize, get_config, is_initialized
from .errors import (
    SecurePassError,
    AlreadyInitializedError,
    NotInitializedError,
    UnsupportedAlgorithmError,
    InvalidParameterError,
    DecodingError,
)
from .hasher import PasswordHasher, CredentialRecord
from .kdf import supported_algorithms
from .memory import constant_time_compare, wipe

__all__ = [
    # Configuration
    "HasherConfig",
    "ConfigurationHolder",
    "initialize",
    "get_config",
    "is_initialized",
    # Hashing
    "PasswordHasher",
    "CredentialRecord",
    "supported_algorithms",
    "constant_time_compare",
    "wipe",
    # Errors
    "SecurePassError",
    "AlreadyInitializedError",
    "NotInitializedError",
    "UnsupportedAlgorithmError",
    "InvalidParameterError",
    "DecodingError",
]

__version__ = "1.0.0"
