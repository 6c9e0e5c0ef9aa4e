#!/usr/bin/env python3
"""
SecurePass Key Derivation Module

PBKDF2 (RFC 8018 / NIST SP 800-132) with a configurable HMAC pseudorandom
function, backed by the cryptography package.

Algorithm Identifiers:
    JCA-style names such as "PBKDF2WithHmacSHA512" are accepted, as are the
    short forms "pbkdf2-sha512" etc. Both map onto the same HMAC hash.

Derivation:
    The password is copied into a PasswordBuffer, passed to PBKDF2HMAC and
    wiped as soon as derivation returns or raises. The output length is
    config.derived_key_length bits.

Salts:
    Generated with the secrets module (os.urandom under the hood), never
    with the random module.

Example Usage:
    >>> from securepass.config import HasherConfig
    >>> from securepass.kdf import generate_salt, derive_key
    >>> config = HasherConfig("PBKDF2WithHmacSHA256", 256, 64, 10000)
    >>> salt = generate_salt(config)
    >>> key = derive_key("my_password", salt, config)
    >>> len(key)
    40
"""

import logging
import secrets
from typing import List

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .config import HasherConfig
from .errors import InvalidParameterError, UnsupportedAlgorithmError
from .memory import PasswordBuffer, PasswordLike

logger = logging.getLogger(__name__)


# Algorithm identifier -> HMAC hash class
_HASHES = {
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}

_ALGORITHMS = {}
for _name, _hash in _HASHES.items():
    _ALGORITHMS[f"PBKDF2WithHmac{_name.upper()}"] = _hash
    _ALGORITHMS[f"pbkdf2-{_name}"] = _hash


def supported_algorithms() -> List[str]:
    """Return every accepted algorithm identifier."""
    return list(_ALGORITHMS)


def resolve_algorithm(algorithm: str) -> hashes.HashAlgorithm:
    """
    Map an algorithm identifier to a fresh cryptography hash instance.

    Raises:
        UnsupportedAlgorithmError: If the identifier is not recognised
    """
    try:
        hash_cls = _ALGORITHMS[algorithm]
    except (KeyError, TypeError):
        raise UnsupportedAlgorithmError(
            f"Unsupported algorithm: {algorithm!r}",
            details={"algorithm": algorithm, "supported": supported_algorithms()}
        ) from None
    return hash_cls()


def generate_salt(config: HasherConfig) -> bytes:
    """
    Generate a cryptographically secure random salt.

    Args:
        config: Supplies the salt length in bits

    Returns:
        config.salt_length // 8 random bytes
    """
    config.validate()
    logger.debug(f"Generating {config.salt_length}-bit salt")
    return secrets.token_bytes(config.salt_bytes)


def derive_key(password: PasswordLike, salt: bytes, config: HasherConfig) -> bytes:
    """
    Derive a key from a password and salt using PBKDF2-HMAC.

    Same password, salt and configuration always give the same bytes.

    Args:
        password: Password as text or bytes-like. Text is encoded as UTF-8.
        salt: Salt bytes
        config: Algorithm, iteration count and output length

    Returns:
        config.derived_key_length // 8 bytes of key material

    Raises:
        UnsupportedAlgorithmError: If the algorithm is unknown or the
            backend cannot run it
        InvalidParameterError: If the lengths or iteration count are invalid
    """
    config.validate()
    algorithm = resolve_algorithm(config.algorithm)

    with PasswordBuffer(password) as buffer:
        try:
            kdf = PBKDF2HMAC(
                algorithm=algorithm,
                length=config.derived_key_bytes,
                salt=bytes(salt),
                iterations=config.iterations,
            )
            derived = kdf.derive(buffer)
        except UnsupportedAlgorithm as e:
            raise UnsupportedAlgorithmError(
                f"Backend does not support {config.algorithm}: {e}",
                details={"algorithm": config.algorithm}
            ) from e
        except (ValueError, OverflowError) as e:
            raise InvalidParameterError(
                f"Invalid PBKDF2 parameters for {config.algorithm}: {e}",
                details={
                    "derived_key_length": config.derived_key_length,
                    "iterations": config.iterations,
                }
            ) from e

    logger.debug(
        f"Derived {config.derived_key_length}-bit key with {config.algorithm} "
        f"({config.iterations} iterations)"
    )
    return derived
