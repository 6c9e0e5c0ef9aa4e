#!/usr/bin/env python3
"""
SecurePass Password Hasher

Public entry point for creating and checking salted password hashes.

Flow:
    1. Configure once at startup (config.initialize) or build a HasherConfig.
    2. compute_hash(password) generates a fresh salt, derives the key and
       returns both as base64 text in a CredentialRecord.
    3. The caller stores the record.
    4. authenticate(password, salt_text, key_text) re-derives and compares
       in constant time.

Records can also be stored in a self-describing form that embeds the
algorithm, iteration count and lengths, so that a later change of
configuration can be detected with needs_rehash().

Example Usage:
    >>> from securepass import initialize, PasswordHasher
    >>> initialize("PBKDF2WithHmacSHA512", 512, 64, 50000)
    >>> hasher = PasswordHasher()
    >>> salt, key = hasher.compute_hash("Test_Password")
    >>> hasher.authenticate("Test_Password", salt, key)
    True
    >>> hasher.authenticate("test_password", salt, key)
    False
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from . import kdf
from .config import HasherConfig, get_config
from .encoding import decode_base64, encode_base64
from .errors import DecodingError, SecurePassError
from .memory import PasswordLike, constant_time_compare

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialRecord:
    """
    Salt and derived key as stored by the caller.

    Attributes:
        salt: Base64 encoded salt
        derived_key: Base64 encoded derived key

    The record unpacks as (salt, derived_key), so
    hasher.authenticate(password, *record) works directly.
    """

    salt: str
    derived_key: str

    SEPARATOR = "$"

    def __iter__(self) -> Iterator[str]:
        yield self.salt
        yield self.derived_key

    def as_tuple(self) -> Tuple[str, str]:
        return self.salt, self.derived_key

    def to_string(self, config: HasherConfig) -> str:
        """
        Render the record with its derivation parameters embedded.

        Format: $<algorithm>$<iterations>$<salt_length>$<key_length>$<salt>$<key>
        """
        sep = self.SEPARATOR
        return sep + sep.join([
            config.algorithm,
            str(config.iterations),
            str(config.salt_length),
            str(config.key_length),
            self.salt,
            self.derived_key,
        ])

    @classmethod
    def parse(cls, text: str) -> Tuple["CredentialRecord", HasherConfig]:
        """
        Parse the output of to_string().

        Returns:
            (record, config) where config holds the embedded parameters

        Raises:
            DecodingError: If the text does not have the expected shape or
                the embedded parameters cannot be used for derivation
        """
        if not isinstance(text, str):
            raise DecodingError(f"Expected encoded record text, got {type(text).__name__}")

        parts = text.split(cls.SEPARATOR)
        if len(parts) != 7 or parts[0] != "":
            raise DecodingError("Malformed encoded credential record")

        _, algorithm, iterations, salt_length, key_length, salt, derived_key = parts

        # int() would also take " 5", "+5" and "1_000"
        for field in (iterations, salt_length, key_length):
            if not (field.isascii() and field.isdigit()):
                raise DecodingError(f"Malformed parameter in credential record: {field!r}")

        config = HasherConfig(
            algorithm=algorithm,
            key_length=int(key_length),
            salt_length=int(salt_length),
            iterations=int(iterations),
        )
        try:
            config.validate()
        except SecurePassError as e:
            raise DecodingError(
                f"Unusable parameters in credential record: {e.message}",
                details=e.details
            ) from e

        # Fail here rather than at authentication time
        decode_base64(salt)
        decode_base64(derived_key)

        return cls(salt=salt, derived_key=derived_key), config


class PasswordHasher:
    """
    Salted password hashing with constant-time verification.

    Args:
        config: Explicit parameters. When omitted the process-wide
            configuration is used, and it must already be initialized.

    Raises:
        NotInitializedError: If no config is given and none was initialized

    Thread Safety:
        Instances hold no mutable state and can be shared between threads.
        Each derivation is CPU-bound; run them on separate workers when
        many are needed concurrently.
    """

    def __init__(self, config: Optional[HasherConfig] = None):
        self._config = config if config is not None else get_config()

    @property
    def config(self) -> HasherConfig:
        return self._config

    def generate_salt(self) -> bytes:
        """Return config.salt_length bits of secure random salt."""
        return kdf.generate_salt(self._config)

    def derive_key(self, password: PasswordLike, salt: bytes) -> bytes:
        """Derive the key for a password and salt with this hasher's parameters."""
        return kdf.derive_key(password, salt, self._config)

    def compute_hash(self, password: PasswordLike) -> CredentialRecord:
        """
        Hash a new password with a freshly generated salt.

        Returns:
            CredentialRecord with base64 salt and derived key
        """
        salt = self.generate_salt()
        derived = self.derive_key(password, salt)
        return CredentialRecord(salt=encode_base64(salt), derived_key=encode_base64(derived))

    def authenticate(self, password: PasswordLike, stored_salt: str, stored_key: str) -> bool:
        """
        Check a candidate password against a stored salt and key.

        Args:
            password: Candidate password
            stored_salt: Base64 salt from compute_hash()
            stored_key: Base64 derived key from compute_hash()

        Returns:
            True if the derived key matches the stored key

        Raises:
            DecodingError: If the stored salt or key is not valid base64.
                A full derivation is still performed first so that the
                failure takes as long as a wrong password.
        """
        try:
            salt = decode_base64(stored_salt)
            expected = decode_base64(stored_key)
        except DecodingError:
            logger.warning("Malformed credential record presented for authentication")
            self.derive_key(password, self.generate_salt())
            raise

        derived = self.derive_key(password, salt)
        return constant_time_compare(derived, expected)

    def hash_to_string(self, password: PasswordLike) -> str:
        """Hash a password and return the self-describing record string."""
        return self.compute_hash(password).to_string(self._config)

    def verify_string(self, password: PasswordLike, encoded: str) -> bool:
        """
        Authenticate against a self-describing record string.

        The parameters embedded in the string are used, not this hasher's.

        Raises:
            DecodingError: If the string is malformed
        """
        try:
            record, config = CredentialRecord.parse(encoded)
        except DecodingError:
            logger.warning("Malformed encoded credential record presented for authentication")
            self.derive_key(password, self.generate_salt())
            raise

        return PasswordHasher(config).authenticate(password, *record)

    def needs_rehash(self, stored: Union[str, HasherConfig]) -> bool:
        """
        Tell whether a stored record was made with different parameters.

        Args:
            stored: A self-describing record string or the HasherConfig it
                was produced with
        """
        if isinstance(stored, str):
            _, stored = CredentialRecord.parse(stored)
        return not self._config.same_parameters(stored)

    @staticmethod
    def encode(data: bytes) -> str:
        return encode_base64(data)

    @staticmethod
    def decode(text: str) -> bytes:
        return decode_base64(text)
