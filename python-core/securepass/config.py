"""
SecurePass Configuration

Holds the parameters every hasher derives with: the PBKDF2/HMAC algorithm
identifier, the key and salt lengths in bits, and the iteration count.

Two ways to supply them:

1. Build a HasherConfig and hand it to PasswordHasher directly.
2. Call initialize() once at startup; hashers constructed without an
   explicit config then use the process-wide value.

The process-wide slot can only be filled once. A second initialize()
raises AlreadyInitializedError and the first values stay in force.

Lengths are expressed in bits. The derived key length is the requested
key length plus the salt length; stored records produced by earlier
deployments depend on that sum, so it is kept as is.

Example:
    >>> from securepass import config
    >>> config.initialize("PBKDF2WithHmacSHA512", 512, 64, 50000)
    >>> config.get_config().derived_key_length
    576
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import AlreadyInitializedError, InvalidParameterError, NotInitializedError

logger = logging.getLogger(__name__)


def _check_positive_int(name: str, value) -> None:
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(value).__name__}",
            details={"parameter": name}
        )
    if value <= 0:
        raise InvalidParameterError(
            f"{name} must be positive, got {value}",
            details={"parameter": name, "value": value}
        )


@dataclass(frozen=True)
class HasherConfig:
    """
    Immutable hashing parameters.

    Attributes:
        algorithm: Algorithm identifier, e.g. "PBKDF2WithHmacSHA512"
        key_length: Requested key length in bits (salt contribution excluded)
        salt_length: Salt length in bits
        iterations: PBKDF2 iteration count (work factor)
    """

    DEFAULT_ALGORITHM = "PBKDF2WithHmacSHA512"
    DEFAULT_KEY_LENGTH = 512
    DEFAULT_SALT_LENGTH = 64
    DEFAULT_ITERATIONS = 50000

    # OpenSSL takes the iteration count as a signed C int
    MAX_ITERATIONS = 2**31 - 1

    algorithm: str = DEFAULT_ALGORITHM
    key_length: int = DEFAULT_KEY_LENGTH
    salt_length: int = DEFAULT_SALT_LENGTH
    iterations: int = DEFAULT_ITERATIONS

    @property
    def derived_key_length(self) -> int:
        """Length of the derived key in bits (key length + salt length)."""
        return self.key_length + self.salt_length

    @property
    def salt_bytes(self) -> int:
        return self.salt_length // 8

    @property
    def derived_key_bytes(self) -> int:
        return self.derived_key_length // 8

    def validate(self) -> None:
        """
        Check that the KDF can run with these parameters.

        Raises:
            UnsupportedAlgorithmError: If the algorithm identifier is unknown
            InvalidParameterError: If a length or the iteration count is
                not a positive integer, or a length is not a whole number
                of bytes, or the iteration count exceeds MAX_ITERATIONS
        """
        from .kdf import resolve_algorithm

        resolve_algorithm(self.algorithm)

        _check_positive_int("key_length", self.key_length)
        _check_positive_int("salt_length", self.salt_length)
        _check_positive_int("iterations", self.iterations)

        if self.iterations > self.MAX_ITERATIONS:
            raise InvalidParameterError(
                f"iterations must be at most {self.MAX_ITERATIONS}, got {self.iterations}",
                details={"parameter": "iterations", "value": self.iterations}
            )

        for name, bits in (("key_length", self.key_length), ("salt_length", self.salt_length)):
            if bits % 8:
                raise InvalidParameterError(
                    f"{name} must be a multiple of 8 bits, got {bits}",
                    details={"parameter": name, "value": bits}
                )

    def same_parameters(self, other: "HasherConfig") -> bool:
        """
        Tell whether two configurations derive identical keys.

        Algorithm aliases ("pbkdf2-sha512", "PBKDF2WithHmacSHA512") count as
        the same algorithm.

        Raises:
            UnsupportedAlgorithmError: If either algorithm is unknown
        """
        from .kdf import resolve_algorithm

        return (
            resolve_algorithm(self.algorithm).name == resolve_algorithm(other.algorithm).name
            and self.key_length == other.key_length
            and self.salt_length == other.salt_length
            and self.iterations == other.iterations
        )


class ConfigurationHolder:
    """
    One-time slot for a HasherConfig.

    initialize() is guarded by a lock so that of several concurrent first
    calls exactly one succeeds; the rest raise AlreadyInitializedError.
    Reads after initialization take no lock, the stored value never changes.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._config: Optional[HasherConfig] = None

    def initialize(self, algorithm: str, key_length: int, salt_length: int, iterations: int) -> HasherConfig:
        """
        Store the configuration. Only the first call succeeds.

        Args:
            algorithm: Algorithm identifier string
            key_length: Key length in bits, excluding the salt contribution
            salt_length: Salt length in bits
            iterations: PBKDF2 iteration count

        Returns:
            The stored HasherConfig

        Raises:
            AlreadyInitializedError: If a configuration is already stored
        """
        with self._lock:
            if self._config is not None:
                logger.warning("Rejected repeated configuration initialization")
                raise AlreadyInitializedError(
                    "Configuration can only be initialized once",
                    details={"algorithm": self._config.algorithm}
                )
            self._config = HasherConfig(
                algorithm=algorithm,
                key_length=key_length,
                salt_length=salt_length,
                iterations=iterations,
            )
            config = self._config

        logger.info(
            f"SecurePass initialized: algorithm={config.algorithm} "
            f"derived_key_length={config.derived_key_length} "
            f"salt_length={config.salt_length} iterations={config.iterations}"
        )
        return config

    def get(self) -> HasherConfig:
        """
        Return the stored configuration.

        Raises:
            NotInitializedError: If initialize() has not been called
        """
        config = self._config
        if config is None:
            raise NotInitializedError("SecurePass must be initialized before use")
        return config

    @property
    def is_initialized(self) -> bool:
        return self._config is not None


_holder = ConfigurationHolder()


def initialize(algorithm: str, key_length: int, salt_length: int, iterations: int) -> HasherConfig:
    """Initialize the process-wide configuration. See ConfigurationHolder.initialize."""
    return _holder.initialize(algorithm, key_length, salt_length, iterations)


def get_config() -> HasherConfig:
    """Return the process-wide configuration or raise NotInitializedError."""
    return _holder.get()


def is_initialized() -> bool:
    return _holder.is_initialized
