"""
SecurePass Error Types

All failures raised by the password hashing component derive from
SecurePassError. Each subclass carries a numeric code so that calling
applications can map errors onto their own reporting without string
matching.

Hierarchy:
    SecurePassError
    ├── AlreadyInitializedError   (2001)
    ├── NotInitializedError       (2002)
    ├── UnsupportedAlgorithmError (2003)
    ├── InvalidParameterError     (2004, also ValueError)
    └── DecodingError             (2005, also ValueError)
"""

from typing import Optional, Dict, Any


class SecurePassError(Exception):
    """
    Base exception for password hashing errors.

    Attributes:
        message: Human readable description
        code: Numeric error code
        details: Extra context (never contains secrets)
    """

    default_code: Optional[int] = None

    def __init__(self, message: str, code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        base = f"{type(self).__name__}: {self.message}"
        if self.code:
            base += f" (Code: {self.code})"
        return base


class AlreadyInitializedError(SecurePassError):
    """Raised when the process-wide configuration is initialized twice."""

    default_code = 2001


class NotInitializedError(SecurePassError):
    """Raised when a hasher is requested before any configuration exists."""

    default_code = 2002


class UnsupportedAlgorithmError(SecurePassError):
    """Raised when the algorithm identifier has no PBKDF2/HMAC mapping."""

    default_code = 2003


class InvalidParameterError(SecurePassError, ValueError):
    """Raised for key lengths, salt lengths or iteration counts the KDF cannot use."""

    default_code = 2004


class DecodingError(SecurePassError, ValueError):
    """Raised when stored salt or key text is not valid base64."""

    default_code = 2005
