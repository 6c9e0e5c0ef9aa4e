#!/usr/bin/env python3
"""
SecurePass Memory Utilities

Helpers for handling password material while it is being hashed, and the
constant-time comparison used when checking a derived key.

1. Buffer Zeroization:
   Python str and bytes objects are immutable and cannot be cleared. The
   password is therefore copied into a bytearray owned by PasswordBuffer,
   handed to the KDF, and overwritten when the with-block exits, whether
   the derivation succeeded, raised, or was interrupted.

2. Constant-Time Comparison:
   The == operator on bytes stops at the first differing byte. An attacker
   able to time comparisons can use that to recover a stored key one byte
   at a time. constant_time_compare() always walks the full window and
   folds a length mismatch into the same accumulator as byte differences.
"""

from typing import Union

PasswordLike = Union[str, bytes, bytearray, memoryview]


def wipe(data: bytearray) -> None:
    """
    Overwrite a mutable buffer in place.

    Two passes: 0xFF then 0x00, so the final state is all zeros.

    Args:
        data: The bytearray to clear. Immutable types are rejected since
            they cannot be overwritten.

    Raises:
        TypeError: If data is not a bytearray

    Example:
        >>> buffer = bytearray(b"secret")
        >>> wipe(buffer)
        >>> buffer
        bytearray(b'\\x00\\x00\\x00\\x00\\x00\\x00')
    """
    if not isinstance(data, bytearray):
        raise TypeError(f"Only bytearray buffers can be wiped, got {type(data).__name__}")

    for i in range(len(data)):
        data[i] = 0xFF
    for i in range(len(data)):
        data[i] = 0


class PasswordBuffer:
    """
    Context manager holding a private, wipeable copy of a password.

    Text passwords are encoded as UTF-8. The copy is zeroed on __exit__
    regardless of how the block ends. The caller's own object is never
    modified.

    Usage:
        >>> with PasswordBuffer("hunter2") as buf:
        ...     key = kdf.derive(buf)
        >>> # buf is now all zeros
    """

    def __init__(self, password: PasswordLike):
        if isinstance(password, str):
            self._buffer = bytearray(password.encode("utf-8"))
        elif isinstance(password, (bytes, bytearray, memoryview)):
            self._buffer = bytearray(password)
        else:
            raise TypeError(
                f"Password must be str or bytes-like, got {type(password).__name__}"
            )

    def __enter__(self) -> bytearray:
        return self._buffer

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.wipe()
        return False

    def __len__(self) -> int:
        return len(self._buffer)

    def wipe(self) -> None:
        wipe(self._buffer)

    @property
    def is_wiped(self) -> bool:
        return not any(self._buffer)


def constant_time_compare(a, b) -> bool:
    """
    Compare two byte sequences without an early exit.

    The loop covers max(len(a), len(b)) positions. Past the end of the
    shorter input a zero byte stands in, and the accumulator starts as
    len(a) ^ len(b), so inputs of different length can never compare
    equal yet still cost a full pass.

    Args:
        a: First byte sequence (anything indexable yielding ints 0-255)
        b: Second byte sequence

    Returns:
        True if both sequences have the same length and contents

    Example:
        >>> constant_time_compare(b"abc", b"abc")
        True
        >>> constant_time_compare(b"abc", b"abd")
        False
    """
    len_a = len(a)
    len_b = len(b)
    result = len_a ^ len_b

    for i in range(max(len_a, len_b)):
        x = a[i] if i < len_a else 0
        y = b[i] if i < len_b else 0
        result |= x ^ y

    return result == 0
