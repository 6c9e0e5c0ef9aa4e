"""
Text encoding for salts and derived keys.

Standard base64 alphabet with padding and no line breaks. Decoding is
strict: characters outside the alphabet or bad padding raise DecodingError
instead of being silently dropped.
"""

import base64
import binascii

from .errors import DecodingError


def encode_base64(data: bytes) -> str:
    """Encode bytes as a single-line base64 string."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64(text: str) -> bytes:
    """
    Decode a base64 string produced by encode_base64().

    Args:
        text: Base64 text (str, or ASCII bytes)

    Returns:
        The decoded bytes

    Raises:
        DecodingError: If the text is not valid base64
    """
    if not isinstance(text, (str, bytes)):
        raise DecodingError(f"Expected base64 text, got {type(text).__name__}")

    try:
        if isinstance(text, str):
            text = text.encode("ascii")
        return base64.b64decode(text, validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise DecodingError(f"Malformed base64 input: {e}") from e
