"""
Unit Tests for SecurePass Encoding Helpers
"""

import os

import pytest

from securepass.encoding import decode_base64, encode_base64
from securepass.errors import DecodingError


class TestBase64:
    """Test cases for base64 text encoding."""

    def test_known_value(self):
        """Test encoding against a known value."""
        assert encode_base64(b"\x00\x01\x02\x03\xff\xfe") == "AAECA//+"

    def test_round_trip(self):
        """Test decoding returns the original bytes."""
        data = os.urandom(72)

        assert decode_base64(encode_base64(data)) == data

    def test_no_line_breaks(self):
        """Test long inputs stay on one line."""
        encoded = encode_base64(os.urandom(512))

        assert "\n" not in encoded

    def test_accepts_ascii_bytes(self):
        """Test decoding from ASCII bytes."""
        assert decode_base64(b"AAECA//+") == b"\x00\x01\x02\x03\xff\xfe"

    @pytest.mark.parametrize("text", [
        "not-valid-base64!!",
        "AAECA//",
        "AAE=CA//",
        "AA EC",
        "ÄÖÜ=",
    ])
    def test_malformed(self, text):
        """Test malformed text raises DecodingError."""
        with pytest.raises(DecodingError) as exc_info:
            decode_base64(text)

        assert exc_info.value.code == 2005

    def test_wrong_type(self):
        """Test non-text input raises DecodingError."""
        with pytest.raises(DecodingError):
            decode_base64(None)
