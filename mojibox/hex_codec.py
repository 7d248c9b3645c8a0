"""
Byte sequence <-> hexadecimal text conversion.

Three surface formats are supported:

- default: contiguous digits, ``F09F8DA3``
- spaced:  space separated pairs, ``F0 9F 8D A3``
- escaped: ``\\x`` prefixed pairs, ``\\xF0\\x9F\\x8D\\xA3``
"""

from __future__ import annotations

import logging

from mojibox.errors import InvalidHexDigitError, InvalidUtf8Error, OddLengthError
from mojibox.types import HexFormat, is_hex_digits

logger = logging.getLogger(__name__)

_SEPARATORS: dict[str, str] = {
    "default": "",
    "spaced": " ",
}

# surrogateescape maps byte 0xNN (>= 0x80) to U+DCNN
_ESCAPED_BYTE_START = 0xDC80
_ESCAPED_BYTE_END = 0xDCFF


def detect_hex_format(text: str) -> HexFormat:
    """Guess the surface format of hex input from its shape."""
    if text.startswith("\\x"):
        return "escaped"
    if " " in text:
        return "spaced"
    return "default"


def _clean_hex(text: str) -> str:
    fmt = detect_hex_format(text)
    if fmt == "escaped":
        return text.replace("\\x", "")
    if fmt == "spaced":
        return text.replace(" ", "")
    return text


def to_bytes(data: bytes | str) -> bytes:
    """
    Get the raw bytes behind ``data``.

    Text is encoded as UTF-8. Lone surrogates produced by the
    ``surrogateescape`` handler (how Python carries undecodable argv and
    filesystem bytes in a str) are mapped back to their original byte values.
    Any other lone surrogate is encoded as-is, so it reaches a lossy decoder
    as an invalid sequence.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    try:
        return data.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        pass

    # Mixed input: pick the handler per character
    out = bytearray()
    for c in data:
        errors = "surrogateescape" if _is_escaped_byte(c) else "surrogatepass"
        out += c.encode("utf-8", errors=errors)
    return bytes(out)


def _is_escaped_byte(c: str) -> bool:
    return _ESCAPED_BYTE_START <= ord(c) <= _ESCAPED_BYTE_END


def bin2hex(data: bytes | str, lowercase: bool = False, format: HexFormat = "default") -> str:
    """
    Render bytes as hexadecimal text.

    Args:
        data: Bytes to render; text is encoded as UTF-8 first
        lowercase: Use lowercase hex digits
        format: One of "default", "spaced" or "escaped"

    Returns:
        The hex rendering, empty for empty input
    """
    data = to_bytes(data)
    pattern = "{:02x}" if lowercase else "{:02X}"
    pairs = [pattern.format(b) for b in data]

    if format == "escaped":
        return "".join(f"\\x{pair}" for pair in pairs)
    if format not in _SEPARATORS:
        raise ValueError(f"Unknown hex format: {format}")
    return _SEPARATORS[format].join(pairs)


def hex_to_bytes(text: str) -> bytes:
    """
    Decode hex text in any supported format into bytes.

    Raises:
        OddLengthError: If the cleaned digit string has odd length
        InvalidHexDigitError: If a pair contains a non-hex character
    """
    digits = _clean_hex(text)
    if len(digits) % 2 != 0:
        raise OddLengthError(digits)

    out = bytearray()
    for i in range(0, len(digits), 2):
        pair = digits[i : i + 2]
        # int(..., 16) would also accept "+1" or " 1"
        if not is_hex_digits(pair):
            raise InvalidHexDigitError(pair, i)
        out.append(int(pair, 16))
    return bytes(out)


def hex2bin(text: str) -> str:
    """
    Decode hex text into a string, requiring the bytes to be valid UTF-8.

    Use ``scrub_invalid_utf8(text, "hex")`` for a lossy decode instead.

    Raises:
        OddLengthError: If the cleaned digit string has odd length
        InvalidHexDigitError: If a pair contains a non-hex character
        InvalidUtf8Error: If the decoded bytes are not valid UTF-8
    """
    data = hex_to_bytes(text)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("hex2bin rejected %d bytes: %s", len(data), e.reason)
        raise InvalidUtf8Error(data, f"{e.reason} at byte {e.start}") from e
