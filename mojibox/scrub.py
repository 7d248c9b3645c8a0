"""
Lossy UTF-8 decoding.
"""

from __future__ import annotations

import logging

from mojibox.hex_codec import hex_to_bytes, to_bytes
from mojibox.types import REPLACEMENT_CHARACTER, InputFormat

logger = logging.getLogger(__name__)


def scrub_bytes(data: bytes) -> str:
    """
    Decode ``data`` as UTF-8, replacing each maximal invalid subpart with U+FFFD.

    The codec's "replace" handler follows the Unicode recommended practice
    for U+FFFD substitution, so e.g. ``C0 80`` gives two replacements and a
    truncated 4-byte sequence ``F0 9F 8D`` gives one.
    """
    text = data.decode("utf-8", errors="replace")
    if logger.isEnabledFor(logging.DEBUG):
        replaced = text.count(REPLACEMENT_CHARACTER) - data.count(b"\xef\xbf\xbd")
        if replaced:
            logger.debug("Replaced %d invalid UTF-8 subsequences in %d bytes", replaced, len(data))
    return text


def scrub_invalid_utf8(data: bytes | str, input_format: InputFormat = "binary") -> str:
    """
    Replace invalid UTF-8 sequences with the replacement character (U+FFFD).

    Args:
        data: Raw bytes, or hex text when ``input_format`` is "hex"
        input_format: "binary" or "hex"

    Returns:
        Valid text; malformed UTF-8 never raises

    Raises:
        OddLengthError: Hex input with an odd number of digits
        InvalidHexDigitError: Hex input with a non-hex pair
    """
    if input_format == "hex":
        if isinstance(data, (bytes, bytearray, memoryview)):
            data = bytes(data).decode("ascii", errors="replace")
        raw = hex_to_bytes(data)
    elif input_format == "binary":
        raw = to_bytes(data)
    else:
        raise ValueError(f"Unknown input format: {input_format}")

    if not raw:
        return ""
    return scrub_bytes(raw)
