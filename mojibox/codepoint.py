"""
Character <-> hex codepoint conversion.
"""

from __future__ import annotations

from typing import Iterable

from mojibox.errors import InvalidCodepointError, InvalidHexError
from mojibox.types import is_hex_digits, is_scalar_value


def strip_hex_prefix(token: str) -> str:
    if token[:2] in ("0x", "0X"):
        return token[2:]
    return token


def parse_hex_token(token: str) -> int:
    """
    Parse a hex token with or without a leading ``0x``/``0X``.

    Raises:
        InvalidHexError: If the token (after the prefix) is empty or not hex
    """
    digits = strip_hex_prefix(token)
    if not is_hex_digits(digits):
        raise InvalidHexError(token)
    return int(digits, 16)


def format_codepoint(codepoint: int, lowercase: bool = False, no_prefix: bool = False) -> str:
    digits = f"{codepoint:x}" if lowercase else f"{codepoint:X}"
    return digits if no_prefix else f"0x{digits}"


def ord_characters(text: str, lowercase: bool = False, no_prefix: bool = False) -> list[str]:
    """
    List the codepoint of every character of ``text`` as a hex token.

    Args:
        text: Input text
        lowercase: Render hex digits in lowercase
        no_prefix: Omit the ``0x`` prefix

    Returns:
        One token per codepoint, e.g. ``["0x3042", "0x1F363"]``
    """
    return [format_codepoint(ord(c), lowercase, no_prefix) for c in text]


def chr_from_codepoints(tokens: Iterable[str]) -> str:
    """
    Build text from hex codepoint tokens.

    Stops at the first bad token; no partial result is returned.

    Raises:
        InvalidHexError: If a token is not hex
        InvalidCodepointError: If a value is above U+10FFFF or a surrogate
    """
    chars: list[str] = []
    for token in tokens:
        value = parse_hex_token(token)
        if not is_scalar_value(value):
            raise InvalidCodepointError(token, value)
        chars.append(chr(value))
    return "".join(chars)
