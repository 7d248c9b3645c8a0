"""
Exceptions raised by the fail-fast codecs.
"""

from __future__ import annotations


class MojiboxError(ValueError):
    """Base class for all mojibox conversion errors."""


class OddLengthError(MojiboxError):
    """Hex input has an odd number of digits once separators are removed."""

    def __init__(self, digits: str):
        self.digits = digits
        super().__init__(f"Hex string has odd length ({len(digits)} digits)")


class InvalidHexDigitError(MojiboxError):
    """A two-character hex pair contains a non-hex character."""

    def __init__(self, pair: str, position: int):
        self.pair = pair
        self.position = position
        super().__init__(f'Invalid hex digit in "{pair}" at position {position}')


class InvalidUtf8Error(MojiboxError):
    """Decoded bytes are not valid UTF-8."""

    def __init__(self, data: bytes, reason: str):
        self.data = data
        self.reason = reason
        super().__init__(f"Invalid UTF-8 sequence: {reason}")


class InvalidHexError(MojiboxError):
    """A codepoint token is not parseable as hex."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f'Invalid hex format: "{token}"')


class InvalidCodepointError(MojiboxError):
    """A codepoint is out of range or is a lone surrogate."""

    def __init__(self, token: str, value: int):
        self.token = token
        self.value = value
        super().__init__(f"Invalid Unicode codepoint: {token} (0x{value:X})")


class UnknownSegmenterError(MojiboxError):
    """No grapheme segmenter is registered under the requested name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        choices = ", ".join(available) if available else "none registered"
        super().__init__(f'Unknown segmentation engine "{name}" (available: {choices})')
