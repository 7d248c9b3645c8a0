"""
Text <-> backslash-escape notation.

Two notations are produced and understood:

- default: ``\\u{1F363}``, one brace token per codepoint
- json:    ``\\uD83C\\uDF63``, fixed-width UTF-16 code units

Decoding is lossy and total: malformed escapes become U+FFFD, token by
token, and the call always returns text.
"""

from __future__ import annotations

from dataclasses import dataclass

from mojibox.types import (
    HIGH_SURROGATE_START,
    LOW_SURROGATE_START,
    MAX_CODEPOINT,
    REPLACEMENT_CHARACTER,
    EscapeFormat,
    is_hex_digits,
    is_high_surrogate,
    is_low_surrogate,
    is_surrogate,
)

_BRACE_OPEN = "\\u{"
_UNIT_PREFIX = "\\u"
_UNIT_WIDTH = 4


def to_surrogate_pair(codepoint: int) -> tuple[int, int]:
    """Split a codepoint above U+FFFF into its UTF-16 high and low units."""
    adjusted = codepoint - 0x10000
    high = HIGH_SURROGATE_START + (adjusted >> 10)
    low = LOW_SURROGATE_START + (adjusted & 0x3FF)
    return high, low


def from_surrogate_pair(high: int, low: int) -> int:
    return 0x10000 + ((high - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)


def escape_unicode(text: str, format: EscapeFormat = "default") -> str:
    """
    Escape every codepoint of ``text``.

    Args:
        text: The text to escape
        format: "default" for ``\\u{HEX}`` tokens, "json" for ``\\uHHHH`` tokens

    Returns:
        The concatenated escape tokens
    """
    if format == "default":
        return "".join(f"\\u{{{ord(c):X}}}" for c in text)
    if format != "json":
        raise ValueError(f"Unknown escape format: {format}")

    parts: list[str] = []
    for c in text:
        cp = ord(c)
        if cp <= 0xFFFF:
            parts.append(f"\\u{cp:04X}")
        else:
            high, low = to_surrogate_pair(cp)
            parts.append(f"\\u{high:04X}\\u{low:04X}")
    return "".join(parts)


@dataclass(frozen=True)
class _Step:
    """Outcome of decoding one unit at the cursor."""

    consumed: int
    output: str


def _read_unit(text: str, pos: int) -> int | None:
    """Read a ``\\uHHHH`` code unit at ``pos``, or None if there isn't a complete one."""
    if not text.startswith(_UNIT_PREFIX, pos):
        return None
    digits = text[pos + 2 : pos + 2 + _UNIT_WIDTH]
    if len(digits) != _UNIT_WIDTH or not is_hex_digits(digits):
        return None
    return int(digits, 16)


def _brace_step(text: str, pos: int) -> _Step:
    close = text.find("}", pos + len(_BRACE_OPEN))
    if close == -1:
        # Unterminated: the remainder of the input collapses into one replacement
        return _Step(len(text) - pos, REPLACEMENT_CHARACTER)

    consumed = close + 1 - pos
    content = text[pos + len(_BRACE_OPEN) : close]
    if not is_hex_digits(content):
        return _Step(consumed, REPLACEMENT_CHARACTER)

    value = int(content, 16)
    if value > MAX_CODEPOINT or is_surrogate(value):
        return _Step(consumed, REPLACEMENT_CHARACTER)
    return _Step(consumed, chr(value))


def _unit_step(text: str, pos: int, unit: int) -> _Step:
    token_len = len(_UNIT_PREFIX) + _UNIT_WIDTH

    if is_high_surrogate(unit):
        low = _read_unit(text, pos + token_len)
        if low is None:
            return _Step(token_len, REPLACEMENT_CHARACTER)
        if is_low_surrogate(low):
            return _Step(token_len * 2, chr(from_surrogate_pair(unit, low)))
        return _Step(token_len * 2, REPLACEMENT_CHARACTER * 2)

    if is_low_surrogate(unit):
        return _Step(token_len, REPLACEMENT_CHARACTER)

    return _Step(token_len, chr(unit))


def _next_step(text: str, pos: int) -> _Step:
    if text.startswith(_BRACE_OPEN, pos):
        return _brace_step(text, pos)

    if text.startswith(_UNIT_PREFIX, pos):
        unit = _read_unit(text, pos)
        if unit is not None:
            return _unit_step(text, pos, unit)
        # Too few hex digits: skip the marker only
        return _Step(len(_UNIT_PREFIX), REPLACEMENT_CHARACTER)

    return _Step(1, text[pos])


def unescape_unicode(text: str) -> str:
    """
    Decode ``\\u{...}`` and ``\\uHHHH`` escapes, leaving other text as-is.

    Never raises. Every malformed escape is replaced with U+FFFD.
    """
    out: list[str] = []
    pos = 0
    while pos < len(text):
        step = _next_step(text, pos)
        out.append(step.output)
        pos += step.consumed
    return "".join(out)
