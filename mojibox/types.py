"""
Core types for mojibox.
"""

from __future__ import annotations

import string
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

HexFormat: TypeAlias = Literal["default", "spaced", "escaped"]

EscapeFormat: TypeAlias = Literal["default", "json"]

InputFormat: TypeAlias = Literal["binary", "hex"]

ProcessingMode: TypeAlias = Literal["grapheme", "codepoint", "byte"]

DumpFormat: TypeAlias = Literal["text", "json", "jsonl"]

HEX_FORMATS: tuple[HexFormat, ...] = ("default", "spaced", "escaped")
ESCAPE_FORMATS: tuple[EscapeFormat, ...] = ("default", "json")
INPUT_FORMATS: tuple[InputFormat, ...] = ("binary", "hex")
PROCESSING_MODES: tuple[ProcessingMode, ...] = ("grapheme", "codepoint", "byte")
DUMP_FORMATS: tuple[DumpFormat, ...] = ("text", "json", "jsonl")

REPLACEMENT_CHARACTER = "\uFFFD"

MAX_CODEPOINT = 0x10FFFF

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

_HEX_DIGITS = frozenset(string.hexdigits)


def is_hex_digits(s: str) -> bool:
    """Check that ``s`` is non-empty and made only of ASCII hex digits."""
    return bool(s) and all(c in _HEX_DIGITS for c in s)


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def is_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= LOW_SURROGATE_END


def is_scalar_value(codepoint: int) -> bool:
    """Check if a codepoint can stand alone as a character."""
    return 0 <= codepoint <= MAX_CODEPOINT and not is_surrogate(codepoint)


class CodepointInfo(BaseModel):
    """One codepoint inside a dumped grapheme cluster."""

    model_config = ConfigDict(extra="forbid")

    codepoint: str  # e.g. "U+1F363"
    char: str
    name: str | None = None
    utf8: str  # spaced uppercase hex, e.g. "F0 9F 8D A3"


class GraphemeInfo(BaseModel):
    """A grapheme cluster and the codepoints it is made of."""

    model_config = ConfigDict(extra="forbid")

    index: int
    grapheme: str
    byte_offset: int
    utf8: str
    codepoints: list[CodepointInfo] = Field(default_factory=list)
