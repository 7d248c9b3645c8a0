"""
Iterate, count, take and drop text by grapheme, codepoint or byte.
"""

from __future__ import annotations

from mojibox.hex_codec import to_bytes
from mojibox.segmenter import GraphemeSegmenter, split_graphemes
from mojibox.types import ProcessingMode


def iter_codepoint(text: str) -> list[str]:
    return list(text)


def iter_byte(text: str) -> list[str]:
    """One entry per UTF-8 byte, each shown as the Latin-1 character of that value."""
    return [chr(b) for b in to_bytes(text)]


def iter_units(
    text: str,
    mode: ProcessingMode = "grapheme",
    segmenter: GraphemeSegmenter | str | None = None,
) -> list[str]:
    """
    Split ``text`` into units.

    Args:
        text: Input text
        mode: "grapheme", "codepoint" or "byte"
        segmenter: Engine instance or registered name used for "grapheme"

    Returns:
        The units in order
    """
    if mode == "grapheme":
        return split_graphemes(text, segmenter)
    if mode == "codepoint":
        return iter_codepoint(text)
    if mode == "byte":
        return iter_byte(text)
    raise ValueError(f"Unknown processing mode: {mode}")


def count_units(
    text: str,
    mode: ProcessingMode = "grapheme",
    segmenter: GraphemeSegmenter | str | None = None,
) -> int:
    if mode == "codepoint":
        return len(text)
    if mode == "byte":
        return len(to_bytes(text))
    return len(iter_units(text, mode, segmenter))


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"Unit count must be non-negative, got {n}")


def take_units(
    text: str,
    mode: ProcessingMode,
    n: int,
    segmenter: GraphemeSegmenter | str | None = None,
) -> list[str]:
    """First ``n`` units; all of them if there are fewer."""
    _check_count(n)
    return iter_units(text, mode, segmenter)[:n]


def drop_units(
    text: str,
    mode: ProcessingMode,
    n: int,
    segmenter: GraphemeSegmenter | str | None = None,
) -> list[str]:
    """Units after the first ``n``; none if there are fewer."""
    _check_count(n)
    return iter_units(text, mode, segmenter)[n:]
