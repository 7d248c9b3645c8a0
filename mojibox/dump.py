"""
Per-cluster codepoint tables in text, JSON and JSON Lines form.
"""

from __future__ import annotations

import json

from mojibox.hex_codec import bin2hex, to_bytes
from mojibox.segmenter import (
    GraphemeSegmenter,
    NameLookup,
    UnicodeDataNameLookup,
    split_graphemes,
)
from mojibox.types import CodepointInfo, DumpFormat, GraphemeInfo

_default_names = UnicodeDataNameLookup()


def describe_codepoint(char: str, names: NameLookup | None = None) -> CodepointInfo:
    cp = ord(char)
    lookup = names or _default_names
    return CodepointInfo(
        codepoint=f"U+{cp:04X}",
        char=char,
        name=lookup.name_of(cp),
        utf8=bin2hex(char, format="spaced"),
    )


def build_dump(
    text: str,
    segmenter: GraphemeSegmenter | str | None = None,
    names: NameLookup | None = None,
) -> list[GraphemeInfo]:
    """
    Describe every grapheme cluster of ``text`` and the codepoints inside it.

    Args:
        text: Input text
        segmenter: Engine instance or registered name; None uses the default
        names: Character name lookup; None uses the Unicode database

    Returns:
        One GraphemeInfo per cluster, in order
    """
    result: list[GraphemeInfo] = []
    byte_offset = 0
    for index, grapheme in enumerate(split_graphemes(text, segmenter)):
        result.append(
            GraphemeInfo(
                index=index,
                grapheme=grapheme,
                byte_offset=byte_offset,
                utf8=bin2hex(grapheme, format="spaced"),
                codepoints=[describe_codepoint(c, names) for c in grapheme],
            )
        )
        byte_offset += len(to_bytes(grapheme))
    return result


def _render_text(graphemes: list[GraphemeInfo]) -> str:
    lines: list[str] = []
    for g in graphemes:
        lines.append(f"[{g.index}] {g.grapheme}  (byte {g.byte_offset}: {g.utf8})")
        for cp in g.codepoints:
            lines.append(f"    {cp.codepoint:<8} {cp.utf8:<12} {cp.name or '<unnamed>'}")
    return "".join(f"{line}\n" for line in lines)


def dump_graphemes(
    text: str,
    format: DumpFormat = "text",
    segmenter: GraphemeSegmenter | str | None = None,
    names: NameLookup | None = None,
) -> str:
    """
    Render the grapheme/codepoint table of ``text``.

    "text" is meant for reading, "json" is one pretty-printed array and
    "jsonl" is one object per cluster per line. Every non-empty rendering
    ends with a newline.
    """
    graphemes = build_dump(text, segmenter, names)

    if format == "text":
        return _render_text(graphemes)
    if format == "json":
        payload = [g.model_dump() for g in graphemes]
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    if format == "jsonl":
        return "".join(
            json.dumps(g.model_dump(), ensure_ascii=False) + "\n" for g in graphemes
        )
    raise ValueError(f"Unknown dump format: {format}")
