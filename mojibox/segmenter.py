"""
Grapheme segmentation engine registry and character name lookup.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from typing import Protocol

import regex

from mojibox.errors import UnknownSegmenterError

logger = logging.getLogger(__name__)

DEFAULT_SEGMENTER = "regex"


class GraphemeSegmenter(Protocol):
    """Protocol for grapheme cluster segmentation engines."""

    def segment(self, text: str) -> list[int]:
        """
        Return ordered cluster boundary offsets, in codepoint indices.

        The first offset is 0 and the last is ``len(text)``; empty text
        yields ``[0]``.
        """
        ...


class NameLookup(Protocol):
    """Protocol for read-only codepoint -> character name dictionaries."""

    def name_of(self, codepoint: int) -> str | None:
        ...


class RegexGraphemeSegmenter:
    """Extended grapheme clusters via the ``regex`` module's ``\\X``."""

    _pattern = regex.compile(r"\X")

    def segment(self, text: str) -> list[int]:
        boundaries = [0]
        boundaries.extend(m.end() for m in self._pattern.finditer(text))
        return boundaries


class UnicodeDataNameLookup:
    """Character names from the standard library Unicode database."""

    def name_of(self, codepoint: int) -> str | None:
        return unicodedata.name(chr(codepoint), None)


@dataclass
class _RegisteredSegmenter:
    """Internal registered segmenter with optional source ID."""

    segmenter: GraphemeSegmenter
    source_id: str | None = None


_segmenter_registry: dict[str, _RegisteredSegmenter] = {}

_default_segmenter_name: str = DEFAULT_SEGMENTER


def register_segmenter(
    name: str,
    segmenter: GraphemeSegmenter,
    source_id: str | None = None,
) -> None:
    """Register a segmentation engine under ``name``, replacing any previous one."""
    _segmenter_registry[name] = _RegisteredSegmenter(segmenter=segmenter, source_id=source_id)
    logger.debug("Registered segmenter %r (source=%s)", name, source_id)


def set_default_segmenter(name: str) -> None:
    """Choose the engine ``get_segmenter()`` resolves when called without a name."""
    global _default_segmenter_name
    _default_segmenter_name = name


def get_segmenter(name: str | None = None) -> GraphemeSegmenter:
    """
    Get a segmentation engine by name.

    Args:
        name: Engine name; None resolves the current default engine

    Raises:
        UnknownSegmenterError: If no engine is registered under the name
    """
    key = name or _default_segmenter_name
    entry = _segmenter_registry.get(key)
    if entry is None:
        raise UnknownSegmenterError(key, sorted(_segmenter_registry))
    return entry.segmenter


def get_segmenters() -> list[str]:
    """Get the names of all registered engines."""
    return list(_segmenter_registry.keys())


def unregister_segmenters(source_id: str) -> None:
    """Unregister all engines with a given source ID."""
    to_remove = [
        name for name, entry in _segmenter_registry.items() if entry.source_id == source_id
    ]
    for name in to_remove:
        del _segmenter_registry[name]


def clear_segmenters() -> None:
    """Clear all registered engines."""
    _segmenter_registry.clear()


def register_builtin_segmenters() -> None:
    """Register the engines shipped with mojibox."""
    register_segmenter(DEFAULT_SEGMENTER, RegexGraphemeSegmenter(), source_id="builtin")


def reset_segmenters() -> None:
    """Clear and re-register all built-in engines, restoring the default."""
    clear_segmenters()
    register_builtin_segmenters()
    set_default_segmenter(DEFAULT_SEGMENTER)


def resolve_segmenter(segmenter: GraphemeSegmenter | str | None) -> GraphemeSegmenter:
    """Accept an engine instance, a registered name, or None for the default."""
    if segmenter is None or isinstance(segmenter, str):
        return get_segmenter(segmenter)
    return segmenter


def split_graphemes(text: str, segmenter: GraphemeSegmenter | str | None = None) -> list[str]:
    """Split ``text`` into grapheme clusters using the given (or default) engine."""
    boundaries = resolve_segmenter(segmenter).segment(text)
    return [text[start:end] for start, end in zip(boundaries, boundaries[1:])]


# Auto-register on import
register_builtin_segmenters()
