"""
mojibox: Unicode string manipulation and analysis.

Hex dumps, backslash escapes, codepoint listings and lossy UTF-8 recovery,
plus grapheme-aware iteration and dumps.
"""

from mojibox.types import (
    REPLACEMENT_CHARACTER,
    CodepointInfo,
    DumpFormat,
    EscapeFormat,
    GraphemeInfo,
    HexFormat,
    InputFormat,
    ProcessingMode,
)
from mojibox.errors import (
    InvalidCodepointError,
    InvalidHexDigitError,
    InvalidHexError,
    InvalidUtf8Error,
    MojiboxError,
    OddLengthError,
    UnknownSegmenterError,
)
from mojibox.hex_codec import bin2hex, hex2bin, hex_to_bytes
from mojibox.escape import escape_unicode, unescape_unicode
from mojibox.scrub import scrub_invalid_utf8
from mojibox.codepoint import chr_from_codepoints, ord_characters, parse_hex_token
from mojibox.segmenter import (
    GraphemeSegmenter,
    NameLookup,
    clear_segmenters,
    get_segmenter,
    get_segmenters,
    register_builtin_segmenters,
    register_segmenter,
    reset_segmenters,
    split_graphemes,
    unregister_segmenters,
)
from mojibox.units import count_units, drop_units, iter_units, take_units
from mojibox.dump import build_dump, dump_graphemes
from mojibox.config import MojiboxSettings, load_settings

__version__ = "0.1.0"

__all__ = [
    # Types
    "REPLACEMENT_CHARACTER",
    "CodepointInfo",
    "DumpFormat",
    "EscapeFormat",
    "GraphemeInfo",
    "HexFormat",
    "InputFormat",
    "ProcessingMode",
    # Errors
    "InvalidCodepointError",
    "InvalidHexDigitError",
    "InvalidHexError",
    "InvalidUtf8Error",
    "MojiboxError",
    "OddLengthError",
    "UnknownSegmenterError",
    # Codecs
    "bin2hex",
    "hex2bin",
    "hex_to_bytes",
    "escape_unicode",
    "unescape_unicode",
    "scrub_invalid_utf8",
    "chr_from_codepoints",
    "ord_characters",
    "parse_hex_token",
    # Segmentation
    "GraphemeSegmenter",
    "NameLookup",
    "clear_segmenters",
    "get_segmenter",
    "get_segmenters",
    "register_builtin_segmenters",
    "register_segmenter",
    "reset_segmenters",
    "split_graphemes",
    "unregister_segmenters",
    # Units and dumps
    "count_units",
    "drop_units",
    "iter_units",
    "take_units",
    "build_dump",
    "dump_graphemes",
    # Settings
    "MojiboxSettings",
    "load_settings",
]
