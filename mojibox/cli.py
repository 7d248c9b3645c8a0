"""
CLI: iter, len, take, drop, dump, ord, chr, bin2hex, hex2bin, scrub, escape, unescape.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from mojibox import __version__
from mojibox.codepoint import chr_from_codepoints, ord_characters
from mojibox.config import MojiboxSettings, load_settings
from mojibox.dump import dump_graphemes
from mojibox.errors import MojiboxError
from mojibox.escape import escape_unicode, unescape_unicode
from mojibox.hex_codec import bin2hex, hex2bin
from mojibox.scrub import scrub_invalid_utf8
from mojibox.types import (
    DUMP_FORMATS,
    ESCAPE_FORMATS,
    HEX_FORMATS,
    INPUT_FORMATS,
    PROCESSING_MODES,
)
from mojibox.units import count_units, drop_units, iter_units, take_units

logger = logging.getLogger(__name__)


def _print_lines(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


def cmd_iter(args: argparse.Namespace) -> int:
    _print_lines(iter_units(args.input, args.mode, args.engine))
    return 0


def cmd_len(args: argparse.Namespace) -> int:
    print(count_units(args.input, args.mode, args.engine))
    return 0


def cmd_take(args: argparse.Namespace) -> int:
    _print_lines(take_units(args.input, args.mode, args.n, args.engine))
    return 0


def cmd_drop(args: argparse.Namespace) -> int:
    _print_lines(drop_units(args.input, args.mode, args.n, args.engine))
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    sys.stdout.write(dump_graphemes(args.input, args.format, args.engine))
    return 0


def cmd_ord(args: argparse.Namespace) -> int:
    print(" ".join(ord_characters(args.input, args.lower, args.no_0x)))
    return 0


def cmd_chr(args: argparse.Namespace) -> int:
    print(chr_from_codepoints(args.codepoints))
    return 0


def cmd_bin2hex(args: argparse.Namespace) -> int:
    print(bin2hex(args.input, args.lower, args.format))
    return 0


def cmd_hex2bin(args: argparse.Namespace) -> int:
    print(hex2bin(args.hex_input))
    return 0


def cmd_scrub(args: argparse.Namespace) -> int:
    print(scrub_invalid_utf8(args.input, args.input_format))
    return 0


def cmd_escape(args: argparse.Namespace) -> int:
    print(escape_unicode(args.input, args.format))
    return 0


def cmd_unescape(args: argparse.Namespace) -> int:
    print(unescape_unicode(args.input))
    return 0


def _configure_stdout() -> None:
    # Undecodable argv bytes arrive as lone surrogates; write them back as raw bytes
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def build_parser(settings: MojiboxSettings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mojibox",
        description="A CLI tool for flexible Unicode string manipulation and analysis",
    )
    p.add_argument("--version", action="version", version=f"mojibox {__version__}")
    p.add_argument("--log-level", default=settings.log_level,
                   choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
                   help="Logging level (default: $MOJIBOX_LOG_LEVEL or WARNING)")
    sub = p.add_subparsers(dest="command", required=True)

    def unit_parser(name: str, help: str) -> argparse.ArgumentParser:
        s = sub.add_parser(name, help=help)
        s.add_argument("-m", "--mode", choices=PROCESSING_MODES, default="grapheme",
                       help="Processing mode (default: grapheme)")
        s.add_argument("-e", "--engine", default=settings.segmenter,
                       help=f"Segmentation engine (default: {settings.segmenter})")
        return s

    # iter / len / take / drop
    s = unit_parser("iter", "Expand strings one unit at a time by specified mode")
    s.add_argument("input", help="Input string to process")
    s.set_defaults(func=cmd_iter)
    s = unit_parser("len", "Count string length by specified mode")
    s.add_argument("input", help="Input string to process")
    s.set_defaults(func=cmd_len)
    s = unit_parser("take", "Extract N units from the beginning")
    s.add_argument("n", type=_non_negative, help="Number of units to take")
    s.add_argument("input", help="Input string to process")
    s.set_defaults(func=cmd_take)
    s = unit_parser("drop", "Skip N units from the beginning and extract the rest")
    s.add_argument("n", type=_non_negative, help="Number of units to drop")
    s.add_argument("input", help="Input string to process")
    s.set_defaults(func=cmd_drop)
    # dump
    d = sub.add_parser("dump", help="Dump grapheme clusters and their codepoints")
    d.add_argument("-f", "--format", choices=DUMP_FORMATS, default="text")
    d.add_argument("-e", "--engine", default=settings.segmenter, help="Segmentation engine")
    d.add_argument("input", help="Input string to process")
    d.set_defaults(func=cmd_dump)
    # ord / chr
    o = sub.add_parser("ord", help="Convert characters to Unicode codepoints")
    o.add_argument("--lower", action="store_true", help="Use lowercase hex format")
    o.add_argument("--no-0x", dest="no_0x", action="store_true", help="Output without 0x prefix")
    o.add_argument("input", help="Input string to process")
    o.set_defaults(func=cmd_ord)
    c = sub.add_parser("chr", help="Convert Unicode codepoints to characters")
    c.add_argument("codepoints", nargs="*", help="Codepoints in hex (with or without 0x prefix)")
    c.set_defaults(func=cmd_chr)
    # bin2hex / hex2bin
    b = sub.add_parser("bin2hex", help="Convert string to hexadecimal representation")
    b.add_argument("--lower", action=argparse.BooleanOptionalAction, default=settings.hex_lowercase,
                   help="Use lowercase hex format")
    b.add_argument("-f", "--format", choices=HEX_FORMATS, default="default")
    b.add_argument("input", help="Input string to process")
    b.set_defaults(func=cmd_bin2hex)
    h = sub.add_parser("hex2bin", help="Convert hexadecimal representation to string")
    h.add_argument("hex_input", help="Hexadecimal input (default, spaced or \\x escaped)")
    h.set_defaults(func=cmd_hex2bin)
    # scrub
    r = sub.add_parser("scrub", help="Replace invalid UTF-8 sequences with U+FFFD")
    r.add_argument("--input-format", choices=INPUT_FORMATS, default="binary")
    r.add_argument("input", help="Input data to scrub")
    r.set_defaults(func=cmd_scrub)
    # escape / unescape
    e = sub.add_parser("escape", help="Convert string to Unicode escape notation")
    e.add_argument("-f", "--format", choices=ESCAPE_FORMATS, default="default")
    e.add_argument("input", help="Input string to process")
    e.set_defaults(func=cmd_escape)
    u = sub.add_parser("unescape", help="Convert Unicode escape notation to string")
    u.add_argument("input", help="Escaped input")
    u.set_defaults(func=cmd_unescape)
    return p


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Invalid MOJIBOX_* environment settings:\n{e}", file=sys.stderr)
        return 2

    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    _configure_stdout()
    logger.debug("Running %s", args.command)

    try:
        return args.func(args)
    except MojiboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
