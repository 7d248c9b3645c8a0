# Test lossy UTF-8 decoding
import logging

import pytest
from mojibox.errors import InvalidHexDigitError, OddLengthError
from mojibox.scrub import scrub_bytes, scrub_invalid_utf8

FFFD = "\uFFFD"


class TestScrubBinary:
    def test_valid_bytes_pass_through(self):
        assert scrub_invalid_utf8("🍣".encode("utf-8")) == "🍣"

    def test_valid_text_passes_through(self):
        assert scrub_invalid_utf8("あいう🍣") == "あいう🍣"

    def test_bare_continuation_byte(self):
        assert scrub_invalid_utf8(b"a\x80b") == f"a{FFFD}b"

    def test_each_stray_continuation_byte_is_replaced(self):
        assert scrub_invalid_utf8(b"\x80\x80") == FFFD * 2

    def test_overlong_encoding(self):
        assert scrub_invalid_utf8(b"\xc0\x80") == FFFD * 2

    def test_truncated_sequence_is_one_subpart(self):
        assert scrub_invalid_utf8(b"\xf0\x9f\x8d") == FFFD
        assert scrub_invalid_utf8(b"\xf0\x9f\x8dA") == f"{FFFD}A"

    def test_encoded_surrogate(self):
        assert scrub_invalid_utf8(b"\xed\xa0\x80") == FFFD * 3

    def test_surrogateescape_text(self):
        raw = b"ok\xff".decode("utf-8", "surrogateescape")
        assert scrub_invalid_utf8(raw) == f"ok{FFFD}"

    def test_lone_surrogate_text(self):
        # U+D800 is encoded as ED A0 80, three invalid bytes
        assert scrub_invalid_utf8("a" + chr(0xD800) + "b") == f"a{FFFD * 3}b"

    def test_surrogateescape_next_to_other_lone_surrogate(self):
        raw = b"\xff".decode("utf-8", "surrogateescape") + chr(0xD800)
        assert scrub_invalid_utf8(raw) == FFFD * 4

    def test_empty(self):
        assert scrub_invalid_utf8(b"") == ""
        assert scrub_invalid_utf8("") == ""

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            scrub_invalid_utf8("41", "base64")


class TestScrubHex:
    def test_overlong_from_hex(self):
        assert scrub_invalid_utf8("C080", "hex") == FFFD * 2

    def test_valid_hex(self):
        assert scrub_invalid_utf8("F0 9F 8D A3", "hex") == "🍣"
        assert scrub_invalid_utf8(r"\xF0\x9F\x8D\xA3", "hex") == "🍣"

    def test_mixed_valid_and_invalid(self):
        assert scrub_invalid_utf8("41 FF 42", "hex") == f"A{FFFD}B"

    def test_empty(self):
        assert scrub_invalid_utf8("", "hex") == ""

    def test_odd_length_still_fails(self):
        with pytest.raises(OddLengthError):
            scrub_invalid_utf8("C08", "hex")

    def test_invalid_digit_still_fails(self):
        with pytest.raises(InvalidHexDigitError):
            scrub_invalid_utf8("C0GG", "hex")


class TestScrubProperties:
    def test_idempotent(self):
        samples = [b"\xc0\x80", b"a\x80b\xf0\x9f", "🍣".encode("utf-8"), b"\xed\xa0\x80\xff"]
        for raw in samples:
            once = scrub_invalid_utf8(raw)
            assert scrub_invalid_utf8(once) == once
            assert scrub_invalid_utf8(once.encode("utf-8")) == once

    def test_idempotent_from_hex(self):
        once = scrub_invalid_utf8("C08041", "hex")
        assert scrub_invalid_utf8(once, "binary") == once

    def test_logs_replacements(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mojibox.scrub"):
            scrub_bytes(b"\xc0\x80")
        assert "Replaced 2 invalid UTF-8 subsequences" in caplog.text

    def test_existing_replacement_characters_are_not_counted(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mojibox.scrub"):
            scrub_bytes("ok\uFFFD".encode("utf-8"))
        assert "Replaced" not in caplog.text
