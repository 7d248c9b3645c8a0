# Test character <-> codepoint conversion
import pytest
from mojibox.codepoint import chr_from_codepoints, ord_characters, parse_hex_token
from mojibox.errors import InvalidCodepointError, InvalidHexError


class TestOrd:
    def test_default(self):
        assert ord_characters("Aあ🍣") == ["0x41", "0x3042", "0x1F363"]

    def test_lowercase(self):
        assert ord_characters("🍣", lowercase=True) == ["0x1f363"]

    def test_no_prefix(self):
        assert ord_characters("🍣", no_prefix=True) == ["1F363"]
        assert ord_characters("🍣", lowercase=True, no_prefix=True) == ["1f363"]

    def test_empty(self):
        assert ord_characters("") == []

    def test_combining_sequence_is_split(self):
        assert ord_characters("\u304B\u3099") == ["0x304B", "0x3099"]


class TestChr:
    def test_with_and_without_prefix(self):
        assert chr_from_codepoints(["0x41", "3042", "0X1F363"]) == "Aあ🍣"

    def test_case_insensitive(self):
        assert chr_from_codepoints(["0x1f363", "1F363"]) == "🍣🍣"

    def test_empty(self):
        assert chr_from_codepoints([]) == ""

    def test_out_of_range(self):
        with pytest.raises(InvalidCodepointError) as exc_info:
            chr_from_codepoints(["0x110000"])
        assert exc_info.value.value == 0x110000

    def test_surrogate_rejected(self):
        with pytest.raises(InvalidCodepointError):
            chr_from_codepoints(["D800"])

    def test_invalid_hex(self):
        with pytest.raises(InvalidHexError) as exc_info:
            chr_from_codepoints(["0x41", "zz"])
        assert exc_info.value.token == "zz"

    def test_prefix_only(self):
        with pytest.raises(InvalidHexError):
            chr_from_codepoints(["0x"])

    def test_fails_fast(self):
        with pytest.raises(InvalidHexError):
            chr_from_codepoints(["0x41", "nope", "0x110000"])

    def test_parse_hex_token(self):
        assert parse_hex_token("0xff") == 255
        assert parse_hex_token("FF") == 255
        with pytest.raises(InvalidHexError):
            parse_hex_token("-1")


class TestRoundTrip:
    def test_ord_then_chr(self):
        for text in ["hello", "あいうえお", "👨‍💻👩‍🍳", "\U0010FFFF"]:
            for lower in (False, True):
                for no_prefix in (False, True):
                    assert chr_from_codepoints(ord_characters(text, lower, no_prefix)) == text
