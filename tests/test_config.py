# Test environment settings
import pytest
from pydantic import ValidationError
from mojibox.config import MojiboxSettings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings == MojiboxSettings()
        assert settings.log_level == "WARNING"
        assert settings.segmenter == "regex"
        assert settings.hex_lowercase is False

    def test_reads_prefixed_variables(self):
        settings = load_settings({
            "MOJIBOX_LOG_LEVEL": "debug",
            "MOJIBOX_SEGMENTER": "custom",
            "MOJIBOX_HEX_LOWERCASE": "yes",
        })
        assert settings.log_level == "DEBUG"
        assert settings.segmenter == "custom"
        assert settings.hex_lowercase is True

    def test_falsy_flag(self):
        assert load_settings({"MOJIBOX_HEX_LOWERCASE": "0"}).hex_lowercase is False
        assert load_settings({"MOJIBOX_HEX_LOWERCASE": "off"}).hex_lowercase is False

    def test_flag_is_case_insensitive(self):
        assert load_settings({"MOJIBOX_HEX_LOWERCASE": "TRUE"}).hex_lowercase is True

    def test_invalid_flag(self):
        with pytest.raises(ValidationError):
            load_settings({"MOJIBOX_HEX_LOWERCASE": "maybe"})

    def test_empty_values_are_ignored(self):
        assert load_settings({"MOJIBOX_SEGMENTER": ""}).segmenter == "regex"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("MOJIBOX_LOG_LEVEL", "error")
        assert load_settings().log_level == "ERROR"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            load_settings({"MOJIBOX_LOG_LEVEL": "loud"})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            MojiboxSettings(colour=True)
