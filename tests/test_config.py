"""Tests for the decoder configuration."""

import dataclasses

import pytest

from gpsinfo import DEFAULT_CONFIG, AddressIdentifier, DecoderConfig


class TestDecoderConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.enabled_kinds == frozenset(AddressIdentifier)
        assert DEFAULT_CONFIG.checksum_control is False
        assert DEFAULT_CONFIG.match_by_sum is False

    def test_enabled_kinds_are_frozen(self):
        config = DecoderConfig(enabled_kinds={AddressIdentifier.RMC})
        assert isinstance(config.enabled_kinds, frozenset)
        assert config.is_enabled(AddressIdentifier.RMC)
        assert not config.is_enabled(AddressIdentifier.GGA)

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.checksum_control = True


class TestFromEnv:
    def test_empty_environment_gives_defaults(self):
        assert DecoderConfig.from_env({}) == DecoderConfig()

    def test_sentence_list(self):
        config = DecoderConfig.from_env({"GPSINFO_SENTENCES": "RMC, gpgga,"})
        assert config.enabled_kinds == {AddressIdentifier.RMC, AddressIdentifier.GGA}

    def test_unknown_sentence_rejected(self):
        with pytest.raises(ValueError, match="GPSINFO_SENTENCES"):
            DecoderConfig.from_env({"GPSINFO_SENTENCES": "RMC,ZDA"})

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_checksum_flag_on(self, value):
        config = DecoderConfig.from_env({"GPSINFO_CHECKSUM_CONTROL": value})
        assert config.checksum_control is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off", ""])
    def test_checksum_flag_off(self, value):
        config = DecoderConfig.from_env({"GPSINFO_CHECKSUM_CONTROL": value})
        assert config.checksum_control is False

    def test_bad_flag_rejected(self):
        with pytest.raises(ValueError, match="GPSINFO_MATCH_BY_SUM"):
            DecoderConfig.from_env({"GPSINFO_MATCH_BY_SUM": "maybe"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GPSINFO_MATCH_BY_SUM", "1")
        monkeypatch.delenv("GPSINFO_SENTENCES", raising=False)
        monkeypatch.delenv("GPSINFO_CHECKSUM_CONTROL", raising=False)
        assert DecoderConfig.from_env().match_by_sum is True
