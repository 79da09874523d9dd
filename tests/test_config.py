"""Tests for TOML configuration loading."""

import pytest

from fieldrs.algebra import BinaryField, PrimeField
from fieldrs.cli.config import AppConfig, load_config, save_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.toml")
        assert config == AppConfig()
        assert config.field_kind == "prime"
        assert config.code_ecc_len == 16

    def test_sections_map_to_fields(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[field]\nkind = "binary"\nmodulus = 0x11D\n'
            "[code]\ngenerator = 2\necc_len = 8\n"
            "[logging]\nlevel = \"DEBUG\"\n"
        )
        config = load_config(path)
        assert config.field_kind == "binary"
        assert config.field_modulus == 0x11D
        assert config.code_generator == 2
        assert config.code_ecc_len == 8
        assert config.logging_level == "DEBUG"
        # untouched sections keep their defaults
        assert config.demo_probability == 0.3

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[extra]\nstuff = 1\n")
        assert load_config(path) == AppConfig()

    def test_save_load_roundtrip(self, tmp_path):
        path = tmp_path / "sub" / "config.toml"
        config = AppConfig(field_kind="binary", field_modulus=0x11D,
                           code_generator=2, code_ecc_len=10,
                           code_errors_to_correct=3, demo_probability=0.5,
                           demo_seed=42, logging_level="WARNING")
        save_config(config, path)
        assert load_config(path) == config

    def test_save_omits_unset_optionals(self, tmp_path):
        path = tmp_path / "config.toml"
        save_config(AppConfig(), path)
        text = path.read_text()
        assert "errors_to_correct" not in text
        assert "seed" not in text
        assert load_config(path) == AppConfig()


class TestAppConfig:
    def test_to_field(self):
        assert isinstance(AppConfig().to_field(), PrimeField)
        field = AppConfig(field_kind="binary", field_modulus=0x11D).to_field()
        assert isinstance(field, BinaryField)
        assert field.size == 256

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown field kind"):
            AppConfig(field_kind="complex").to_field()

    def test_to_codec(self):
        codec = AppConfig(code_ecc_len=6).to_codec(10)
        assert codec.message_len == 10
        assert codec.ecc_len == 6
        assert codec.codeword_len == 16
