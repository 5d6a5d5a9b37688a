from pathlib import Path

import pydantic
import pytest

from fixed_decimal.config import (
    ParserSettings,
    Settings,
    load_config_from_file,
    save_config_to_file,
)


def test_default_settings():
    settings = Settings()
    assert settings.parser.max_fractional_digits == 77
    assert settings.parser.max_input_length == 256


def test_save_and_load(tmp_path: Path):
    config_path = tmp_path / "nested" / "config.toml"
    settings = Settings(parser=ParserSettings(max_fractional_digits=20, max_input_length=64))

    save_config_to_file(settings, config_path)
    assert config_path.exists()
    assert "[parser]" in config_path.read_text()

    loaded = load_config_from_file(config_path)
    assert loaded == settings
    assert loaded.parser.max_fractional_digits == 20
    assert loaded.parser.max_input_length == 64


def test_partial_config_file(tmp_path: Path):
    config_path = tmp_path / "config.toml"
    config_path.write_text("[parser]\nmax_input_length = 32\n")

    loaded = load_config_from_file(config_path)
    assert loaded.parser.max_input_length == 32
    assert loaded.parser.max_fractional_digits == 77


def test_environment_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FIXED_DECIMAL_PARSER__MAX_INPUT_LENGTH", "10")
    assert Settings().parser.max_input_length == 10


def test_invalid_settings(tmp_path: Path):
    with pytest.raises(pydantic.ValidationError):
        ParserSettings(max_input_length=0)
    with pytest.raises(pydantic.ValidationError):
        ParserSettings(max_fractional_digits=-1)

    config_path = tmp_path / "config.toml"
    config_path.write_text("[parser]\nmax_input_length = -5\n")
    with pytest.raises(pydantic.ValidationError):
        load_config_from_file(config_path)
