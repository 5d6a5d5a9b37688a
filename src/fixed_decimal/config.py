import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixed_decimal.logging import logger

CONFIG_DIR = Path.home() / ".config" / "fixed_decimal"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class ParserSettings(BaseModel):
    # Literal fractional digits accepted before a string is rejected outright, even when the
    # parser is asked to truncate the excess beyond the type's precision
    max_fractional_digits: int = Field(default=77, ge=0)
    max_input_length: int = Field(default=256, gt=0)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FIXED_DECIMAL_",
        env_nested_delimiter="__",
    )

    parser: ParserSettings = ParserSettings()


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
    logger.info(f"Loaded configuration from {CONFIG_FILE}.")
else:
    settings = Settings()
