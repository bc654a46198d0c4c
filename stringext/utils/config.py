import codecs
import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError


def canonical_encoding(name: str) -> str:
    """Return Python's canonical codec name, e.g. windows-1251 -> cp1251."""
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise ConfigurationError(f"Unknown encoding: {name}")


class LoggingConfig(BaseModel):
    """Logging configuration with validation."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log level: {v}")
        return level

    @field_validator('backup_count')
    @classmethod
    def validate_backup_count(cls, v: int) -> int:
        if v < 0:
            raise ConfigurationError("backup_count cannot be negative")
        return v


class CharsetConfig(BaseModel):
    """Encodings accepted when decoding raw input bytes."""

    default_encoding: str = Field(default="utf-8", validate_default=True)
    supported_encodings: list[str] = Field(default_factory=lambda: [
        "utf-8", "windows-1251", "koi8-r", "cp866", "iso-8859-5",
        "mac-cyrillic", "ascii"
    ], validate_default=True)

    @field_validator('default_encoding')
    @classmethod
    def validate_default_encoding(cls, v: str) -> str:
        return canonical_encoding(v)

    @field_validator('supported_encodings')
    @classmethod
    def validate_supported_encodings(cls, v: list[str]) -> list[str]:
        if not v:
            raise ConfigurationError("supported_encodings cannot be empty")
        return [canonical_encoding(encoding) for encoding in v]


class Config(BaseSettings):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    charset: CharsetConfig = Field(default_factory=CharsetConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STRINGEXT_",
        env_nested_delimiter="__",
    )

    @classmethod
    def from_toml(cls, path: str | Path) -> "Config":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)

        return cls(**data)


_config: Optional[Config] = None


def load_config(path: Optional[str | Path] = None) -> Config:
    global _config
    if _config is None:
        if path is None:
            path = os.environ.get("STRINGEXT_CONFIG", "stringext.toml")

        config_path = Path(path)
        if config_path.exists():
            _config = Config.from_toml(config_path)
        else:
            _config = Config()

    return _config


def get_config() -> Config:
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    global _config
    _config = None
