from enum import Enum
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

root_dir: Path = Path(__file__).parents[1].resolve()


class LogLevel(str, Enum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(root_dir / "hwaddr.env"),
        env_file_encoding="utf-8",
        env_prefix="HWADDR_",
        case_sensitive=False,
        extra="forbid",
    )

    human_readable: bool = True

    log_level: LogLevel = LogLevel.info
    log_file: Path | None = None

    @field_validator("log_file")
    @classmethod
    def make_path_absolute(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        if not value.is_absolute():
            return (root_dir / value).resolve()
        return value


config = Config()
