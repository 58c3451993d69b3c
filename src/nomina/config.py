import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = Field(default="dev", description="Deployment environment")
    log_level: str = "INFO"
    currency_code: str = Field(default="MXN", description="ISO 4217 code used when formatting amounts")
    locale: str = Field(default="es-MX", description="Locale used when formatting amounts")
    timezone: str = Field(default="America/Monterrey", description="Informational only")

    model_config = SettingsConfigDict(env_prefix="NOMINA_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("currency_code")
    @classmethod
    def normalise_currency(cls, value: str) -> str:
        return value.strip().upper()


def env_files(directory: Optional[Path] = None) -> Tuple[Path, ...]:
    """``.env`` then ``.env.<NOMINA_ENV>`` in the working directory; later files win."""
    directory = directory or Path.cwd()
    env = os.getenv("NOMINA_ENV", "dev")
    return tuple(path for path in (directory / ".env", directory / f".env.{env}") if path.is_file())


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=env_files() or None)
