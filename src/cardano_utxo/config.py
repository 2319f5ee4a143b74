"""
Configuration management using pydantic-settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CARDANO_UTXO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    json_indent: int = Field(default=2, ge=0)

    # Lovelace the excess must keep on top of the targets (room for the fee)
    min_change_lovelace: int = Field(default=0, ge=0)


def get_settings() -> Settings:
    return Settings()
