from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_title: str = "Registro por Voz"

    log_level: str = "INFO"

    # transcrições maiores que isso não vêm de uma fala só
    max_transcript_length: int = 500


@lru_cache
def get_settings() -> Settings:
    return Settings()
