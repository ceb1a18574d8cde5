from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HASHFORGE_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "HashForge Lab"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"

    # Logging
    log_level: str = "INFO"

    # Pipeline limits
    max_input_length: int = 1_024
    max_pipeline_steps: int = 64

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Origins allowed outside development; development allows any origin
    cors_origins: list[str] = []

    # Used when a hash request arrives with an empty password
    default_password: str = "password"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
