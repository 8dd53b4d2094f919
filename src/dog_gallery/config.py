"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    dog_api_key: str
    dog_api_base_url: str = "https://api.thedogapi.com/v1"
    dog_api_sub_id: str = "user_id_12345"
    page_size: int = 10
    request_timeout_seconds: float = 10
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def debug(self) -> bool:
        return self.environment == "local"
