from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Core
    ENVIRONMENT: str = Field(default="production")
    LOG_LEVEL: str = Field(default="INFO")

    # MongoDB connection (host, credentials and options all live in the URI)
    MONGO_URI: str = Field(default="mongodb://localhost:27017")
    MONGO_DB_NAME: str = Field(default="")  # empty -> database path of MONGO_URI, then "solutions"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = Field(default=5000)

    # Provisioning
    PROVISION_MODE: str = Field(default="create")  # create | ensure


settings = Settings()
