from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "url_summaries"
    mongo_max_pool_size: int = 10
    mongo_server_selection_timeout_ms: int = 5000
    mongo_socket_timeout_ms: int = 10000

    # Listing
    list_default_limit: int = 20
    list_max_limit: int = 100

    # Logging
    log_level: str = "INFO"


settings = Settings()
