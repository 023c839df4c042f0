from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # WORKER_DB_CONNECTION_STRING wins over DATABASE_URL when both are set
    DATABASE_URL: str = Field(
        default="sqlite:///./worker.db",
        validation_alias=AliasChoices("WORKER_DB_CONNECTION_STRING", "DATABASE_URL"),
    )
    DEBUG: bool = False
    LOG_LEVEL: Optional[str] = None
    # empty string turns file logging off
    LOG_DIR: str = "logs"
    # JSON list, e.g. '["http://localhost:3000"]'
    BACKEND_CORS_ORIGINS: List[str] = []


settings = Settings()
