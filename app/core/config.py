from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import ClassVar

class Settings(BaseSettings):
    PROJECT_NAME: str = "Bookstore API"
    API_V1_STR: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./bookstore.db"
    LOG_LEVEL: str = "INFO"

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow",
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
