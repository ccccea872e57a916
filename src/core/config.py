# core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    DATABASE_URL: str = "sqlite:///./teamtrainer.db"
    DEBUG: bool = False

    # Empty disables the X-API-Key check on report routes
    API_KEY: str = ""

    LOG_LEVEL: str = "INFO"


settings = Settings()
