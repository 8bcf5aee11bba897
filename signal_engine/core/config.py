from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "Product Signal Engine"
    LOG_LEVEL: str = "INFO"
    DATABASE_URL: str = "sqlite:///./signal_engine.db"
    AI_API_KEY: Optional[str] = None
    AI_API_BASE_URL: Optional[str] = None
    AI_CHAT_MODEL: str = "@cf/meta/llama-3-8b-instruct"
    AI_TIMEOUT_SECONDS: float = 30.0
    AI_MAX_TOKENS: int = 256

    model_config = SettingsConfigDict(env_file=".env", frozen=True)


settings = Settings()
