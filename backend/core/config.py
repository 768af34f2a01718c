from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Scoring
    CORRECT_ANSWER_POINTS: int = 10
    WRONG_ANSWER_PENALTY: int = 5

    # Presentation
    ADVANCE_DELAY_MS: int = 2000  # How long the client shows success feedback before calling /advance
    SHUFFLE_WORD_BANK: bool = True

    # Content
    DEFAULT_LANGUAGE: str = "ang"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
