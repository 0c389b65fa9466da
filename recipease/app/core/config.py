import logging
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field("sqlite:///./recipease.db", alias="DATABASE_URL")
    auth_secret_key: str = Field("change-me", alias="AUTH_SECRET_KEY")
    auth_algorithm: str = Field("HS256", alias="AUTH_ALGORITHM")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    llm_api_key: str | None = Field(None, alias="LLM_API_KEY")
    llm_base_url: str = Field("https://api.groq.com/openai/v1", alias="LLM_BASE_URL")
    llm_models: str = Field(
        "llama-3.3-70b-versatile,llama-3.1-8b-instant",
        alias="LLM_MODELS",
    )
    llm_temperature: float = Field(0.1, alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(1500, alias="LLM_MAX_TOKENS")
    # Wrapper timeout around a single model call, on top of the HTTP client timeout
    llm_timeout_seconds: float = Field(60.0, alias="LLM_TIMEOUT_SECONDS")
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (compatible; RecipeaseBot/1.0; +https://recipease.app/bot)",
        alias="SCRAPER_USER_AGENT",
    )
    fetch_timeout_seconds: float = Field(15.0, alias="FETCH_TIMEOUT_SECONDS")
    fetch_max_bytes: int = Field(2 * 1024 * 1024, alias="FETCH_MAX_BYTES")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def llm_model_candidates(self) -> List[str]:
        """Candidate model names in priority order."""
        return [name.strip() for name in self.llm_models.split(",") if name.strip()]


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
