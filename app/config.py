"""Application configuration pulled from environment variables via pydantic."""
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the dashboard gateway and proxy."""
    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Provider keys keep their conventional unprefixed names.
    news_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("news_api_key", "NEWS_API_KEY", "DASHBOARD_NEWS_API_KEY"),
    )
    tmdb_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("tmdb_api_key", "TMDB_API_KEY", "DASHBOARD_TMDB_API_KEY"),
    )
    host: str = "0.0.0.0"
    port: int = Field(default=4000, validation_alias=AliasChoices("port", "PORT", "DASHBOARD_PORT"))
    proxy_base_url: str = "http://localhost:4000"
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str = "public-api-dashboard/0.1"
    default_city: str = "New York"
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @field_validator("proxy_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @field_validator("news_api_key", "tmdb_api_key", mode="after")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty key (e.g. `NEWS_API_KEY=` in .env) as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(
        f"Loaded settings: {settings.model_dump_json(indent=4, exclude={'news_api_key', 'tmdb_api_key'})}"
    )
