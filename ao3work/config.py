"""Application configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AO3_",
        case_sensitive=False,
        extra="ignore",
    )

    # Archive
    base_url: str = "https://archiveofourown.org"
    view_adult: bool = True
    not_found_marker: str = "system errors error-404 region"

    # HTTP
    request_timeout: float = 30.0
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # Scrapy
    crawl_download_delay: float = 5.0
    crawl_concurrent_requests: int = 1

    # Environment
    log_level: str = "INFO"


settings = Settings()
