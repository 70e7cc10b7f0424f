from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    news_api_key: str | None = None
    news_api_base_url: str = "https://newsapi.org/v2"
    news_country: str = "us"

    default_category: str = "technology"
    cache_ttl_seconds: int = 300
    default_page_size: int = 10
    category_page_size: int = 12
    search_page_size: int = 15

    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
