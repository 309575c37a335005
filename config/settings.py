from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Redis (local dev default)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_ENABLED: bool = False  # in-process cache only unless turned on

    # Polymarket CLOB
    POLYMARKET_CLOB_API_URL: str = "https://clob.polymarket.com"
    CLOB_HTTP_TIMEOUT_SECONDS: float = 5.0

    # Order book cache
    ORDERBOOK_CACHE_TTL_SECONDS: int = 2
    ORDERBOOK_CACHE_MAX_ENTRIES: int = 1000

    # App
    APP_NAME: str = "Esports Market Simulator"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
