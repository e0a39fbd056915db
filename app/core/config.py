from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CONTENT_PROVIDER: str = "strapi"
    CONTENT_API_BASE_URL: str = "https://admin.spb-cosmetologist.ru"
    CONTENT_API_SERVICES_PATH: str = "/api/uslugas"
    CONTENT_API_TOKEN: str | None = None
    CONTENT_API_TIMEOUT: float = 10.0
    CONTENT_CACHE_TTL_SECONDS: int = 3600
    CONTENT_CACHE_MAX_ENTRIES: int = 256
    CONTENT_MEDIA_BASE_URL: str = "https://admin.spb-cosmetologist.ru"

    FEATURED_SERVICES_LIMIT: int = 3

    BUSINESS_NAME: str = "Косметолог Ольга"
    THEME_COOKIE_NAME: str = "theme"
    THEME_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 365

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
