"""
Configuración centralizada de la aplicación
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # Storefront REST API
    API_BASE_URL: str = "https://public-api.wordpress.com/wpcom/v2/"
    API_TOKEN: str = ""
    API_TIMEOUT: float = 30.0

    # Local storage (SQLAlchemy URL)
    DATABASE_URL: str = "sqlite:///storefront.db"

    # Sync defaults
    DEFAULT_PAGE_SIZE: int = 25

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Return the active Settings instance"""
    return settings


def set_settings_for_test(**kwargs) -> Settings:
    """For testing only: replace the active Settings with explicit values."""
    global settings
    settings = Settings(**kwargs)
    return settings
