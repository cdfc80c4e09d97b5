from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Inventory System API"
    ENVIRONMENT: str = "local"

    # ==============================
    # Server
    # ==============================
    HOST: str = "0.0.0.0"
    PORT: int = 5500
    CORS_ORIGINS: str = "*"

    # ==============================
    # Database
    # ==============================
    # "sqlite://" (in-memory) shares one connection across requests; tests only.
    DATABASE_URL: str = "sqlite:///./inventory.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    @property
    def cors_origins(self) -> list[str]:
        origins = []
        for value in self.CORS_ORIGINS.split(","):
            value = value.strip()
            if value:
                origins.append(value)
        return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
