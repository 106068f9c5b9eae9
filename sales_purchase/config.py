from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Sales Purchase Service"
    ENVIRONMENT: str = "local"
    HOST: str = "0.0.0.0"
    PORT: int = 8084

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./sales_purchase.db"
    # procedure | table | auto (table on SQLite, procedure elsewhere)
    STOCK_LEDGER_BACKEND: str = "auto"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Sibling services
    # ==============================
    USER_SERVICE_URL: str = "http://localhost:8083/api/users/"
    PRODUCT_SERVICE_URL: str = "http://localhost:8083/api/products/"
    STOCK_SERVICE_URL: str = "http://localhost:8083/api/stocks/"
    LOOKUP_TIMEOUT_SECONDS: Optional[float] = None

    # ==============================
    # Sales & purchases
    # ==============================
    SELLER_ID: int = 1
    SALE_CGST_RATE: float = 0.09
    SALE_SGST_RATE: float = 0.09
    SALE_IGST_RATE: float = 0.0


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
