"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./settleup.db"

    # Service
    service_name: str = "settleup-gateway"
    log_level: str = "INFO"

    # Settlement
    settlement_tolerance_cents: int = 1  # Balances within 1 cent of zero count as settled


settings = Settings()
