"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External Services
    holiday_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "statement-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Generation defaults (used when a request omits them)
    default_template_id: str = "sarbeshwor"
    default_transaction_count: int = 40
    default_min_transaction_paisa: int = 100_000  # NPR 1,000
    default_max_transaction_paisa: int = 5_000_000  # NPR 50,000


settings = Settings()
