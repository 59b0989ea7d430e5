"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fd-gateway"
    log_level: str = "INFO"

    # Text generation service (Ollama-compatible)
    textgen_api_base: str = "http://localhost:11434"
    textgen_model: str = "llama3.2:3b"
    textgen_temperature: float = 0.2

    # HTTP Client
    http_timeout_seconds: float = 30.0

    # Recommendation form contract
    goals_min_length: int = 20
    goals_max_length: int = 500

    # Calculator form defaults
    default_principal: float = 100_000
    default_annual_rate: float = 6.5
    default_tenure_years: float = 5
    default_compounding_frequency: int = 4  # quarterly


settings = Settings()
