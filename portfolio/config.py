"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    # ==========================================================================
    # Environment
    # ==========================================================================
    
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    
    # ==========================================================================
    # API Server
    # ==========================================================================
    
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "http://localhost:3000"
    public_base_url: str = "https://portfolio.my-ai.nl"
    
    # ==========================================================================
    # Storage
    # ==========================================================================
    
    # "memory" keeps items in-process, "file" persists them as JSON
    storage_backend: str = "memory"
    data_dir: str = "./data"
    
    # ==========================================================================
    # AI / LLM
    # ==========================================================================
    
    # Accepts either GEMINI_API_KEY or GOOGLE_API_KEY
    gemini_api_key: str = ""
    google_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-lite"
    gemini_api_base: str = "https://generativelanguage.googleapis.com/v1beta/models"
    
    ai_temperature: float = 0.7
    ai_max_output_tokens: int = 1024
    ai_timeout_seconds: float = 30.0
    ai_max_attempts: int = 3
    ai_retry_base_delay: float = 5.0
    
    # ==========================================================================
    # Authentication
    # ==========================================================================
    
    jwt_secret_key: str = "dev-jwt-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_days: int = 7
    auth_cookie_name: str = "auth-token"
    
    # ==========================================================================
    # Optional Services
    # ==========================================================================
    
    sentry_dsn: str = ""
    
    # ==========================================================================
    # Helpers
    # ==========================================================================
    
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
    
    @property
    def is_production(self) -> bool:
        return self.environment == "production"
    
    @property
    def ai_api_key(self) -> str:
        return self.gemini_api_key or self.google_api_key
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging once at startup."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
