"""
Configuration management for the Universal Integration Layer.

Uses Pydantic Settings for type-safe configuration.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings."""

    # Environment
    environment: str = "development"
    app_name: str = "Universal Integration Layer"
    version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # API
    api_prefix: str = "/api/v1"

    # CORS
    cors_origins: str = "*"

    # Dashboard build served at "/" when present
    static_dir: str = "frontend/build"

    # Analytics (1 = score users sequentially)
    analytics_workers: int = 1

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
