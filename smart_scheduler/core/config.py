"""
Core Configuration Module

Centralizes environment configuration for the scheduling service.
Provides a singleton Settings object with defaults suitable for local runs.

Usage:
    from smart_scheduler.core.config import settings

    print(settings.APP_ENV)
    print(settings.DATABASE_URL)
"""

import os
from typing import List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Values are read on every access so tests can override them with
    monkeypatch.setenv() without reloading the module.
    """

    # ==================== Application Settings ====================

    @property
    def APP_ENV(self) -> str:
        """Application environment: dev, staging, production"""
        return os.getenv("APP_ENV", "dev")

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    @property
    def HOST(self) -> str:
        """Bind address for the uvicorn server"""
        return os.getenv("HOST", "0.0.0.0")

    @property
    def PORT(self) -> int:
        """Port for the uvicorn server"""
        return int(os.getenv("PORT", "8080"))

    # ==================== Storage Settings ====================

    @property
    def DATABASE_URL(self) -> str:
        """SQLAlchemy database URL for the calendar store"""
        return os.getenv("DATABASE_URL", "sqlite:///./data/scheduler.db")

    @property
    def STORE_TIMEOUT_SECONDS(self) -> float:
        """Connect/busy timeout passed to the database driver"""
        return float(os.getenv("STORE_TIMEOUT_SECONDS", "5.0"))

    @property
    def SEED_DEMO_DATA(self) -> bool:
        """Load the sample calendar on startup"""
        return os.getenv("SEED_DEMO_DATA", "false").lower() == "true"

    # ==================== Scheduling Settings ====================

    @property
    def LOCK_TIMEOUT_SECONDS(self) -> float:
        """Maximum wait for a participant's calendar lock"""
        return float(os.getenv("LOCK_TIMEOUT_SECONDS", "10.0"))

    @property
    def DEFAULT_MEETING_TITLE(self) -> str:
        """Title used when a schedule request omits one"""
        return os.getenv("DEFAULT_MEETING_TITLE", "New Meeting")

    # ==================== CORS Settings ====================

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed CORS origins"""
        origins_str = os.getenv("CORS_ORIGINS", "*")
        if origins_str == "*":
            return ["*"]
        return [origin.strip() for origin in origins_str.split(",")]


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Returns:
        Settings object with configuration values
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


# Convenience singleton for direct import
settings = get_settings()


# ==================== Helper Functions ====================

def is_production() -> bool:
    """True if APP_ENV is 'production' or 'prod'."""
    env = settings.APP_ENV.lower()
    return env in ("production", "prod")
