"""Application configuration."""

import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    storage_path: str = os.getenv("STORAGE_PATH", "data/habitflow.db")
    storage_key: str = os.getenv("STORAGE_KEY", "habits")

    # Habits
    default_goal: int = int(os.getenv("DEFAULT_GOAL", "3"))

    # Server
    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "8000"))

    # Dashboard
    dashboard_output_dir: str = os.getenv("DASHBOARD_OUTPUT_DIR", "static/images")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = False


settings = Settings()
