"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Upstream provider
    distance_api_key: Optional[str] = None  # absent -> FAILED_PRECONDITION per request
    distance_api_url: str = "https://maps.googleapis.com/maps/api/distancematrix/json"
    upstream_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
