"""Application configuration from environment variables."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Where"
    debug: bool = False
    secret_key: str = "change-me-in-production"
    log_level: str = "INFO"

    # Points budgets
    create_location_points: float = 1.0
    action_points: float = 0.1
    engagement_points: float = 0.1
    referral_points: float = 5.0

    # Engagement split: creator gets this fraction, other contributors share the rest
    creator_share: float = 0.3

    # Locations
    display_image_limit: int = 10
    anonymous_user_id: str = "anonymous"
    system_location_id: str = "system"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "WHERE_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
