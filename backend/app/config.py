"""
Configuration management for the vPIC lookup backend.
Uses pydantic-settings for environment variable handling.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # API Configuration
    api_title: str = "vPIC Lookup API"
    api_version: str = "1.0.0"
    debug: bool = False

    # NHTSA vPIC Configuration
    vpic_base_url: str = "https://vpic.nhtsa.dot.gov/api/vehicles"
    request_timeout: int = 15  # seconds

    # Decode result shaping
    # "zero" maps empty attribute values to 0, "omit" drops them from the bag
    empty_attribute_policy: Literal["zero", "omit"] = "zero"


# Global settings instance
settings = Settings()
