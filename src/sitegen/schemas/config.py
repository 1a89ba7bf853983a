"""Configuration schema — validates config.yml."""

import os

from pydantic import BaseModel, Field, field_validator, model_validator


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class AssetSettings(BaseModel):
    """Image enrichment tuning."""

    validate_urls: bool = False     # HEAD-check scraped images before using them
    timeout_seconds: float = 3.0
    min_images: int = 3
    # Empty means "use UNSPLASH_ACCESS_KEY from the environment, if any".
    unsplash_access_key: str = ""

    @model_validator(mode="after")
    def fill_key_from_env(self) -> "AssetSettings":
        if not self.unsplash_access_key:
            self.unsplash_access_key = os.environ.get("UNSPLASH_ACCESS_KEY", "")
        return self

    @field_validator("min_images")
    @classmethod
    def check_min_images(cls, v: int) -> int:
        if v < 1:
            raise ValueError("min_images must be at least 1")
        return v


class GeneratorSettings(BaseModel):
    """Top-level settings loaded from config.yml. Every key is optional."""

    # Poll client
    api_base_url: str = "http://127.0.0.1:8000"
    poll_interval_seconds: float = 2.0
    poll_max_failures: int = 30

    # Static scraper data (url -> signal), YAML or JSON
    signals_path: str = ""

    server: ServerSettings = Field(default_factory=ServerSettings)
    assets: AssetSettings = Field(default_factory=AssetSettings)

    @field_validator("poll_interval_seconds")
    @classmethod
    def check_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("poll_interval_seconds must be positive")
        return v

    @field_validator("poll_max_failures")
    @classmethod
    def check_budget(cls, v: int) -> int:
        if v < 1:
            raise ValueError("poll_max_failures must be at least 1")
        return v
