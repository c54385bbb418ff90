"""Sampling configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``FUNCTIONAL_IMAGES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUNCTIONAL_IMAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Default raster size in pixels
    raster_width: int = 400
    raster_height: int = 300

    # Threads used to sample rows; 1 samples on the calling thread
    sampling_workers: int = 1


settings = Settings()
