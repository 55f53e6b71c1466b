"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parsing and trip detection settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOTRIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Rows scanned by trip detection before switching to a stride sample
    sample_cap: int = 10000

    # Features handed to the bbox computation before sampling
    bounds_sample_cap: int = 10000

    # Vertices a feature needs to be used as the time format sample
    min_trip_vertices: int = 3

    # CLI log sink level
    log_level: str = "WARNING"


settings = Settings()
