"""Application settings."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = Field("Calculadora de Riesgo de Parto Prematuro", description="Public name of the API")
    api_version: str = Field("v1", description="API version prefix")
    log_level: str = Field("INFO", description="Logging level")
    environment: str = Field("production", description="Deployment environment")
    cors_origins: List[str] = Field(default_factory=list, description="CORS origins")
    batch_max_items: int = Field(500, ge=1, description="Maximum records per batch assessment")

    model_config = SettingsConfigDict(
        env_prefix="PTR_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
