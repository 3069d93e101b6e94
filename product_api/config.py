"""
Configuration for the product API.

Values are read from environment variables when the module is imported.
Set them before starting the server, e.g.::

    API_KEY=s3cret PORT=8085 product-api
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip().rstrip("/") for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Shared secret expected in the x-api-key header on /products routes.
    api_key: str = os.getenv("API_KEY", "my-secret-key")

    # Load the three example products when a store is created for the app.
    seed_data: bool = _env_bool("SEED_DATA", "true")

    cors_allow_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ALLOW_ORIGINS", "*"))


settings = Settings()
