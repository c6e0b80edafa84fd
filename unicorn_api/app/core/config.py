"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on port 3000.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def env_flag(value: str) -> bool:
    """Interpret an environment variable value as a boolean flag."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def split_csv(value: str) -> List[str]:
    """Split a comma‑separated value, dropping blank items."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Unicorn API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = env_flag(os.getenv("DEBUG", "false"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Listen address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Prefix for the versioned API routes.  Empty by default so the
    # resources live at ``/unicorns``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Directory served under ``/static`` when it exists.
    static_dir: str = os.getenv("STATIC_DIR", "public")

    cors_origins: List[str] = field(
        default_factory=lambda: split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    # Load the bundled unicorns into the store when the app is created.
    seed_data: bool = env_flag(os.getenv("SEED_DATA", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
