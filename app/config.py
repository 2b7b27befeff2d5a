"""
Configuration management.

``Settings`` reads the process environment when it is instantiated, so
tests can build their own instance (for example with an explicit API
key) without touching ``os.environ``.  A ``.env`` file in the working
directory is loaded first; values already present in the environment
take precedence over the file.
"""

import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dotenv import load_dotenv

load_dotenv(override=False)


def _env(name: str, default: Optional[str] = None) -> Callable[[], Optional[str]]:
    return lambda: os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=_env("PROJECT_NAME", "product-api"))
    host: str = field(default_factory=_env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Shared secret expected in the ``x-api-key`` header.  When unset (or
    # empty) every request under ``/api`` is rejected.
    api_key: Optional[str] = field(default_factory=_env("API_KEY"))

    log_level: str = field(default_factory=_env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=_env("LOG_FILE"))

    # Comma-separated list; "*" allows any origin.
    cors_origins: str = field(default_factory=_env("CORS_ORIGINS", "*"))

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
