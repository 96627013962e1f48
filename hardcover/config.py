# hardcover/config.py
"""
Runtime settings for the Hardcover list tools.

Values are resolved from environment variables, with a ``.env`` file in the
project root loaded first (existing variables win).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

HARDCOVER_GRAPHQL_URL = "https://api.hardcover.app/v1/graphql"
DEFAULT_API_BASE_URL = "http://localhost:3001"


@dataclass
class Settings:
    # Upstream GraphQL service
    hardcover_token: str = field(
        default_factory=lambda: os.environ.get("HARDCOVER_TOKEN", "")
    )
    hardcover_api_url: str = field(
        default_factory=lambda: os.environ.get("HARDCOVER_API_URL", HARDCOVER_GRAPHQL_URL)
    )

    # Local API under test
    api_base_url: str = field(
        default_factory=lambda: os.environ.get("API_BASE_URL", DEFAULT_API_BASE_URL)
    )
    expected_source: str = field(
        default_factory=lambda: os.environ.get("EXPECTED_SOURCE", "hardcover")
    )
    proxy_prefix: str = field(
        default_factory=lambda: os.environ.get("PROXY_PREFIX", "/api/proxy-image")
    )

    # Transport
    request_timeout: float = field(
        default_factory=lambda: os.environ.get("REQUEST_TIMEOUT", "10")
    )

    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    def __post_init__(self):
        self.hardcover_token = (self.hardcover_token or "").strip()
        self.api_base_url = self.api_base_url.rstrip("/")
        try:
            self.request_timeout = float(self.request_timeout)
        except (TypeError, ValueError):
            raise ConfigError(
                f"REQUEST_TIMEOUT must be a number of seconds, got {self.request_timeout!r}"
            ) from None

    def require_token(self) -> str:
        """Return the bearer token or raise ConfigError when it is unset"""
        if not self.hardcover_token:
            raise ConfigError("HARDCOVER_TOKEN not set in environment")
        return self.hardcover_token

    def masked_token(self) -> str:
        """First 10 characters of the token, for diagnostics output"""
        return self.hardcover_token[:10] + "..."
