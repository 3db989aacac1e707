"""
Environment-based configuration for the Apillon SDK.

Settings are read from environment variables, optionally seeded from a `.env`
file in the working directory. They are only used to build an explicit
ClientConfig; nothing in the SDK reads credentials from process-wide state.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from apillon.core.client import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


def load_env_file(env_file: Optional[Path] = None) -> bool:
    """Load environment variables from a .env file if it exists."""
    env_file = env_file or Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=True)
        logger.info(f"Loaded environment variables from: {env_file}")
        return True
    return False


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key, "").lower()
    return value in ("true", "1", "yes", "on") if value else default


def get_env_float(key: str, default: float = 0.0) -> float:
    """Get float value from environment variable."""
    try:
        return float(os.getenv(key, str(default)))
    except ValueError:
        return default


@dataclass
class ClientSettings:
    """SDK settings from environment variables."""

    # API access
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("APILLON_API_KEY"))
    base_url: str = field(default_factory=lambda: os.getenv("APILLON_BASE_URL", DEFAULT_BASE_URL))

    # Timeouts in seconds
    get_timeout: float = field(default_factory=lambda: get_env_float("APILLON_GET_TIMEOUT", 30.0))
    post_timeout: float = field(default_factory=lambda: get_env_float("APILLON_POST_TIMEOUT", 60.0))
    delete_timeout: float = field(default_factory=lambda: get_env_float("APILLON_DELETE_TIMEOUT", 30.0))
    upload_timeout: float = field(default_factory=lambda: get_env_float("APILLON_UPLOAD_TIMEOUT", 300.0))

    # Wait between upload negotiation and the first transfer
    upload_settle_delay: float = field(default_factory=lambda: get_env_float("APILLON_UPLOAD_SETTLE_DELAY", 2.0))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_json_format: bool = field(default_factory=lambda: get_env_bool("LOG_JSON_FORMAT", False))

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.api_key:
            logger.warning("APILLON_API_KEY is not set")
        if self.upload_settle_delay < 0:
            logger.warning("Negative upload settle delay, using 0")
            self.upload_settle_delay = 0.0

    def get_client_config(self) -> dict:
        """Get client configuration as a dictionary."""
        return {
            "api_key": self.api_key,
            "base_url": self.base_url,
            "get_timeout": self.get_timeout,
            "post_timeout": self.post_timeout,
            "delete_timeout": self.delete_timeout,
            "upload_timeout": self.upload_timeout,
        }


# Global settings instance
_settings: Optional[ClientSettings] = None


def get_settings() -> ClientSettings:
    """Get the cached settings instance."""
    global _settings
    if _settings is None:
        load_env_file()
        _settings = ClientSettings()
    return _settings


def reload_settings() -> ClientSettings:
    """Re-read the .env file and environment variables."""
    global _settings
    load_env_file()
    _settings = ClientSettings()
    logger.info("Reloaded Apillon settings")
    return _settings
