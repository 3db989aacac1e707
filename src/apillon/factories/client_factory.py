"""
Factory for creating SDK instances from settings.
"""

from apillon.core.app import Apillon
from apillon.core.client import ApillonClient, ClientConfig
from apillon.utils.env_config import ClientSettings


def create_client_config(settings: ClientSettings) -> ClientConfig | None:
    """Build a ClientConfig, or None when no API key is configured."""
    config_dict = settings.get_client_config()
    api_key = config_dict["api_key"]
    if api_key and api_key.strip():
        return ClientConfig(**config_dict)
    return None


def create_client(settings: ClientSettings) -> ApillonClient | None:
    """Create the HTTP transport based on configuration."""
    config = create_client_config(settings)
    if config is None:
        return None
    return ApillonClient(config)


def create_sdk(settings: ClientSettings) -> Apillon | None:
    """Create the full SDK based on configuration."""
    config = create_client_config(settings)
    if config is None:
        return None
    return Apillon(config, settle_delay=settings.upload_settle_delay)
