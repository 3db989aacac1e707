"""
Factories building SDK objects from environment settings.
"""

from .client_factory import create_client, create_client_config, create_sdk

__all__ = ["create_client", "create_client_config", "create_sdk"]
