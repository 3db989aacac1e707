from unittest.mock import MagicMock, patch

import pytest

from apillon.core.app import Apillon
from apillon.core.client import ApillonClient
from apillon.factories.client_factory import create_client, create_client_config, create_sdk
from apillon.utils.env_config import ClientSettings


def make_settings(api_key) -> MagicMock:
    settings = MagicMock(spec=ClientSettings)
    settings.upload_settle_delay = 0.5
    settings.get_client_config.return_value = {
        "api_key": api_key,
        "base_url": "https://api.apillon.io",
        "get_timeout": 30.0,
        "post_timeout": 60.0,
        "delete_timeout": 30.0,
        "upload_timeout": 300.0,
    }
    return settings


class TestClientFactory:
    """Test suite for client factories."""

    def test_create_client_config_with_api_key(self) -> None:
        """Test creating a client config when an API key is provided."""
        config = create_client_config(make_settings("test-api-key"))

        assert config is not None
        assert config.api_key == "test-api-key"
        assert config.post_timeout == 60.0

    @pytest.mark.parametrize("api_key", [None, "", "   "])
    def test_missing_api_key_returns_none(self, api_key) -> None:
        """Test that every factory returns None without an API key."""
        settings = make_settings(api_key)

        assert create_client_config(settings) is None
        assert create_client(settings) is None
        assert create_sdk(settings) is None

    def test_create_client(self) -> None:
        client = create_client(make_settings("test-api-key"))

        assert isinstance(client, ApillonClient)
        assert client.session is None

    def test_create_sdk_passes_settle_delay(self) -> None:
        """Test that the SDK is built with the configured settle delay."""
        with patch("apillon.factories.client_factory.Apillon") as mock_sdk:
            mock_instance = MagicMock(spec=Apillon)
            mock_sdk.return_value = mock_instance

            result = create_sdk(make_settings("test-api-key"))

            assert result == mock_instance
            config = mock_sdk.call_args.args[0]
            assert config.api_key == "test-api-key"
            assert mock_sdk.call_args.kwargs["settle_delay"] == 0.5

    def test_create_sdk_builds_orchestrator(self) -> None:
        sdk = create_sdk(make_settings("test-api-key"))

        assert isinstance(sdk, Apillon)
        assert sdk.uploads.settle_delay == 0.5
