from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import BUCKET_UUID, envelope, make_item, session_response

from apillon import Apillon, UploadState
from apillon.core.client import ClientConfig
from apillon.resources import Computing, Hosting, Nfts, SmartContracts, Social
from apillon.storage import BucketManager, FileManager, UploadOrchestrator


class TestApillon:
    """Test suite for the SDK entry point."""

    def test_modules_share_one_client(self, client_config: ClientConfig, mock_client: MagicMock) -> None:
        sdk = Apillon(client_config, client=mock_client)

        assert isinstance(sdk.buckets, BucketManager)
        assert isinstance(sdk.files, FileManager)
        assert isinstance(sdk.uploads, UploadOrchestrator)
        assert isinstance(sdk.hosting, Hosting)
        assert isinstance(sdk.nfts, Nfts)
        assert isinstance(sdk.computing, Computing)
        assert isinstance(sdk.contracts, SmartContracts)
        assert isinstance(sdk.social, Social)
        for module in (sdk.buckets, sdk.files, sdk.uploads, sdk.hosting, sdk.contracts):
            assert module.client is mock_client

    @pytest.mark.asyncio
    async def test_upload_files(self, client_config: ClientConfig, mock_client: MagicMock) -> None:
        """Test a full upload through the SDK entry point."""
        mock_client.post.side_effect = [session_response(["https://signed/0"]), envelope({"ok": True})]
        sleep = AsyncMock()
        sdk = Apillon(client_config, settle_delay=1.0, sleep=sleep, client=mock_client)
        states = []

        result = await sdk.upload_files(BUCKET_UUID, [make_item("a.txt", "hello")], lambda p: states.append(p.state))

        assert result.data == {"ok": True}
        sleep.assert_awaited_once_with(1.0)
        mock_client.put_signed.assert_awaited_once_with("https://signed/0", "hello")
        assert states[-1] == UploadState.DONE

    @pytest.mark.asyncio
    async def test_context_manager_initializes_and_closes(
        self, client_config: ClientConfig, mock_client: MagicMock
    ) -> None:
        mock_client.initialize = AsyncMock()
        mock_client.close = AsyncMock()

        async with Apillon(client_config, client=mock_client) as sdk:
            assert sdk.client is mock_client
            mock_client.initialize.assert_awaited_once()

        mock_client.close.assert_awaited_once()


def test_builds_client_from_config(client_config: ClientConfig, mocker: Any) -> None:
    mock_client_cls = mocker.patch("apillon.core.app.ApillonClient")

    sdk = Apillon(client_config)

    mock_client_cls.assert_called_once_with(client_config)
    assert sdk.client is mock_client_cls.return_value
    assert sdk.uploads.client is mock_client_cls.return_value
