import json
from collections.abc import Sequence
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from apillon.core.client import ApillonClient, ClientConfig
from apillon.models.storage import FileMetadata, UploadItem
from apillon.storage.uploading import UploadOrchestrator

BUCKET_UUID = "test-bucket-uuid"
SESSION_UUID = "test-session-uuid"


def envelope(data: Any, status: int = 200) -> str:
    """Serialize an API response envelope."""
    return json.dumps({"id": "response-id", "status": status, "data": data})


def session_response(urls: Sequence[str], session_uuid: str = SESSION_UUID) -> str:
    """Build a negotiate response carrying one file slot per URL."""
    return envelope(
        {
            "sessionUuid": session_uuid,
            "files": [
                {
                    "fileUuid": f"file-{index}",
                    "fileName": f"file-{index}.txt",
                    "contentType": "text/plain",
                    "url": url,
                    "path": None,
                }
                for index, url in enumerate(urls)
            ],
        },
        status=201,
    )


def make_item(name: str, content: Any = "content", content_type: str | None = None) -> UploadItem:
    return UploadItem(metadata=FileMetadata(file_name=name, content_type=content_type), content=content)


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_key="test-api-key")


@pytest.fixture
def mock_client(client_config: ClientConfig) -> MagicMock:
    client = MagicMock(spec=ApillonClient)
    client.config = client_config
    client.get = AsyncMock(return_value=envelope({}))
    client.post = AsyncMock(return_value=envelope({}))
    client.delete = AsyncMock(return_value=envelope(True))
    client.put_signed = AsyncMock(return_value=(200, ""))
    return client


@pytest.fixture
def mock_sleep() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def orchestrator(mock_client: MagicMock, mock_sleep: AsyncMock) -> UploadOrchestrator:
    return UploadOrchestrator(mock_client, sleep=mock_sleep)
