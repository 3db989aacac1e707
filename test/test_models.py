import pytest
from conftest import envelope, session_response
from pydantic import ValidationError

from apillon.models.common import ApiResponse
from apillon.models.storage import (
    FileDetailsResponse,
    FileMetadata,
    IPFSClusterInfoResponse,
    ListBucketsResponse,
    ProcessUploadResponse,
    StartUploadRequest,
    UploadProgress,
    UploadSession,
    UploadState,
)


class TestFileMetadata:
    """Test suite for file metadata."""

    @pytest.mark.parametrize("content_type", [None, ""])
    def test_missing_content_type_defaults_to_text_plain(self, content_type) -> None:
        metadata = FileMetadata(file_name="a.txt", content_type=content_type)

        assert metadata.with_default_content_type().content_type == "text/plain"
        assert metadata.content_type == content_type

    def test_explicit_content_type_is_kept(self) -> None:
        metadata = FileMetadata(file_name="a.json", content_type="application/json")

        assert metadata.with_default_content_type() is metadata

    def test_serializes_camel_case(self) -> None:
        request = StartUploadRequest(files=[FileMetadata(file_name="a.txt", content_type="text/plain")])

        assert request.model_dump(by_alias=True) == {"files": [{"fileName": "a.txt", "contentType": "text/plain"}]}

    def test_accepts_wire_names(self) -> None:
        metadata = FileMetadata.model_validate({"fileName": "a.txt", "contentType": "text/html"})

        assert metadata.file_name == "a.txt"
        assert metadata.content_type == "text/html"


class TestUploadSession:
    """Test suite for negotiated sessions."""

    def test_from_response_keeps_url_order(self) -> None:
        response = ProcessUploadResponse.model_validate_json(session_response(["https://u/0", "", "https://u/2"]))

        session = UploadSession.from_response(response)

        assert session.session_uuid == "test-session-uuid"
        assert session.signed_urls == ("https://u/0", "", "https://u/2")
        assert session.files[0].file_uuid == "file-0"

    def test_missing_url_defaults_to_empty(self) -> None:
        response = ProcessUploadResponse.model_validate_json(envelope({"sessionUuid": "s1", "files": [{}]}))

        assert UploadSession.from_response(response).signed_urls == ("",)

    @pytest.mark.parametrize("data", [{"files": []}, {"sessionUuid": "", "files": []}])
    def test_session_uuid_required(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            ProcessUploadResponse.model_validate_json(envelope(data))


class TestApiResponse:
    """Test suite for the response envelope."""

    @pytest.mark.parametrize("status,expected", [(None, True), (200, True), (201, True), (400, False), (500, False)])
    def test_is_success(self, status, expected: bool) -> None:
        assert ApiResponse[dict](status=status, data={}).is_success is expected

    def test_data_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ApiResponse[dict].model_validate_json('{"id": "x", "status": 200}')

    def test_list_buckets(self) -> None:
        raw = envelope(
            {
                "items": [{"bucketUuid": "b1", "name": "docs", "createTime": "2024-01-01T00:00:00Z"}],
                "total": 1,
            }
        )

        response = ListBucketsResponse.model_validate_json(raw)

        assert response.data.total == 1
        assert response.data.items[0].bucket_uuid == "b1"
        assert response.data.items[0].create_time == "2024-01-01T00:00:00Z"

    def test_file_details_cid_alias(self) -> None:
        raw = envelope({"fileUuid": "f1", "CID": "bafy123", "name": "a.txt", "fileStatus": 3})

        response = FileDetailsResponse.model_validate_json(raw)

        assert response.data.cid == "bafy123"
        assert response.data.file_status == 3

    def test_ipfs_cluster_info(self) -> None:
        raw = envelope({"secret": "s", "project_uuid": "p1", "ipfsGateway": "https://ipfs.example/ipfs/"})

        response = IPFSClusterInfoResponse.model_validate_json(raw)

        assert response.data.project_uuid == "p1"
        assert response.data.ipfs_gateway == "https://ipfs.example/ipfs/"


def test_upload_progress_is_complete() -> None:
    progress = UploadProgress(state=UploadState.TRANSFERRING, bucket_uuid="b1", total_files=2)
    assert not progress.is_complete

    progress.state = UploadState.DONE
    assert progress.is_complete

    progress.state = UploadState.FAILED
    assert progress.is_complete
