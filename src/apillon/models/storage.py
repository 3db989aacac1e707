"""
Data models for Apillon storage buckets, files and upload sessions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from pydantic import ConfigDict, Field

from .common import ApiModel, ApiResponse, ListData, Timestamps


DEFAULT_CONTENT_TYPE = "text/plain"


class UploadState(str, Enum):
    """States of a batch upload."""

    VALIDATING = "validating"
    NEGOTIATING = "negotiating"
    TRANSFERRING = "transferring"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"


# Upload models


class FileMetadata(ApiModel):
    """Describes a file to upload, without its payload."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    content_type: Optional[str] = None

    def with_default_content_type(self) -> "FileMetadata":
        """Return a copy whose content type falls back to text/plain."""
        if self.content_type:
            return self
        return self.model_copy(update={"content_type": DEFAULT_CONTENT_TYPE})


@dataclass(frozen=True)
class UploadItem:
    """A file's metadata paired with its raw content."""

    metadata: FileMetadata
    content: Union[bytes, str]

    @property
    def file_name(self) -> str:
        return self.metadata.file_name


class StartUploadRequest(ApiModel):
    """Body of the upload session negotiation request."""

    files: List[FileMetadata]


class UploadSessionFile(ApiModel):
    """One negotiated file slot, carrying its signed destination URL."""

    file_uuid: Optional[str] = None
    file_name: Optional[str] = None
    content_type: Optional[str] = None
    url: str = ""
    path: Optional[str] = None


class UploadSessionData(ApiModel):
    """Payload returned when an upload session is started."""

    session_uuid: str = Field(min_length=1)
    files: List[UploadSessionFile] = Field(default_factory=list)


ProcessUploadResponse = ApiResponse[UploadSessionData]

# Finalize payloads are opaque beyond envelope status inspection.
UploadResult = ApiResponse[Any]


@dataclass(frozen=True)
class UploadSession:
    """A negotiated session: its id and one signed URL per file, in file order."""

    session_uuid: str
    signed_urls: Tuple[str, ...]
    files: Tuple[UploadSessionFile, ...] = ()

    @classmethod
    def from_response(cls, response: ProcessUploadResponse) -> "UploadSession":
        files = tuple(response.data.files)
        return cls(
            session_uuid=response.data.session_uuid,
            signed_urls=tuple(item.url for item in files),
            files=files,
        )


@dataclass
class UploadProgress:
    """Progress information for a batch upload."""

    state: UploadState
    bucket_uuid: str
    total_files: int
    session_uuid: Optional[str] = None
    file_index: Optional[int] = None
    file_name: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """Check if the batch reached a terminal state."""
        return self.state in (UploadState.DONE, UploadState.FAILED)


# Bucket and file models


class BucketItem(Timestamps):
    """Information about a storage bucket."""

    bucket_uuid: str
    bucket_type: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    size: Optional[int] = None


class FileInfo(Timestamps):
    """Detailed information about a stored file."""

    file_uuid: str
    cid: Optional[str] = Field(default=None, alias="CID")
    name: str = ""
    content_type: Optional[str] = None
    path: Optional[str] = None
    size: Optional[int] = None
    file_status: Optional[int] = None
    link: Optional[str] = None
    directory_uuid: Optional[str] = None


class IPFSLinkData(ApiModel):
    """IPFS gateway link for a CID."""

    link: str = ""


class IPFSClusterInfoData(ApiModel):
    """Information about the project's IPFS cluster."""

    secret: Optional[str] = None
    project_uuid: Optional[str] = Field(default=None, alias="project_uuid")
    ipfs_gateway: Optional[str] = None
    ipns_gateway: Optional[str] = None


ListBucketsResponse = ApiResponse[ListData[BucketItem]]
ListFilesResponse = ApiResponse[ListData[FileInfo]]
FileDetailsResponse = ApiResponse[FileInfo]
IPFSLinkResponse = ApiResponse[IPFSLinkData]
IPFSClusterInfoResponse = ApiResponse[IPFSClusterInfoData]
