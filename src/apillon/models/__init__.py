"""
Pydantic data models for Apillon API requests and responses.
"""

from .common import ApiModel, ApiResponse, ListData, Timestamps
from .storage import (
    DEFAULT_CONTENT_TYPE,
    BucketItem,
    FileDetailsResponse,
    FileInfo,
    FileMetadata,
    IPFSClusterInfoData,
    IPFSClusterInfoResponse,
    IPFSLinkData,
    IPFSLinkResponse,
    ListBucketsResponse,
    ListFilesResponse,
    ProcessUploadResponse,
    StartUploadRequest,
    UploadItem,
    UploadProgress,
    UploadResult,
    UploadSession,
    UploadSessionData,
    UploadSessionFile,
    UploadState,
)

__all__ = [
    # Envelope
    "ApiModel",
    "ApiResponse",
    "ListData",
    "Timestamps",
    # Uploads
    "DEFAULT_CONTENT_TYPE",
    "FileMetadata",
    "UploadItem",
    "StartUploadRequest",
    "UploadSessionFile",
    "UploadSessionData",
    "ProcessUploadResponse",
    "UploadSession",
    "UploadResult",
    "UploadState",
    "UploadProgress",
    # Buckets and files
    "BucketItem",
    "FileInfo",
    "IPFSLinkData",
    "IPFSClusterInfoData",
    "ListBucketsResponse",
    "ListFilesResponse",
    "FileDetailsResponse",
    "IPFSLinkResponse",
    "IPFSClusterInfoResponse",
]
