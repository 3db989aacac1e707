"""
Apillon SDK.

Async Python client for the Apillon storage and Web3 API: buckets, session
based batch uploads, hosting, NFTs, computing, smart contracts and social.
"""

from .core import (
    ApillonClient,
    ApillonError,
    ClientConfig,
    DecodeError,
    FinalizeError,
    InsufficientURLsError,
    InvalidInputError,
    TransportError,
    UploadError,
)
from .core.app import Apillon
from .models import ApiResponse, FileMetadata, UploadItem, UploadProgress, UploadState
from .storage import UploadOrchestrator

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "Apillon",
    "ApillonClient",
    "ClientConfig",
    "UploadOrchestrator",
    # Models
    "ApiResponse",
    "FileMetadata",
    "UploadItem",
    "UploadProgress",
    "UploadState",
    # Errors
    "ApillonError",
    "InvalidInputError",
    "TransportError",
    "DecodeError",
    "InsufficientURLsError",
    "UploadError",
    "FinalizeError",
]
