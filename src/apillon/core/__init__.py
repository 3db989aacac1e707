"""
Core transport and error types shared by every Apillon API module.
"""

from .client import DEFAULT_BASE_URL, ApillonClient, ClientConfig, api_path
from .errors import (
    ApillonError,
    DecodeError,
    FinalizeError,
    InsufficientURLsError,
    InvalidInputError,
    TransportError,
    UploadError,
)

__all__ = [
    "ApillonClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "api_path",
    "ApillonError",
    "InvalidInputError",
    "TransportError",
    "DecodeError",
    "InsufficientURLsError",
    "UploadError",
    "FinalizeError",
]
