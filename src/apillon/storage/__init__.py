"""
Apillon storage module.

This module provides bucket management, file lookups and the session-based
batch upload: negotiate signed URLs, transfer content, finalize the session.
"""

from .file_utils import FileUtils, file_utils
from .files import FileManager
from .management import BucketManager
from .uploading import (
    DEFAULT_SETTLE_DELAY,
    ContentTransferer,
    SessionFinalizer,
    UploadOrchestrator,
    UploadSessionNegotiator,
)

__all__ = [
    # Upload session components
    "UploadSessionNegotiator",
    "ContentTransferer",
    "SessionFinalizer",
    "UploadOrchestrator",
    "DEFAULT_SETTLE_DELAY",
    # Buckets and files
    "BucketManager",
    "FileManager",
    # Utilities
    "FileUtils",
    "file_utils",
]
