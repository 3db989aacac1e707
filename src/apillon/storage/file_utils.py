"""
File utility functions for building upload batches from local files.

This module provides MIME type detection, filename sanitization and async
file loading into UploadItem instances.
"""

import mimetypes
from pathlib import Path
from typing import Iterable, List, Optional, Union

import aiofiles

from apillon.core.errors import InvalidInputError
from apillon.models.storage import FileMetadata, UploadItem


class FileUtils:
    """Utility class for turning local files into upload items."""

    MAX_FILENAME_LENGTH = 255

    def __init__(self):
        """Initialize file utilities."""
        mimetypes.init()
        self._add_custom_mime_types()

    def _add_custom_mime_types(self) -> None:
        """Add MIME types the platform defaults often miss."""
        custom_types = {
            ".md": "text/markdown",
            ".json": "application/json",
            ".wasm": "application/wasm",
            ".webp": "image/webp",
            ".glb": "model/gltf-binary",
            ".gltf": "model/gltf+json",
        }

        for extension, mime_type in custom_types.items():
            mimetypes.add_type(mime_type, extension)

    def get_content_type(self, file_path: Union[str, Path]) -> str:
        """
        Get MIME content type for a file.

        Args:
            file_path: Path or name of the file

        Returns:
            MIME content type string
        """
        content_type, _ = mimetypes.guess_type(str(file_path))
        return content_type or "application/octet-stream"

    def sanitize_filename(self, filename: str) -> str:
        """
        Sanitize filename for safe storage.

        Args:
            filename: Original filename

        Returns:
            Sanitized filename
        """
        unsafe_chars = '<>:"/\\|?*'
        for char in unsafe_chars:
            filename = filename.replace(char, "_")

        filename = filename.strip(" .")

        if len(filename) > self.MAX_FILENAME_LENGTH:
            path = Path(filename)
            name = path.stem[:200]
            filename = f"{name}{path.suffix}"

        return filename

    async def load_upload_item(
        self,
        file_path: Union[str, Path],
        file_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> UploadItem:
        """
        Read a local file into an UploadItem.

        Args:
            file_path: Path to the file
            file_name: Name to store the file under (defaults to the sanitized basename)
            content_type: MIME type (defaults to a guess from the extension)

        Raises:
            InvalidInputError: If the path is not a file
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise InvalidInputError(f"Path is not a file: {file_path}", field_name="file_path", field_value=str(file_path))

        async with aiofiles.open(file_path, "rb") as f:
            content = await f.read()

        metadata = FileMetadata(
            file_name=file_name or self.sanitize_filename(file_path.name),
            content_type=content_type or self.get_content_type(file_path),
        )
        return UploadItem(metadata=metadata, content=content)

    async def load_upload_batch(self, file_paths: Iterable[Union[str, Path]]) -> List[UploadItem]:
        """Read several local files, preserving their order."""
        return [await self.load_upload_item(path) for path in file_paths]


# Global instance
file_utils = FileUtils()
