"""
Batch file upload to Apillon storage buckets.

An upload runs as a server-tracked session in three steps:

1. negotiate: describe every file of the batch and receive a session id plus
   one signed URL per file, in file order
2. transfer: PUT each file's raw content to its signed URL, strictly in order
3. finalize: close the session so the bucket ingests the files

UploadOrchestrator sequences the three components below into one call. It
never retries and never finalizes a session more than once; any failure is
raised to the caller with the bucket, session, step and file attached.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import replace
from typing import Optional, Union

import structlog

from apillon.core.client import ApillonClient, api_path
from apillon.core.errors import (
    ApillonError,
    FinalizeError,
    InsufficientURLsError,
    InvalidInputError,
    UploadError,
)
from apillon.models.storage import (
    FileMetadata,
    ProcessUploadResponse,
    StartUploadRequest,
    UploadItem,
    UploadProgress,
    UploadResult,
    UploadSession,
    UploadState,
)
from apillon.utils.validators import ErrorMessages, decode_response, require


logger = structlog.get_logger(__name__)

# Delay between negotiation and the first transfer, while signed URLs propagate
DEFAULT_SETTLE_DELAY = 2.0

# Longest response body kept on an UploadError
BODY_SNIPPET_LIMIT = 512

ProgressCallback = Callable[[UploadProgress], None]


class UploadSessionNegotiator:
    """Starts upload sessions and collects their signed URLs."""

    def __init__(self, client: ApillonClient):
        self.client = client

    async def negotiate(self, bucket_uuid: str, files: Sequence[FileMetadata]) -> UploadSession:
        """
        Start an upload session for a batch of files.

        Files without a content type are announced as text/plain. The
        returned session lists signed URLs in the same order as `files`; the
        API does not promise one URL per file, so callers must check.

        Raises:
            InvalidInputError: If the bucket id, the file list or a file name is empty
            TransportError: If the request fails
            DecodeError: If the response does not describe a session
        """
        require(bucket_uuid, "bucket_uuid")
        if not files:
            raise InvalidInputError(ErrorMessages.EMPTY_BATCH, field_name="files")
        for metadata in files:
            require(metadata.file_name, "file_name")

        request = StartUploadRequest(files=[metadata.with_default_content_type() for metadata in files])
        path = api_path("storage", "buckets", bucket_uuid, "upload")

        try:
            raw = await self.client.post(path, request.model_dump(by_alias=True))
            response = decode_response(raw, ProcessUploadResponse, "upload session")
        except ApillonError as e:
            logger.error("Failed to start upload session", bucket_uuid=bucket_uuid, error=str(e))
            e.add_context(step="negotiate")
            raise

        session = UploadSession.from_response(response)
        logger.info(
            "Upload session started",
            bucket_uuid=bucket_uuid,
            session_uuid=session.session_uuid,
            requested=len(files),
            signed_urls=len(session.signed_urls),
        )
        return session


class ContentTransferer:
    """Uploads raw file content to signed URLs."""

    def __init__(self, client: ApillonClient):
        self.client = client

    async def transfer(self, signed_url: str, content: Union[bytes, str]) -> None:
        """
        PUT `content` to `signed_url`.

        Raises:
            UploadError: If the destination answers with a non-2xx status
            TransportError: If the connection fails
        """
        try:
            status, body = await self.client.put_signed(signed_url, content)
        except ApillonError as e:
            e.add_context(step="transfer")
            raise

        if not 200 <= status < 300:
            snippet = body[:BODY_SNIPPET_LIMIT]
            logger.error("Signed URL upload rejected", status=status, body=snippet)
            raise UploadError(f"upload failed with status code {status}", status_code=status, body=snippet)

        logger.debug("Uploaded content to signed URL", size=len(content))


class SessionFinalizer:
    """Closes upload sessions."""

    def __init__(self, client: ApillonClient):
        self.client = client

    async def finalize(self, bucket_uuid: str, session_uuid: str) -> UploadResult:
        """End an upload session. Must be called at most once per session."""
        require(bucket_uuid, "bucket_uuid")
        require(session_uuid, "session_uuid")

        path = api_path("storage", "buckets", bucket_uuid, "upload", session_uuid, "end")
        try:
            raw = await self.client.post(path)
            result = decode_response(raw, UploadResult, "end session")
        except ApillonError as e:
            e.add_context(step="finalize")
            raise

        if not result.is_success:
            raise FinalizeError(
                f"ending session {session_uuid} returned status {result.status}",
                session_uuid=session_uuid,
                details={"bucket_uuid": bucket_uuid, "step": "finalize"},
            )

        logger.info("Upload session ended", bucket_uuid=bucket_uuid, session_uuid=session_uuid)
        return result


class UploadOrchestrator:
    """
    Uploads a batch of files through one upload session.

    Each call owns its own session and progress; nothing mutable is shared
    between concurrent calls except the underlying client.
    """

    def __init__(
        self,
        client: ApillonClient,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        negotiator: Optional[UploadSessionNegotiator] = None,
        transferer: Optional[ContentTransferer] = None,
        finalizer: Optional[SessionFinalizer] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            client: Shared API transport
            settle_delay: Seconds to wait after negotiation before the first transfer
            sleep: Awaitable used for the settle delay
            negotiator: Override for the session negotiator
            transferer: Override for the content transferer
            finalizer: Override for the session finalizer
        """
        if settle_delay < 0:
            raise ValueError("settle_delay cannot be negative")
        self.client = client
        self.settle_delay = settle_delay
        self._sleep = sleep
        self.negotiator = negotiator or UploadSessionNegotiator(client)
        self.transferer = transferer or ContentTransferer(client)
        self.finalizer = finalizer or SessionFinalizer(client)

    async def upload_batch(
        self,
        bucket_uuid: str,
        batch: Sequence[UploadItem],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> UploadResult:
        """
        Upload every file of `batch` to `bucket_uuid` and close the session.

        Args:
            bucket_uuid: Destination bucket
            batch: Files to upload; order decides which signed URL each file gets
            progress_callback: Optional callable receiving an UploadProgress per state change

        Returns:
            The finalize response

        Raises:
            InvalidInputError: Before any network call, if the bucket id or batch is empty
                or any file has empty content or an empty name
            InsufficientURLsError: If negotiation returned fewer URLs than files
            UploadError: If a transfer was rejected; later files are not sent
            TransportError: If the network failed during negotiation or a transfer
            DecodeError: If the negotiation response was malformed
            FinalizeError: If closing the session failed after all transfers succeeded
        """
        progress = UploadProgress(state=UploadState.VALIDATING, bucket_uuid=bucket_uuid, total_files=len(batch))
        self._emit(progress_callback, progress)

        try:
            self._validate(bucket_uuid, batch)
            session = await self._negotiate(bucket_uuid, batch, progress, progress_callback)
            await self._transfer_all(bucket_uuid, batch, session, progress, progress_callback)
            result = await self._finalize(bucket_uuid, session, progress, progress_callback)
        except ApillonError as e:
            progress.state = UploadState.FAILED
            self._emit(progress_callback, progress)
            logger.error(
                "Batch upload failed",
                bucket_uuid=bucket_uuid,
                session_uuid=progress.session_uuid,
                error=e.to_dict(),
            )
            raise

        progress.state = UploadState.DONE
        progress.file_index = None
        progress.file_name = None
        self._emit(progress_callback, progress)
        logger.info(
            "Batch upload completed",
            bucket_uuid=bucket_uuid,
            session_uuid=session.session_uuid,
            files=len(batch),
        )
        return result

    @staticmethod
    def _validate(bucket_uuid: str, batch: Sequence[UploadItem]) -> None:
        require(bucket_uuid, "bucket_uuid")
        if not batch:
            raise InvalidInputError(ErrorMessages.EMPTY_BATCH, field_name="batch")

        for index, item in enumerate(batch):
            name = item.metadata.file_name
            if not item.content or not name or not name.strip():
                raise InvalidInputError(
                    ErrorMessages.EMPTY_FILE.format(index=index, name=name),
                    field_name="batch",
                    details={"bucket_uuid": bucket_uuid, "file_index": index},
                )

    async def _negotiate(
        self,
        bucket_uuid: str,
        batch: Sequence[UploadItem],
        progress: UploadProgress,
        progress_callback: Optional[ProgressCallback],
    ) -> UploadSession:
        progress.state = UploadState.NEGOTIATING
        self._emit(progress_callback, progress)

        try:
            session = await self.negotiator.negotiate(bucket_uuid, [item.metadata for item in batch])
        except ApillonError as e:
            e.add_context(bucket_uuid=bucket_uuid)
            raise

        progress.session_uuid = session.session_uuid

        expected = len(batch)
        usable = session.signed_urls[:expected]
        if len(usable) < expected or not all(usable):
            received = sum(1 for url in session.signed_urls if url)
            raise InsufficientURLsError(
                f"not enough URLs provided for the number of files. Expected {expected} URLs, got {received}",
                expected=expected,
                received=received,
                details={"bucket_uuid": bucket_uuid, "session_uuid": session.session_uuid},
            )
        return session

    async def _transfer_all(
        self,
        bucket_uuid: str,
        batch: Sequence[UploadItem],
        session: UploadSession,
        progress: UploadProgress,
        progress_callback: Optional[ProgressCallback],
    ) -> None:
        await self._sleep(self.settle_delay)

        progress.state = UploadState.TRANSFERRING
        for index, item in enumerate(batch):
            progress.file_index = index
            progress.file_name = item.file_name
            self._emit(progress_callback, progress)

            try:
                await self.transferer.transfer(session.signed_urls[index], item.content)
            except ApillonError as e:
                logger.error(
                    "Failed to upload file",
                    bucket_uuid=bucket_uuid,
                    session_uuid=session.session_uuid,
                    file_index=index,
                    file_name=item.file_name,
                    error=str(e),
                )
                e.add_context(
                    bucket_uuid=bucket_uuid,
                    session_uuid=session.session_uuid,
                    file_index=index,
                    file_name=item.file_name,
                )
                raise

            logger.info("File uploaded", bucket_uuid=bucket_uuid, file_index=index, file_name=item.file_name)

    async def _finalize(
        self,
        bucket_uuid: str,
        session: UploadSession,
        progress: UploadProgress,
        progress_callback: Optional[ProgressCallback],
    ) -> UploadResult:
        progress.state = UploadState.FINALIZING
        progress.file_index = None
        progress.file_name = None
        self._emit(progress_callback, progress)

        try:
            return await self.finalizer.finalize(bucket_uuid, session.session_uuid)
        except FinalizeError as e:
            e.add_context(bucket_uuid=bucket_uuid)
            raise
        except ApillonError as e:
            raise FinalizeError(
                f"failed to end session for bucket {bucket_uuid}: {e.message}",
                session_uuid=session.session_uuid,
                details={"bucket_uuid": bucket_uuid, "step": "finalize"},
                original_exception=e,
            ) from e

    @staticmethod
    def _emit(progress_callback: Optional[ProgressCallback], progress: UploadProgress) -> None:
        if progress_callback:
            progress_callback(replace(progress))
