"""
Error hierarchy for the Apillon SDK.

Every failure raised by the SDK derives from ApillonError so callers can catch
one base class, inspect a structured `details` mapping, and serialize it with
`to_dict()` for logging.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Tuple


class ApillonError(Exception):
    """Base exception for all SDK errors."""

    # Context keys that are also mirrored onto instance attributes
    context_attributes: Tuple[str, ...] = ()

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = datetime.utcnow()

    def add_context(self, **context: Any) -> "ApillonError":
        """Attach call-site context (bucket, step, file index) and return self."""
        for key, value in context.items():
            if value is None:
                continue
            self.details[key] = value
            if key in self.context_attributes:
                setattr(self, key, value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
            "original_exception": str(self.original_exception) if self.original_exception else None,
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class InvalidInputError(ApillonError):
    """Caller supplied an empty batch, empty content, or an empty identifier."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.field_value = field_value
        self.add_context(field_name=field_name)


class TransportError(ApillonError):
    """Network failure or error HTTP status from the API."""

    context_attributes = ("step",)

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        step: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body
        self.step = step
        self.add_context(status_code=status_code, step=step)


class DecodeError(ApillonError):
    """Response body did not match the expected JSON shape."""

    def __init__(self, message: str, raw_body: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.raw_body = raw_body
        self.details["raw_body"] = raw_body


class InsufficientURLsError(ApillonError):
    """Negotiation returned fewer signed URLs than files requested."""

    def __init__(self, message: str, expected: int, received: int, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.received = received
        self.add_context(expected=expected, received=received)


class UploadError(ApillonError):
    """A signed-URL transfer returned a non-2xx status."""

    context_attributes = ("file_index", "file_name")

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        file_index: Optional[int] = None,
        file_name: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body
        self.file_index = file_index
        self.file_name = file_name
        self.add_context(status_code=status_code, file_index=file_index, file_name=file_name)


class FinalizeError(ApillonError):
    """Finalizing an upload session failed after every file was transferred."""

    def __init__(self, message: str, session_uuid: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.session_uuid = session_uuid
        self.add_context(session_uuid=session_uuid)


__all__ = [
    "ApillonError",
    "InvalidInputError",
    "TransportError",
    "DecodeError",
    "InsufficientURLsError",
    "UploadError",
    "FinalizeError",
]
