"""
Input validation and response decoding helpers.

Identifiers and request bodies are checked before any network call so that
invalid input never reaches the API, and JSON responses are decoded into
typed models without silently defaulting missing fields.
"""

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from apillon.core.errors import DecodeError, InvalidInputError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ErrorMessages:
    """Standardized error messages."""

    FIELD_REQUIRED = "{field} is required"
    BODY_REQUIRED = "request body is required"
    EMPTY_BATCH = "upload batch must contain at least one file"
    EMPTY_FILE = "file content or metadata is empty for file {index} ({name!r})"
    DECODE_FAILED = "failed to decode {what} response"


def require(value: Optional[str], field: str) -> str:
    """Return `value`, raising InvalidInputError when it is empty or blank."""
    if value is None or not str(value).strip():
        raise InvalidInputError(ErrorMessages.FIELD_REQUIRED.format(field=field), field_name=field, field_value=value)
    return value


def require_body(body: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Validate a JSON request body is a non-empty mapping."""
    if not body:
        raise InvalidInputError(ErrorMessages.BODY_REQUIRED, field_name="body", field_value=body)
    return body


def decode_response(raw: str, model: Type[ModelT], what: str) -> ModelT:
    """
    Decode a raw JSON response into `model`.

    Args:
        raw: Response body text
        model: Pydantic model describing the expected shape
        what: Short operation name used in the error message

    Raises:
        DecodeError: If the body is not valid JSON or does not match the model.
            The raw body is carried on the error for diagnosis.
    """
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        raise DecodeError(
            f"{ErrorMessages.DECODE_FAILED.format(what=what)}: {e.error_count()} validation error(s)",
            raw_body=raw,
            original_exception=e,
        ) from e
