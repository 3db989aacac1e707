import pytest

from apillon.core.errors import DecodeError, InvalidInputError
from apillon.models.common import ApiResponse
from apillon.utils.validators import decode_response, require, require_body


def test_require_returns_value() -> None:
    assert require("bucket-1", "bucket_uuid") == "bucket-1", "Valid identifier should be returned unchanged"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_rejects_blank(value) -> None:
    with pytest.raises(InvalidInputError, match="bucket_uuid is required") as exc_info:
        require(value, "bucket_uuid")

    assert exc_info.value.field_name == "bucket_uuid"


def test_require_body() -> None:
    assert require_body({"name": "x"}) == {"name": "x"}

    with pytest.raises(InvalidInputError, match="request body is required"):
        require_body({})


def test_decode_response() -> None:
    response = decode_response('{"status": 200, "data": {"a": 1}}', ApiResponse[dict], "test")

    assert response.data == {"a": 1}, "Envelope data should be decoded"
    assert response.is_success


@pytest.mark.parametrize("raw", ["", "not json", '{"status": 200}', "[]"])
def test_decode_response_failure_keeps_body(raw: str) -> None:
    with pytest.raises(DecodeError, match="failed to decode test response") as exc_info:
        decode_response(raw, ApiResponse[dict], "test")

    assert exc_info.value.raw_body == raw
    assert exc_info.value.original_exception is not None
