"""Request encoding and response-envelope decoding.

Every non-204 response is a JSON envelope: ``{"data": ...}`` on success,
``{"error": "..."}`` on failure.
"""

import json
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from astrohub.domain.catalog.model.payload import UploadFile
from astrohub.domain.shared.error import DecodeError, HttpStatusError, NotFoundError

T = TypeVar("T")

NO_CONTENT = 204
UPLOAD_FIELD = "file"


@lru_cache(maxsize=64)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _source(response: httpx.Response) -> str:
    try:
        return response.request.url.path
    except RuntimeError:  # Response built without a request
        return "backend"


# =============================================================================
# Encode
# =============================================================================


def encode_json(payload: BaseModel | dict[str, Any]) -> dict[str, Any]:
    """Serialize a payload to a JSON-ready dict using wire field names."""
    to_body = getattr(payload, "to_body", None)
    if to_body is not None:
        return to_body()
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    return dict(payload)


def encode_upload(file: UploadFile) -> dict[str, tuple[str, bytes, str]]:
    """Build an httpx ``files`` mapping carrying exactly one binary part."""
    return {UPLOAD_FIELD: (file.name, file.content, file.media_type)}


# =============================================================================
# Decode
# =============================================================================


def error_message(response: httpx.Response) -> str:
    """Human-readable message for a failed response.

    Uses the envelope's ``error`` field, falling back to the status code.
    """
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error.strip():
            return error
    return f"HTTP error! status: {response.status_code}"


def raise_for_status(response: httpx.Response) -> None:
    """Raise a normalized HttpStatusError for non-2xx responses."""
    if response.is_success:
        return
    message = error_message(response)
    if response.status_code == httpx.codes.NOT_FOUND:
        raise NotFoundError(message, status_code=response.status_code)
    raise HttpStatusError(message, status_code=response.status_code)


def decode(response: httpx.Response, type_: type[T] | Any) -> T | None:
    """Unwrap and validate the ``data`` field of a response envelope.

    Returns None for 204 No Content without looking at the body.

    Raises:
        HttpStatusError: Non-2xx status.
        DecodeError: Body is not JSON, has no ``data`` field, or ``data``
            does not match ``type_``.
    """
    raise_for_status(response)
    if response.status_code == NO_CONTENT:
        return None

    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(
            f"Response from {_source(response)} is not valid JSON",
            body=response.text,
        ) from e

    if not isinstance(body, dict) or "data" not in body:
        raise DecodeError(
            f"Response from {_source(response)} has no 'data' envelope",
            body=response.text,
        )

    try:
        return _adapter(type_).validate_python(body["data"])
    except PydanticValidationError as e:
        raise DecodeError(
            f"Unexpected response shape from {_source(response)}: "
            f"{e.error_count()} validation error(s)",
            body=response.text,
        ) from e
