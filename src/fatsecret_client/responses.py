"""Classification and typed decoding of FatSecret API responses."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import (
    APIError,
    DecodeError,
    InvalidConsumerKeyError,
    InvalidSignatureError,
)
from .models import APIErrorKind, APIFailure

ResultT = TypeVar("ResultT", bound=BaseModel)

ERROR_KINDS = {
    5: APIErrorKind.INVALID_CONSUMER_KEY,
    8: APIErrorKind.INVALID_SIGNATURE,
}


def classify(payload: Any) -> dict[str, Any] | APIFailure:
    """Check a decoded response for an error envelope.

    Args:
        payload: The decoded JSON response.

    Returns:
        The payload unchanged when it is a success envelope, otherwise an
        ``APIFailure`` describing the reported error.

    Raises:
        DecodeError: If the payload or its error envelope is not an object.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    if "error" not in payload:
        return payload

    error = payload["error"]
    if not isinstance(error, dict):
        raise DecodeError("Malformed error envelope", key="error")

    code = error.get("code")
    if isinstance(code, str) and code.isdigit():
        code = int(code)
    if not isinstance(code, int) or isinstance(code, bool):
        code = None

    return APIFailure(
        kind=ERROR_KINDS.get(code, APIErrorKind.UNKNOWN),
        code=code,
        message=str(error.get("message") or "Unknown error"),
    )


def to_exception(failure: APIFailure) -> APIError:
    """Map a classified failure to the exception raised to callers."""
    if failure.kind is APIErrorKind.INVALID_CONSUMER_KEY:
        return InvalidConsumerKeyError(failure.message, failure.code)
    if failure.kind is APIErrorKind.INVALID_SIGNATURE:
        return InvalidSignatureError(failure.message, failure.code)
    return APIError(failure.message, failure.code)


def decode(payload: dict[str, Any], result_type: type[ResultT]) -> ResultT:
    """Decode a success envelope into a typed result.

    Args:
        payload: A payload returned by :func:`classify`.
        result_type: A model declaring an ``envelope_key``.

    Returns:
        The validated result model.

    Raises:
        DecodeError: If the envelope key is missing or its value is malformed.
    """
    key = result_type.envelope_key
    body = payload.get(key)

    # An empty result set comes back as null or ""
    if (body is None and key in payload) or body == "":
        body = {}

    if not isinstance(body, dict):
        raise DecodeError(f"Response has no '{key}' object", key=key)

    try:
        return result_type.model_validate(body)
    except ValidationError as e:
        raise DecodeError(f"Malformed '{key}' payload: {e}", key=key) from e
