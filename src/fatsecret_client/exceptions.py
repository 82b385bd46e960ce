"""Custom exceptions for the FatSecret client."""

from .models import APIErrorKind


class FatSecretError(Exception):
    """Base exception for FatSecret errors."""

    pass


class TransportError(FatSecretError):
    """Raised when the request could not be delivered or got a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class APIError(FatSecretError):
    """Raised when the FatSecret API returns an error envelope."""

    def __init__(
        self,
        message: str,
        error_code: int | None = None,
        kind: APIErrorKind = APIErrorKind.UNKNOWN,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.kind = kind


class InvalidConsumerKeyError(APIError):
    """Raised when the consumer key is missing or not recognized (code 5)."""

    def __init__(self, message: str, error_code: int | None = 5):
        super().__init__(message, error_code, APIErrorKind.INVALID_CONSUMER_KEY)


class InvalidSignatureError(APIError):
    """Raised when the server rejects the OAuth signature (code 8)."""

    def __init__(self, message: str, error_code: int | None = 8):
        super().__init__(message, error_code, APIErrorKind.INVALID_SIGNATURE)


class DecodeError(FatSecretError):
    """Raised when a response cannot be decoded into the expected shape."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class ParameterConflictError(FatSecretError, ValueError):
    """Raised when a call parameter collides with a protocol parameter."""

    pass


class ConfigurationError(FatSecretError):
    """Raised when configuration is invalid or missing."""

    pass
