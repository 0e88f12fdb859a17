"""Structured error handling: exception taxonomy, classification, and error report model."""

from __future__ import annotations

from enum import Enum

import httpx
from pydantic import BaseModel, ValidationError


class FetchError(Exception):
    """Base class for every error raised by the lookup client."""


class InvalidInput(FetchError, ValueError):
    """Caller-supplied arguments are structurally invalid."""


class ServiceError(FetchError):
    """The remote service answered with a non-2xx, non-404 status."""

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        message = f"SponsorBlock API returned HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DecodeError(FetchError):
    """The response body did not match the expected schema.

    ``fragment`` holds the offending part of the body (truncated) when known.
    """

    def __init__(self, detail: str, fragment: str = ""):
        self.detail = detail
        self.fragment = fragment
        message = f"Unable to decode SponsorBlock response: {detail}"
        if fragment:
            message = f"{message} (near {fragment!r})"
        super().__init__(message)

    @classmethod
    def from_validation(cls, exc: ValidationError, fragment_limit: int = 120) -> DecodeError:
        """Summarise a pydantic ValidationError by its first failing field."""
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        value = first.get("input", "")
        fragment = value if isinstance(value, str) else repr(value)
        if len(fragment) > fragment_limit:
            fragment = fragment[:fragment_limit] + "…"
        return cls(f"{location}: {first['msg']} ({exc.error_count()} error(s))", fragment=fragment)


class TransportError(FetchError):
    """Network-level failure talking to the service (connect, DNS, timeout)."""


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    INVALID_INPUT = "INVALID_INPUT"
    API_RATE_LIMITED = "API_RATE_LIMITED"
    API_SERVER_ERROR = "API_SERVER_ERROR"
    API_CLIENT_ERROR = "API_CLIENT_ERROR"
    DECODE_FAILED = "DECODE_FAILED"
    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN = "UNKNOWN"


class ErrorReport(BaseModel):
    """Serialisable summary of a failed lookup."""

    error: str
    category: str
    hint: str
    retryable: bool = False
    retry_after_seconds: int | None = None


def categorize_error(error: Exception) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint."""
    if isinstance(error, InvalidInput):
        return (
            ErrorCategory.INVALID_INPUT,
            "Invalid argument: check the video ID and accepted categories",
        )
    if isinstance(error, ServiceError):
        if error.status_code == 429:
            return (
                ErrorCategory.API_RATE_LIMITED,
                "Rate limit hit: wait before querying again",
            )
        if error.status_code >= 500:
            return (
                ErrorCategory.API_SERVER_ERROR,
                "SponsorBlock server error: the service may be degraded",
            )
        return (
            ErrorCategory.API_CLIENT_ERROR,
            "Request rejected: the client may be out of date with the API",
        )
    if isinstance(error, DecodeError):
        return (
            ErrorCategory.DECODE_FAILED,
            "Response did not match the expected schema: the API may have changed",
        )

    if isinstance(error, (TransportError, httpx.TransportError, TimeoutError)):
        cause = error.__cause__ if isinstance(error, TransportError) else error
        is_timeout = isinstance(cause, (TimeoutError, httpx.TimeoutException))
        if is_timeout or "timed out" in str(error).lower():
            return (
                ErrorCategory.NETWORK_TIMEOUT,
                "Request timed out: try again or raise the transport timeout",
            )
        return (
            ErrorCategory.NETWORK_ERROR,
            "Cannot reach SponsorBlock: check network connectivity and base URL",
        )

    return (ErrorCategory.UNKNOWN, str(error))


def make_error_report(error: Exception) -> dict:
    """Create a serialisable ErrorReport dict from an exception."""
    cat, hint = categorize_error(error)
    retryable = cat in {
        ErrorCategory.API_RATE_LIMITED,
        ErrorCategory.API_SERVER_ERROR,
        ErrorCategory.NETWORK_TIMEOUT,
        ErrorCategory.NETWORK_ERROR,
    }
    return ErrorReport(
        error=str(error),
        category=cat.value,
        hint=hint,
        retryable=retryable,
        retry_after_seconds=60 if cat == ErrorCategory.API_RATE_LIMITED else None,
    ).model_dump(mode="json")
