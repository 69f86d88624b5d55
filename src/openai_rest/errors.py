"""
errors.py

PURPOSE: Error values returned by every API call.
DEPENDENCIES: codec (for the provider's error payload)

ARCHITECTURE NOTES:
Calls never raise for network or server failures. They return either the
decoded response record or one of two error values:
- ClientError: the request did not produce a usable response
  (connection failure, timeout, undecodable body)
- ApiError: the provider answered with a non-success status and its own
  error object

Callers who prefer exceptions can wrap a result in ensure_success().
"""

from dataclasses import dataclass
from typing import Literal, TypeVar, Union

from openai_rest.codec import Record

T = TypeVar("T")


@dataclass(frozen=True)
class ClientError:
    """The request failed before a provider error object could be decoded."""

    kind: Literal["transport", "decode"]
    message: str
    status_code: int | None = None
    body: str | None = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.kind} error (HTTP {self.status_code}): {self.message}"
        return f"{self.kind} error: {self.message}"


@dataclass(frozen=True)
class ApiError:
    """An error object returned by the provider alongside a non-success status."""

    status_code: int
    message: str
    type: str | None = None
    param: str | None = None
    code: str | None = None

    def __str__(self) -> str:
        kind = self.type or "api_error"
        return f"{kind} (HTTP {self.status_code}): {self.message}"


Result = Union[T, ClientError, ApiError]


class ErrorDetail(Record):
    """The body of the provider's {"error": {...}} envelope."""

    message: str
    type: str | None = None
    param: str | None = None
    code: str | int | None = None


class ErrorEnvelope(Record):
    error: ErrorDetail

    def to_api_error(self, status_code: int) -> ApiError:
        code = self.error.code
        return ApiError(
            status_code=status_code,
            message=self.error.message,
            type=self.error.type,
            param=self.error.param,
            code=str(code) if code is not None else None,
        )


class RequestFailedError(Exception):
    """Raised by ensure_success() for an error result."""

    def __init__(self, error: ClientError | ApiError):
        super().__init__(str(error))
        self.error = error


def is_error(result: object) -> bool:
    """Return True if the result is a ClientError or ApiError."""
    return isinstance(result, (ClientError, ApiError))


def ensure_success(result: Result[T]) -> T:
    """
    Unwrap a successful result.

    Raises:
        RequestFailedError: If the result is an error value.
    """
    if isinstance(result, (ClientError, ApiError)):
        raise RequestFailedError(result)
    return result
