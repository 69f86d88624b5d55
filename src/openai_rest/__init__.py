"""
openai-rest - Typed async client for the OpenAI REST API.

This package provides:
- Immutable request/response records with snake_case wire encoding
- One thin async function per endpoint
- Error results (ClientError, ApiError) instead of raised exceptions
"""

from openai_rest.client import OpenAIClient
from openai_rest.errors import (
    ApiError,
    ClientError,
    RequestFailedError,
    Result,
    ensure_success,
    is_error,
)
from openai_rest.resources import *  # noqa: F403
from openai_rest.resources import __all__ as _resources_all

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ClientError",
    "OpenAIClient",
    "RequestFailedError",
    "Result",
    "ensure_success",
    "is_error",
    *_resources_all,
]
