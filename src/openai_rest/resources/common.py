"""
common.py

PURPOSE: Identifier types and records shared by several endpoints.
DEPENDENCIES: pydantic, codec
"""

from typing import Annotated, Generic, TypeVar

from pydantic import StringConstraints

from openai_rest.codec import Record

# Opaque identifiers: any non-empty text, compared as strings
ModelId = Annotated[str, StringConstraints(min_length=1)]
EngineId = Annotated[str, StringConstraints(min_length=1)]
FileId = Annotated[str, StringConstraints(min_length=1)]
FineTuneId = Annotated[str, StringConstraints(min_length=1)]

T = TypeVar("T")


class OpenAIList(Record, Generic[T]):
    """The {"object": "list", "data": [...]} envelope of list endpoints."""

    object: str | None = None
    data: list[T]


class Usage(Record):
    """Token accounting attached to generation responses."""

    prompt_tokens: int
    completion_tokens: int | None = None
    total_tokens: int


def require_id(value: str, kind: str) -> str:
    """
    Reject empty identifiers before they turn into a malformed URL.

    Raises:
        ValueError: If value is empty.
    """
    if not value:
        raise ValueError(f"{kind} must not be empty")
    return value
