"""
completions.py

PURPOSE: Text completion (POST /completions).
"""

from typing import Any

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import ModelId, Usage


class CompletionCreate(Record):
    """Request body for a text completion."""

    model: ModelId
    prompt: str | None = None
    suffix: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    logprobs: int | None = None
    echo: bool | None = None
    stop: list[str] | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    best_of: int | None = None
    logit_bias: dict[str, float] | None = None
    user: str | None = None


class CompletionChoice(Record):
    text: str
    index: int
    logprobs: dict[str, Any] | None = None
    finish_reason: str | None = None


class CompletionResponse(Record):
    id: str
    object: str
    created: int
    model: ModelId
    choices: list[CompletionChoice]
    usage: Usage | None = None


def default_completion_create(model: ModelId, prompt: str) -> CompletionCreate:
    """A completion request with every tuning parameter left to the server."""
    return CompletionCreate(model=model, prompt=prompt)


async def complete_text(
    client: OpenAIClient, request: CompletionCreate
) -> Result[CompletionResponse]:
    """Create a text completion."""
    return await client.request("POST", "completions", CompletionResponse, body=request)
