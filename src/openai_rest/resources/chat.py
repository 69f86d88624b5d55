"""
chat.py

PURPOSE: Chat completion (POST /chat/completions).
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import ModelId, Usage


class ChatMessage(Record):
    """A message in a conversation."""

    role: str  # "system", "user" or "assistant"
    content: str
    name: str | None = None


class ChatCompletionRequest(Record):
    model: ModelId
    messages: list[ChatMessage]
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    stop: list[str] | None = None
    max_tokens: int | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    logit_bias: dict[str, float] | None = None
    user: str | None = None


class ChatChoice(Record):
    index: int
    message: ChatMessage
    finish_reason: str | None = None


class ChatResponse(Record):
    id: str
    object: str
    created: int
    model: ModelId | None = None
    choices: list[ChatChoice]
    usage: Usage | None = None


def default_chat_completion_request(
    model: ModelId, messages: list[ChatMessage]
) -> ChatCompletionRequest:
    return ChatCompletionRequest(model=model, messages=messages)


async def complete_chat(
    client: OpenAIClient, request: ChatCompletionRequest
) -> Result[ChatResponse]:
    """Create a chat completion."""
    return await client.request("POST", "chat/completions", ChatResponse, body=request)
