"""
engines.py

PURPOSE: Engine-scoped endpoints (/engines, /engines/{id}/completions,
/engines/{id}/embeddings).

ARCHITECTURE NOTES:
The engine API predates /models: the engine id lives in the URL instead of
a "model" body field, so these requests carry no model.
"""

from typing import Any

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import EngineId, OpenAIList, require_id


class Engine(Record):
    id: EngineId
    object: str | None = None
    owner: str
    ready: bool


class TextCompletionCreate(Record):
    prompt: str
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


class TextCompletionChoice(Record):
    text: str
    index: int
    logprobs: dict[str, Any] | None = None
    finish_reason: str | None = None


class TextCompletion(Record):
    id: str
    created: int
    model: str
    choices: list[TextCompletionChoice]


class EngineEmbeddingCreate(Record):
    input: str


class EngineEmbedding(Record):
    embedding: list[float]
    index: int


def default_engine_text_completion_create(prompt: str) -> TextCompletionCreate:
    return TextCompletionCreate(prompt=prompt)


async def list_engines(client: OpenAIClient) -> Result[OpenAIList[Engine]]:
    return await client.request("GET", "engines", OpenAIList[Engine])


async def get_engine(client: OpenAIClient, engine_id: EngineId) -> Result[Engine]:
    return await client.request("GET", f"engines/{require_id(engine_id, 'engine_id')}", Engine)


async def engine_complete_text(
    client: OpenAIClient, engine_id: EngineId, request: TextCompletionCreate
) -> Result[TextCompletion]:
    """Create a completion with the given engine."""
    return await client.request(
        "POST",
        f"engines/{require_id(engine_id, 'engine_id')}/completions",
        TextCompletion,
        body=request,
    )


async def engine_create_embedding(
    client: OpenAIClient, engine_id: EngineId, request: EngineEmbeddingCreate
) -> Result[OpenAIList[EngineEmbedding]]:
    """Embed text with the given engine."""
    return await client.request(
        "POST",
        f"engines/{require_id(engine_id, 'engine_id')}/embeddings",
        OpenAIList[EngineEmbedding],
        body=request,
    )
