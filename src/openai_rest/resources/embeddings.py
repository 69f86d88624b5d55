"""
embeddings.py

PURPOSE: Text embeddings (POST /embeddings).
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import ModelId, Usage


class EmbeddingCreate(Record):
    model: ModelId
    input: str | list[str]
    user: str | None = None


class EmbeddingResponseData(Record):
    object: str
    embedding: list[float]
    index: int


class EmbeddingResponse(Record):
    object: str
    data: list[EmbeddingResponseData]
    model: ModelId
    usage: Usage


async def create_embedding(
    client: OpenAIClient, request: EmbeddingCreate
) -> Result[EmbeddingResponse]:
    """Embed one or more input texts."""
    return await client.request("POST", "embeddings", EmbeddingResponse, body=request)
