"""
search.py

PURPOSE: Semantic document search (POST /engines/{id}/search).

ARCHITECTURE NOTES:
Documents come either inline (documents) or from an uploaded search file
(file). Results refer to documents by their position in that set.
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import EngineId, FileId, OpenAIList, require_id


class SearchResultCreate(Record):
    documents: list[str] | None = None
    file: FileId | None = None
    query: str
    return_metadata: bool


class SearchResult(Record):
    document: int
    score: float
    metadata: str | None = None


async def search_documents(
    client: OpenAIClient, engine_id: EngineId, request: SearchResultCreate
) -> Result[OpenAIList[SearchResult]]:
    """Rank documents against a query."""
    return await client.request(
        "POST",
        f"engines/{require_id(engine_id, 'engine_id')}/search",
        OpenAIList[SearchResult],
        body=request,
    )
