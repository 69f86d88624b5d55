"""
answers.py

PURPOSE: Question answering over documents (POST /answers).
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import EngineId, FileId


class AnswerReq(Record):
    """
    Request body for an answer.

    Documents come either inline (documents) or from an uploaded file with
    purpose "answers"/"search" (file). examples is a list of
    [question, answer] pairs that show the expected style.
    """

    documents: list[str] | None = None
    file: FileId | None = None
    question: str
    search_model: EngineId
    model: EngineId
    examples_context: str
    examples: list[list[str]]
    return_metadata: bool


class SelectedDocument(Record):
    document: int
    text: str


class AnswerResp(Record):
    answers: list[str]
    completion: str | None = None
    model: str | None = None
    object: str | None = None
    search_model: str | None = None
    selected_documents: list[SelectedDocument] | None = None


async def get_answer(client: OpenAIClient, request: AnswerReq) -> Result[AnswerResp]:
    """Answer a question using the given documents."""
    return await client.request("POST", "answers", AnswerResp, body=request)
