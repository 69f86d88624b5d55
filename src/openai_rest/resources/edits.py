"""
edits.py

PURPOSE: Instruction-driven text edits (POST /edits).
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import ModelId, Usage


class EditCreate(Record):
    model: ModelId
    input: str | None = None
    instruction: str
    n: int | None = None
    temperature: float | None = None
    top_p: float | None = None


class EditChoice(Record):
    text: str
    index: int


class EditResponse(Record):
    object: str
    created: int
    choices: list[EditChoice]
    usage: Usage | None = None


def default_edit_create(model: ModelId, input: str, instruction: str) -> EditCreate:
    return EditCreate(model=model, input=input, instruction=instruction)


async def create_text_edit(client: OpenAIClient, request: EditCreate) -> Result[EditResponse]:
    """Apply an instruction to the input text."""
    return await client.request("POST", "edits", EditResponse, body=request)
