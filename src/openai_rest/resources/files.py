"""
files.py

PURPOSE: File upload and management (/files).
DEPENDENCIES: httpx multipart encoding (through OpenAIClient)

ARCHITECTURE NOTES:
An upload is built from typed document hunks rather than a path on disk.
The hunks are serialised as JSON Lines and sent as multipart/form-data
with two parts: "purpose" and "file" (filename data.jsonl). Which hunk
type fits depends on the purpose:
- "search" / "answers": SearchHunk
- "classifications": ClassificationHunk
- "fine-tune": FineTuneHunk
"""

import json
from typing import Annotated

from pydantic import Field

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import FileId, OpenAIList, require_id

UPLOAD_FILENAME = "data.jsonl"


class SearchHunk(Record):
    text: str
    metadata: str | None = None


class ClassificationHunk(Record):
    text: str
    label: str


class FineTuneHunk(Record):
    prompt: str
    completion: str


# Tried in order: a {text, label} object would also decode as a SearchHunk
FileHunk = Annotated[
    ClassificationHunk | FineTuneHunk | SearchHunk, Field(union_mode="left_to_right")
]


class FileCreate(Record):
    purpose: str
    documents: list[FileHunk]


class File(Record):
    """An uploaded file."""

    id: FileId
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: str | None = None


class FileDeleteConfirmation(Record):
    id: FileId
    object: str | None = None
    deleted: bool | None = None


def encode_documents(documents: list[FileHunk]) -> bytes:
    """Serialise hunks as JSON Lines, one object per line."""
    lines = [json.dumps(hunk.to_wire(), ensure_ascii=False) for hunk in documents]
    return ("\n".join(lines) + "\n").encode("utf-8")


async def create_file(client: OpenAIClient, request: FileCreate) -> Result[File]:
    """Upload documents as a new file."""
    content = encode_documents(request.documents)
    return await client.request(
        "POST",
        "files",
        File,
        data={"purpose": request.purpose},
        files={"file": (UPLOAD_FILENAME, content, "application/jsonl")},
    )


async def list_files(client: OpenAIClient) -> Result[OpenAIList[File]]:
    return await client.request("GET", "files", OpenAIList[File])


async def get_file(client: OpenAIClient, file_id: FileId) -> Result[File]:
    return await client.request("GET", f"files/{require_id(file_id, 'file_id')}", File)


async def delete_file(client: OpenAIClient, file_id: FileId) -> Result[FileDeleteConfirmation]:
    """Delete an uploaded file."""
    return await client.request(
        "DELETE", f"files/{require_id(file_id, 'file_id')}", FileDeleteConfirmation
    )
