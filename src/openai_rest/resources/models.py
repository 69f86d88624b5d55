"""
models.py

PURPOSE: Model listing and lookup (GET /models, GET /models/{id}).
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import ModelId, OpenAIList, require_id


class ModelPermission(Record):
    id: str
    object: str
    created: int
    allow_create_engine: bool
    allow_sampling: bool
    allow_logprobs: bool
    allow_search_indices: bool
    allow_view: bool
    allow_fine_tuning: bool
    organization: str
    group: str | None = None
    is_blocking: bool


class Model(Record):
    """A model the account can use."""

    id: ModelId
    object: str
    owned_by: str
    created: int | None = None
    permission: list[ModelPermission] | None = None


async def list_models(client: OpenAIClient) -> Result[OpenAIList[Model]]:
    """List the models available to the account."""
    return await client.request("GET", "models", OpenAIList[Model])


async def get_model(client: OpenAIClient, model_id: ModelId) -> Result[Model]:
    """Retrieve one model by id."""
    return await client.request("GET", f"models/{require_id(model_id, 'model_id')}", Model)
