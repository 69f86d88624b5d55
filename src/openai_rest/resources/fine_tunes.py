"""
fine_tunes.py

PURPOSE: Fine-tuning jobs (/fine-tunes).
"""

from openai_rest.client import OpenAIClient
from openai_rest.codec import Record
from openai_rest.errors import Result
from openai_rest.resources.common import FileId, FineTuneId, OpenAIList, require_id
from openai_rest.resources.files import File


class FineTuneCreate(Record):
    """Request body for starting a fine-tuning job."""

    training_file: FileId
    validation_file: FileId | None = None
    model: str | None = None
    batch_size: int | None = None
    n_epochs: int | None = None
    learning_rate_multiplier: float | None = None
    prompt_loss_weight: float | None = None
    compute_classification_metrics: bool | None = None
    classification_n_classes: int | None = None
    classification_positive_class: str | None = None
    classification_betas: list[float] | None = None
    suffix: str | None = None


class FineTuneEvent(Record):
    object: str
    created_at: int
    level: str
    message: str


class FineTuneHyperParams(Record):
    batch_size: int | None = None
    learning_rate_multiplier: float | None = None
    n_epochs: int | None = None
    prompt_loss_weight: float | None = None


class FineTune(Record):
    """A fine-tuning job and its current state."""

    id: FineTuneId
    object: str
    model: str
    created_at: int
    events: list[FineTuneEvent] | None = None
    fine_tuned_model: str | None = None
    hyperparams: FineTuneHyperParams | None = None
    organization_id: str | None = None
    result_files: list[File] | None = None
    status: str
    validation_files: list[File] | None = None
    training_files: list[File] | None = None
    updated_at: int | None = None


def default_fine_tune_create(training_file: FileId) -> FineTuneCreate:
    """Fine-tune curie for 4 epochs on the given file."""
    return FineTuneCreate(training_file=training_file, model="curie", n_epochs=4)


async def create_fine_tune(client: OpenAIClient, request: FineTuneCreate) -> Result[FineTune]:
    """Start a fine-tuning job."""
    return await client.request("POST", "fine-tunes", FineTune, body=request)


async def list_fine_tunes(client: OpenAIClient) -> Result[OpenAIList[FineTune]]:
    return await client.request("GET", "fine-tunes", OpenAIList[FineTune])


async def get_fine_tune(client: OpenAIClient, fine_tune_id: FineTuneId) -> Result[FineTune]:
    return await client.request(
        "GET", f"fine-tunes/{require_id(fine_tune_id, 'fine_tune_id')}", FineTune
    )


async def cancel_fine_tune(client: OpenAIClient, fine_tune_id: FineTuneId) -> Result[FineTune]:
    """Cancel a running job; the response carries the updated status."""
    return await client.request(
        "POST", f"fine-tunes/{require_id(fine_tune_id, 'fine_tune_id')}/cancel", FineTune
    )


async def list_fine_tune_events(
    client: OpenAIClient, fine_tune_id: FineTuneId
) -> Result[OpenAIList[FineTuneEvent]]:
    return await client.request(
        "GET",
        f"fine-tunes/{require_id(fine_tune_id, 'fine_tune_id')}/events",
        OpenAIList[FineTuneEvent],
    )
