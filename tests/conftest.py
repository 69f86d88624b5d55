"""
conftest.py

Shared pytest fixtures for openai_rest tests.
"""

import pytest
import respx

from openai_rest.client import OpenAIClient

BASE_URL = "https://api.openai.com/v1"


@pytest.fixture
def mock_api():
    """Set up respx mock for the OpenAI API."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture
def client() -> OpenAIClient:
    """Create a test client with a dummy API key."""
    return OpenAIClient(api_key="test-api-key", max_retries=0)


@pytest.fixture
def usage_payload() -> dict:
    return {"prompt_tokens": 5, "completion_tokens": 1, "total_tokens": 6}


@pytest.fixture
def file_payload() -> dict:
    """A file object as returned by the files endpoints."""
    return {
        "id": "file-abc123",
        "object": "file",
        "bytes": 140,
        "created_at": 1613779121,
        "filename": "data.jsonl",
        "purpose": "search",
    }


@pytest.fixture
def model_payload() -> dict:
    return {
        "id": "text-davinci-003",
        "object": "model",
        "created": 1669599635,
        "owned_by": "openai-internal",
        "permission": [
            {
                "id": "modelperm-1",
                "object": "model_permission",
                "created": 1677608219,
                "allow_create_engine": False,
                "allow_sampling": True,
                "allow_logprobs": True,
                "allow_search_indices": False,
                "allow_view": True,
                "allow_fine_tuning": False,
                "organization": "*",
                "group": None,
                "is_blocking": False,
            }
        ],
    }


@pytest.fixture
def fine_tune_payload(file_payload: dict) -> dict:
    """A freshly created fine-tune job."""
    return {
        "id": "ft-AF1WoRqd3aJAHsqc9NY7iL8F",
        "object": "fine-tune",
        "model": "curie",
        "created_at": 1614807352,
        "events": [
            {
                "object": "fine-tune-event",
                "created_at": 1614807352,
                "level": "info",
                "message": "Job enqueued. Waiting for jobs ahead to complete.",
            }
        ],
        "fine_tuned_model": None,
        "hyperparams": {
            "batch_size": 4,
            "learning_rate_multiplier": 0.1,
            "n_epochs": 4,
            "prompt_loss_weight": 0.1,
        },
        "organization_id": "org-123",
        "result_files": [],
        "status": "pending",
        "validation_files": [],
        "training_files": [dict(file_payload, purpose="fine-tune")],
        "updated_at": 1614807352,
    }
