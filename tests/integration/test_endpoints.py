"""
TEST DOC: Endpoint Wrappers

WHAT: Tests for each resource call function
WHY: Each wrapper fixes a method, a path and a body; a typo in any of them
     only shows up against the live API
HOW: Use respx to mock the endpoint and check the request and decoded result

CASES:
- models, completions, chat, edits, images, embeddings
- files (multipart upload, list, get, delete)
- fine-tunes (create, list, get, cancel, events)
- engines (list, get, completions, embeddings), search, answers

EDGE CASES:
- Empty identifiers are rejected before any request
"""

import json

import pytest
from httpx import Response

from openai_rest import (
    AnswerReq,
    ChatMessage,
    EditCreate,
    EmbeddingCreate,
    EngineEmbeddingCreate,
    FileCreate,
    FineTuneHunk,
    ImageCreate,
    SearchHunk,
    SearchResultCreate,
    cancel_fine_tune,
    complete_chat,
    create_embedding,
    create_file,
    create_fine_tune,
    create_image,
    create_text_edit,
    default_chat_completion_request,
    default_engine_text_completion_create,
    default_fine_tune_create,
    delete_file,
    engine_complete_text,
    engine_create_embedding,
    get_answer,
    get_engine,
    get_file,
    get_fine_tune,
    get_model,
    list_engines,
    list_files,
    list_fine_tune_events,
    list_fine_tunes,
    list_models,
    search_documents,
)

ENGINE = {"id": "ada", "object": "engine", "owner": "openai", "ready": True}


class TestModels:
    @pytest.mark.asyncio
    async def test_list_models(self, mock_api, client, model_payload):
        mock_api.get("/models").mock(
            return_value=Response(200, json={"object": "list", "data": [model_payload]})
        )

        result = await list_models(client)

        assert len(result.data) == 1
        assert result.data[0].id == "text-davinci-003"

    @pytest.mark.asyncio
    async def test_get_model(self, mock_api, client, model_payload):
        route = mock_api.get("/models/text-davinci-003").mock(
            return_value=Response(200, json=model_payload)
        )

        model = await get_model(client, "text-davinci-003")

        assert route.called
        assert model.owned_by == "openai-internal"

    @pytest.mark.asyncio
    async def test_get_model_empty_id(self, mock_api, client):
        """An empty id never reaches the network."""
        with pytest.raises(ValueError, match="model_id"):
            await get_model(client, "")
        assert not mock_api.calls


class TestChat:
    @pytest.mark.asyncio
    async def test_complete_chat(self, mock_api, client, usage_payload):
        route = mock_api.post("/chat/completions").mock(
            return_value=Response(
                200,
                json={
                    "id": "chatcmpl-123",
                    "object": "chat.completion",
                    "created": 1679000000,
                    "model": "gpt-3.5-turbo-0301",
                    "choices": [
                        {
                            "index": 0,
                            "message": {"role": "assistant", "content": "Down."},
                            "finish_reason": "stop",
                        }
                    ],
                    "usage": usage_payload,
                },
            )
        )

        request = default_chat_completion_request(
            "gpt-3.5-turbo",
            [ChatMessage(role="user", content="What is the opposite of up? Answer in one word.")],
        )
        response = await complete_chat(client, request)

        assert response.choices[0].message.content == "Down."
        assert json.loads(route.calls.last.request.content) == {
            "model": "gpt-3.5-turbo",
            "messages": [
                {"role": "user", "content": "What is the opposite of up? Answer in one word."}
            ],
        }


class TestEdits:
    @pytest.mark.asyncio
    async def test_create_text_edit(self, mock_api, client, usage_payload):
        route = mock_api.post("/edits").mock(
            return_value=Response(
                200,
                json={
                    "object": "edit",
                    "created": 1679000000,
                    "choices": [{"text": "Foxes\n", "index": 0}],
                    "usage": usage_payload,
                },
            )
        )

        request = EditCreate(
            model="text-davinci-edit-001", input="Fox", instruction="Pluralize the word", n=1
        )
        response = await create_text_edit(client, request)

        assert response.choices[0].text == "Foxes\n"
        assert json.loads(route.calls.last.request.content)["n"] == 1


class TestImages:
    @pytest.mark.asyncio
    async def test_create_image(self, mock_api, client):
        route = mock_api.post("/images/generations").mock(
            return_value=Response(
                200,
                json={"created": 1679000000, "data": [{"url": "https://img.example/1.png"}]},
            )
        )

        response = await create_image(
            client, ImageCreate(prompt="a lighthouse", n=1, size="256x256")
        )

        assert response.data[0].url == "https://img.example/1.png"
        assert response.data[0].b64_json is None
        assert json.loads(route.calls.last.request.content) == {
            "prompt": "a lighthouse",
            "n": 1,
            "size": "256x256",
        }


class TestEmbeddings:
    @pytest.mark.asyncio
    async def test_create_embedding(self, mock_api, client):
        mock_api.post("/embeddings").mock(
            return_value=Response(
                200,
                json={
                    "object": "list",
                    "data": [{"object": "embedding", "embedding": [0.1] * 1536, "index": 0}],
                    "model": "text-embedding-ada-002-v2",
                    "usage": {"prompt_tokens": 1, "total_tokens": 1},
                },
            )
        )

        request = EmbeddingCreate(model="text-embedding-ada-002", input="Hello")
        response = await create_embedding(client, request)

        assert len(response.data[0].embedding) == 1536
        assert response.usage.completion_tokens is None


class TestFiles:
    @pytest.mark.asyncio
    async def test_create_file_multipart(self, mock_api, client, file_payload):
        """Documents are uploaded as a JSONL file part next to the purpose."""
        route = mock_api.post("/files").mock(return_value=Response(200, json=file_payload))

        request = FileCreate(
            purpose="search",
            documents=[SearchHunk(text="Test 1"), SearchHunk(text="text 2", metadata="foo")],
        )
        file = await create_file(client, request)

        assert file.id == "file-abc123"
        sent = route.calls.last.request
        assert sent.headers["Content-Type"].startswith("multipart/form-data")
        body = sent.content
        assert b'name="purpose"' in body
        assert b"search" in body
        assert b'name="file"; filename="data.jsonl"' in body
        assert b'{"text": "Test 1"}\n{"text": "text 2", "metadata": "foo"}\n' in body

    @pytest.mark.asyncio
    async def test_list_files(self, mock_api, client, file_payload):
        mock_api.get("/files").mock(
            return_value=Response(200, json={"object": "list", "data": [file_payload]})
        )

        result = await list_files(client)

        assert [f.filename for f in result.data] == ["data.jsonl"]

    @pytest.mark.asyncio
    async def test_get_file(self, mock_api, client, file_payload):
        mock_api.get("/files/file-abc123").mock(return_value=Response(200, json=file_payload))

        file = await get_file(client, "file-abc123")

        assert file.bytes == 140

    @pytest.mark.asyncio
    async def test_delete_file(self, mock_api, client):
        route = mock_api.delete("/files/file-abc123").mock(
            return_value=Response(
                200, json={"id": "file-abc123", "object": "file", "deleted": True}
            )
        )

        confirmation = await delete_file(client, "file-abc123")

        assert route.called
        assert confirmation.id == "file-abc123"
        assert confirmation.deleted is True


class TestFineTunes:
    @pytest.mark.asyncio
    async def test_create_fine_tune(self, mock_api, client, fine_tune_payload):
        route = mock_api.post("/fine-tunes").mock(
            return_value=Response(200, json=fine_tune_payload)
        )

        fine_tune = await create_fine_tune(client, default_fine_tune_create("file-abc123"))

        assert fine_tune.status == "pending"
        assert json.loads(route.calls.last.request.content) == {
            "training_file": "file-abc123",
            "model": "curie",
            "n_epochs": 4,
        }

    @pytest.mark.asyncio
    async def test_upload_then_fine_tune(self, mock_api, client, file_payload, fine_tune_payload):
        """The file id returned by an upload feeds the fine-tune request."""
        mock_api.post("/files").mock(
            return_value=Response(200, json=dict(file_payload, purpose="fine-tune"))
        )
        fine_tune_route = mock_api.post("/fine-tunes").mock(
            return_value=Response(200, json=fine_tune_payload)
        )

        upload = FileCreate(
            purpose="fine-tune",
            documents=[
                FineTuneHunk(prompt="So sad. Label:", completion="sad"),
                FineTuneHunk(prompt="So happy. Label:", completion="happy"),
            ],
        )
        file = await create_file(client, upload)
        await create_fine_tune(client, default_fine_tune_create(file.id))

        sent = json.loads(fine_tune_route.calls.last.request.content)
        assert sent["training_file"] == "file-abc123"

    @pytest.mark.asyncio
    async def test_list_fine_tunes(self, mock_api, client, fine_tune_payload):
        mock_api.get("/fine-tunes").mock(
            return_value=Response(200, json={"object": "list", "data": [fine_tune_payload]})
        )

        result = await list_fine_tunes(client)

        assert result.data[0].id == "ft-AF1WoRqd3aJAHsqc9NY7iL8F"

    @pytest.mark.asyncio
    async def test_get_fine_tune(self, mock_api, client, fine_tune_payload):
        mock_api.get("/fine-tunes/ft-AF1WoRqd3aJAHsqc9NY7iL8F").mock(
            return_value=Response(200, json=fine_tune_payload)
        )

        fine_tune = await get_fine_tune(client, "ft-AF1WoRqd3aJAHsqc9NY7iL8F")

        assert fine_tune.model == "curie"

    @pytest.mark.asyncio
    async def test_cancel_fine_tune(self, mock_api, client, fine_tune_payload):
        route = mock_api.post("/fine-tunes/ft-AF1WoRqd3aJAHsqc9NY7iL8F/cancel").mock(
            return_value=Response(200, json=dict(fine_tune_payload, status="cancelled"))
        )

        fine_tune = await cancel_fine_tune(client, "ft-AF1WoRqd3aJAHsqc9NY7iL8F")

        assert route.called
        assert fine_tune.status == "cancelled"

    @pytest.mark.asyncio
    async def test_list_fine_tune_events(self, mock_api, client, fine_tune_payload):
        mock_api.get("/fine-tunes/ft-AF1WoRqd3aJAHsqc9NY7iL8F/events").mock(
            return_value=Response(
                200, json={"object": "list", "data": fine_tune_payload["events"]}
            )
        )

        result = await list_fine_tune_events(client, "ft-AF1WoRqd3aJAHsqc9NY7iL8F")

        assert result.data[0].level == "info"


class TestEngines:
    @pytest.mark.asyncio
    async def test_list_and_get_engine(self, mock_api, client):
        mock_api.get("/engines").mock(
            return_value=Response(200, json={"object": "list", "data": [ENGINE]})
        )
        mock_api.get("/engines/ada").mock(return_value=Response(200, json=ENGINE))

        engines = await list_engines(client)
        first = engines.data[0]
        engine = await get_engine(client, first.id)

        assert engine == first

    @pytest.mark.asyncio
    async def test_engine_complete_text(self, mock_api, client):
        route = mock_api.post("/engines/ada/completions").mock(
            return_value=Response(
                200,
                json={
                    "id": "cmpl-1",
                    "object": "text_completion",
                    "created": 1679000000,
                    "model": "ada:2020-05-03",
                    "choices": [
                        {
                            "text": " on fire",
                            "index": 0,
                            "logprobs": None,
                            "finish_reason": "length",
                        }
                    ],
                },
            )
        )

        request = default_engine_text_completion_create("Why is the house ").model_copy(
            update={"max_tokens": 2}
        )
        completion = await engine_complete_text(client, "ada", request)

        assert len(completion.choices) == 1
        assert completion.choices[0].text
        assert json.loads(route.calls.last.request.content) == {
            "prompt": "Why is the house ",
            "max_tokens": 2,
        }

    @pytest.mark.asyncio
    async def test_engine_create_embedding(self, mock_api, client):
        mock_api.post("/engines/babbage-similarity/embeddings").mock(
            return_value=Response(
                200,
                json={
                    "object": "list",
                    "data": [{"object": "embedding", "embedding": [0.5] * 2048, "index": 0}],
                },
            )
        )

        result = await engine_create_embedding(
            client, "babbage-similarity", EngineEmbeddingCreate(input="This is nice")
        )

        assert len(result.data[0].embedding) == 2048

    @pytest.mark.asyncio
    async def test_engine_empty_id(self, client):
        with pytest.raises(ValueError, match="engine_id"):
            await engine_create_embedding(client, "", EngineEmbeddingCreate(input="x"))


class TestSearch:
    @pytest.mark.asyncio
    async def test_search_documents(self, mock_api, client):
        route = mock_api.post("/engines/ada/search").mock(
            return_value=Response(
                200,
                json={
                    "object": "list",
                    "data": [
                        {"object": "search_result", "document": 0, "score": 215.4},
                        {"object": "search_result", "document": 1, "score": 40.3},
                        {"object": "search_result", "document": 2, "score": 55.1},
                    ],
                },
            )
        )

        request = SearchResultCreate(
            documents=["pool", "gym", "night club"], query="swimmer", return_metadata=False
        )
        result = await search_documents(client, "ada", request)

        assert len(result.data) == 3
        assert result.data[0].metadata is None
        assert json.loads(route.calls.last.request.content) == {
            "documents": ["pool", "gym", "night club"],
            "query": "swimmer",
            "return_metadata": False,
        }

    @pytest.mark.asyncio
    async def test_search_file_with_metadata(self, mock_api, client):
        mock_api.post("/engines/ada/search").mock(
            return_value=Response(
                200,
                json={
                    "object": "list",
                    "data": [{"document": 0, "score": 300.0, "metadata": "pool"}],
                },
            )
        )

        request = SearchResultCreate(file="file-abc123", query="pool", return_metadata=True)
        result = await search_documents(client, "ada", request)

        assert result.data[0].document == 0
        assert result.data[0].metadata == "pool"


class TestAnswers:
    @pytest.mark.asyncio
    async def test_get_answer(self, mock_api, client):
        route = mock_api.post("/answers").mock(
            return_value=Response(
                200,
                json={
                    "answers": ["San Francisco is in California."],
                    "completion": "cmpl-2",
                    "model": "davinci:2020-05-03",
                    "object": "answer",
                    "search_model": "babbage",
                    "selected_documents": [
                        {
                            "document": 0,
                            "text": "Cities in California: San Francisco, Los Angeles",
                        }
                    ],
                },
            )
        )

        request = AnswerReq(
            file="file-abc123",
            question="Where is San Francisco?",
            search_model="babbage",
            model="davinci",
            examples_context="Good programming languages: Haskell, PureScript",
            examples=[["Is PHP a good programming language?", "No, sorry."]],
            return_metadata=True,
        )
        response = await get_answer(client, request)

        assert "California" in response.answers[0]
        assert response.selected_documents[0].document == 0
        sent = json.loads(route.calls.last.request.content)
        assert sent["search_model"] == "babbage"
        assert sent["examples_context"].startswith("Good programming")
        assert "documents" not in sent
