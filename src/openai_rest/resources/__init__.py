"""Request/response records and call functions, one module per API area."""

from openai_rest.resources.answers import AnswerReq, AnswerResp, SelectedDocument, get_answer
from openai_rest.resources.chat import (
    ChatChoice,
    ChatCompletionRequest,
    ChatMessage,
    ChatResponse,
    complete_chat,
    default_chat_completion_request,
)
from openai_rest.resources.common import (
    EngineId,
    FileId,
    FineTuneId,
    ModelId,
    OpenAIList,
    Usage,
)
from openai_rest.resources.completions import (
    CompletionChoice,
    CompletionCreate,
    CompletionResponse,
    complete_text,
    default_completion_create,
)
from openai_rest.resources.edits import (
    EditChoice,
    EditCreate,
    EditResponse,
    create_text_edit,
    default_edit_create,
)
from openai_rest.resources.embeddings import (
    EmbeddingCreate,
    EmbeddingResponse,
    EmbeddingResponseData,
    create_embedding,
)
from openai_rest.resources.engines import (
    Engine,
    EngineEmbedding,
    EngineEmbeddingCreate,
    TextCompletion,
    TextCompletionChoice,
    TextCompletionCreate,
    default_engine_text_completion_create,
    engine_complete_text,
    engine_create_embedding,
    get_engine,
    list_engines,
)
from openai_rest.resources.files import (
    ClassificationHunk,
    File,
    FileCreate,
    FileDeleteConfirmation,
    FileHunk,
    FineTuneHunk,
    SearchHunk,
    create_file,
    delete_file,
    encode_documents,
    get_file,
    list_files,
)
from openai_rest.resources.fine_tunes import (
    FineTune,
    FineTuneCreate,
    FineTuneEvent,
    FineTuneHyperParams,
    cancel_fine_tune,
    create_fine_tune,
    default_fine_tune_create,
    get_fine_tune,
    list_fine_tune_events,
    list_fine_tunes,
)
from openai_rest.resources.images import ImageCreate, ImageData, ImageResponse, create_image
from openai_rest.resources.models import Model, ModelPermission, get_model, list_models
from openai_rest.resources.search import SearchResult, SearchResultCreate, search_documents

__all__ = [
    "AnswerReq",
    "AnswerResp",
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatMessage",
    "ChatResponse",
    "ClassificationHunk",
    "CompletionChoice",
    "CompletionCreate",
    "CompletionResponse",
    "EditChoice",
    "EditCreate",
    "EditResponse",
    "EmbeddingCreate",
    "EmbeddingResponse",
    "EmbeddingResponseData",
    "Engine",
    "EngineEmbedding",
    "EngineEmbeddingCreate",
    "EngineId",
    "File",
    "FileCreate",
    "FileDeleteConfirmation",
    "FileHunk",
    "FileId",
    "FineTune",
    "FineTuneCreate",
    "FineTuneEvent",
    "FineTuneHunk",
    "FineTuneHyperParams",
    "FineTuneId",
    "ImageCreate",
    "ImageData",
    "ImageResponse",
    "Model",
    "ModelId",
    "ModelPermission",
    "OpenAIList",
    "SearchHunk",
    "SearchResult",
    "SearchResultCreate",
    "SelectedDocument",
    "TextCompletion",
    "TextCompletionChoice",
    "TextCompletionCreate",
    "Usage",
    "cancel_fine_tune",
    "complete_chat",
    "complete_text",
    "create_embedding",
    "create_file",
    "create_fine_tune",
    "create_image",
    "create_text_edit",
    "default_chat_completion_request",
    "default_completion_create",
    "default_edit_create",
    "default_engine_text_completion_create",
    "default_fine_tune_create",
    "delete_file",
    "encode_documents",
    "engine_complete_text",
    "engine_create_embedding",
    "get_answer",
    "get_engine",
    "get_file",
    "get_fine_tune",
    "get_model",
    "list_engines",
    "list_files",
    "list_fine_tune_events",
    "list_fine_tunes",
    "list_models",
    "search_documents",
]
