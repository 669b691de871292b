"""Content generation backends for modelhub."""

from .base import (
    AIResponse,
    ContentGenerator,
    CountTokensRequest,
    EmbedContentRequest,
    EmbeddingResponse,
    GenerateContentRequest,
    MultiProviderSelection,
    ProviderNotImplementedError,
    StreamChunk,
    TokenCount,
    UnsupportedProviderError,
)
from .client import (
    api_key_from_env,
    create_content_generator,
    load_env_file,
    resolve_selection,
)

# Import providers to trigger their .register() calls
from . import claude, gemini, openai_client

__all__ = [
    "AIResponse",
    "ContentGenerator",
    "CountTokensRequest",
    "EmbedContentRequest",
    "EmbeddingResponse",
    "GenerateContentRequest",
    "MultiProviderSelection",
    "ProviderNotImplementedError",
    "StreamChunk",
    "TokenCount",
    "UnsupportedProviderError",
    "api_key_from_env",
    "create_content_generator",
    "load_env_file",
    "resolve_selection",
    "claude",
    "gemini",
    "openai_client",
]
