"""Base class for provider content generators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional, Union
import logging

from ..models import ModelProvider


class UnsupportedProviderError(ValueError):
    """Raised when a generator is requested for a provider with no backend."""


class ProviderNotImplementedError(NotImplementedError):
    """Raised by stub backends whose provider integration does not exist yet."""

    def __init__(self, provider: ModelProvider, message: str):
        super().__init__(message)
        self.provider = provider


@dataclass
class MultiProviderSelection:
    """Resolved selection handed to the dispatcher at generation time.

    Attributes:
        provider: Provider to route to (enum member or raw id)
        model: Model identifier, not validated against the catalog here
        api_key: Credential for the provider, if any
        base_url: Endpoint override, if any
        proxy: Proxy URL for backends that honour one
    """
    provider: Union[ModelProvider, str]
    model: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    proxy: Optional[str] = None


@dataclass
class GenerateContentRequest:
    """A text generation request. ``model`` falls back to the selection's model."""
    prompt: str
    model: Optional[str] = None
    max_output_tokens: Optional[int] = None


@dataclass
class CountTokensRequest:
    prompt: str
    model: Optional[str] = None


@dataclass
class EmbedContentRequest:
    contents: List[str]
    model: Optional[str] = None


@dataclass
class AIResponse:
    """Container for AI model response.

    Attributes:
        content: The full text response from the model
        model: The model that generated the response
        input_tokens: Number of input tokens (if available)
        output_tokens: Number of output tokens (if available)
        error: Error message if the request failed
    """
    content: str
    model: str
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if the AI response was successful (no errors)."""
        return self.error is None


@dataclass
class StreamChunk:
    """A single packet of data from the AI stream."""
    text: Optional[str] = None
    response: Optional[AIResponse] = None

    @property
    def is_final(self) -> bool:
        """Check if this chunk contains the final AIResponse metadata."""
        return self.response is not None


@dataclass
class TokenCount:
    total_tokens: int
    model: str


@dataclass
class EmbeddingResponse:
    embeddings: List[List[float]] = field(default_factory=list)
    model: str = ""


class ContentGenerator(ABC):
    """Capability interface every provider backend implements, real or stub."""

    registry: dict[ModelProvider, type["ContentGenerator"]] = {}

    @classmethod
    def register(cls) -> None:
        """Register the backend under its provider."""
        ContentGenerator.registry[cls.get_provider()] = cls

    def __init__(self, selection: MultiProviderSelection, logger: Optional[logging.Logger] = None):
        """Initialize the generator.

        Args:
            selection: Provider, model and credentials to bind to
            logger: Optional logger instance
        """
        self.selection = selection
        self.logger = logger or logging.getLogger(__name__)

    def _model_for(self, requested: Optional[str]) -> str:
        return requested or self.selection.model

    @classmethod
    @abstractmethod
    def get_provider(cls) -> ModelProvider:
        """Return the provider this backend serves."""
        pass

    @abstractmethod
    async def generate_content(self, request: GenerateContentRequest) -> AIResponse:
        """Generate a single completed response."""
        pass

    @abstractmethod
    async def generate_content_stream(
        self, request: GenerateContentRequest
    ) -> AsyncIterator[StreamChunk]:
        """Start a streamed generation.

        Returns:
            A forward-only async iterator of text chunks followed by one final
            chunk carrying the AIResponse. Stop iterating to cancel; the
            iterator cannot be restarted.
        """
        pass

    @abstractmethod
    async def count_tokens(self, request: CountTokensRequest) -> TokenCount:
        """Count the tokens of a prospective request without generating."""
        pass

    @abstractmethod
    async def embed_content(self, request: EmbedContentRequest) -> EmbeddingResponse:
        """Return one embedding vector per input string."""
        pass
