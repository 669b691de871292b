"""Placeholder backend for providers that have no integration yet."""

from typing import AsyncIterator, NoReturn

from ..constants import REFERENCE_PROVIDER_LABEL
from .base import (
    AIResponse,
    ContentGenerator,
    CountTokensRequest,
    EmbedContentRequest,
    EmbeddingResponse,
    GenerateContentRequest,
    ProviderNotImplementedError,
    StreamChunk,
    TokenCount,
)


class StubContentGenerator(ContentGenerator):
    """Constructs normally so the provider can be selected and persisted,
    but every capability call fails with ProviderNotImplementedError.

    Subclasses only set ``display_name`` and implement ``get_provider``.
    """

    display_name = ""

    def _unavailable(self) -> NoReturn:
        provider = self.get_provider()
        message = (
            f"{self.display_name} provider ('{provider.value}') is not yet implemented. "
            f"Please use {REFERENCE_PROVIDER_LABEL} provider for now."
        )
        self.logger.debug(message)
        raise ProviderNotImplementedError(provider, message)

    async def generate_content(self, request: GenerateContentRequest) -> AIResponse:
        self._unavailable()

    async def generate_content_stream(
        self, request: GenerateContentRequest
    ) -> AsyncIterator[StreamChunk]:
        self._unavailable()

    async def count_tokens(self, request: CountTokensRequest) -> TokenCount:
        self._unavailable()

    async def embed_content(self, request: EmbedContentRequest) -> EmbeddingResponse:
        self._unavailable()
