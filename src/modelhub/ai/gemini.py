"""Google Gemini content generator (the reference backend)."""

from typing import Any, AsyncIterator, Optional
import logging

from ..constants import DEFAULT_EMBEDDING_MODEL
from ..models import ModelProvider
from .base import (
    AIResponse,
    ContentGenerator,
    CountTokensRequest,
    EmbedContentRequest,
    EmbeddingResponse,
    GenerateContentRequest,
    MultiProviderSelection,
    StreamChunk,
    TokenCount,
)


class GeminiContentGenerator(ContentGenerator):
    """Generator backed by Google's Gemini API."""

    def __init__(self, selection: MultiProviderSelection, logger: Optional[logging.Logger] = None):
        super().__init__(selection, logger)
        self._genai = None
        self._model_cache: dict[str, Any] = {}  # Cache models by model name

    def _get_sdk(self):
        """Lazy-load and configure the Google Generative AI SDK.

        Raises:
            ImportError: If 'google-generativeai' is not installed.
        """
        if self._genai is None:
            try:
                import warnings
                # Silence the google-generativeai deprecation warning
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore", FutureWarning)
                    import google.generativeai as genai

                options = {"api_key": self.selection.api_key}
                if self.selection.base_url:
                    options["client_options"] = {"api_endpoint": self.selection.base_url}
                genai.configure(**options)
                self._genai = genai
            except (ImportError, AttributeError):
                # AttributeError can happen if google.generativeai is in sys.modules but is None
                # or otherwise broken
                raise ImportError(
                    "Google Generative AI SDK not installed. "
                    "Install with: pip install 'modelhub[gemini]'"
                )
        return self._genai

    def _get_client(self, model: str):
        """Return a cached GenerativeModel for *model*."""
        if model not in self._model_cache:
            self._model_cache[model] = self._get_sdk().GenerativeModel(model)
        return self._model_cache[model]

    @staticmethod
    def _generation_config(request: GenerateContentRequest) -> Optional[dict]:
        if request.max_output_tokens is None:
            return None
        return {"max_output_tokens": request.max_output_tokens}

    @staticmethod
    def _usage(response: Any) -> tuple[Optional[int], Optional[int]]:
        usage = getattr(response, "usage_metadata", None)
        if usage is None:
            return None, None
        return (
            getattr(usage, "prompt_token_count", None),
            getattr(usage, "candidates_token_count", None),
        )

    @classmethod
    def get_provider(cls) -> ModelProvider:
        """Return the provider: GEMINI."""
        return ModelProvider.GEMINI

    async def generate_content(self, request: GenerateContentRequest) -> AIResponse:
        """Generate a complete response.

        SDK failures are reported on ``AIResponse.error`` rather than raised.
        """
        model = self._model_for(request.model)
        client = self._get_client(model)

        try:
            response = await client.generate_content_async(
                request.prompt,
                generation_config=self._generation_config(request),
            )
            # .text raises ValueError for blocked or empty candidates
            content = response.text
            input_tokens, output_tokens = self._usage(response)
        except Exception as e:
            self.logger.error(f"Gemini API error: {e}")
            return AIResponse(content="", model=model, error=str(e))

        return AIResponse(
            content=content,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens
        )

    async def generate_content_stream(
        self, request: GenerateContentRequest
    ) -> AsyncIterator[StreamChunk]:
        """Stream a response from Gemini.

        The request is sent when the first chunk is pulled. Text chunks are
        followed by one final chunk carrying the AIResponse (or its error).
        """
        model = self._model_for(request.model)
        client = self._get_client(model)
        return self._stream(client, request, model)

    async def _stream(
        self, client: Any, request: GenerateContentRequest, model: str
    ) -> AsyncIterator[StreamChunk]:
        full_content = ""

        try:
            response = await client.generate_content_async(
                request.prompt,
                generation_config=self._generation_config(request),
                stream=True,
            )

            async for chunk in response:
                if chunk.text:
                    full_content += chunk.text
                    yield StreamChunk(text=chunk.text)

            # Gemini provides usage metadata after streaming
            input_tokens, output_tokens = self._usage(response)
            yield StreamChunk(response=AIResponse(
                content=full_content,
                model=model,
                input_tokens=input_tokens,
                output_tokens=output_tokens
            ))

        except Exception as e:
            self.logger.error(f"Gemini API error: {e}")
            yield StreamChunk(response=AIResponse(
                content=full_content,
                model=model,
                error=str(e)
            ))

    async def count_tokens(self, request: CountTokensRequest) -> TokenCount:
        model = self._model_for(request.model)
        result = await self._get_client(model).count_tokens_async(request.prompt)
        return TokenCount(total_tokens=result.total_tokens, model=model)

    async def embed_content(self, request: EmbedContentRequest) -> EmbeddingResponse:
        """Embed each input string with the Gemini embedding model."""
        model = request.model or DEFAULT_EMBEDDING_MODEL
        result = await self._get_sdk().embed_content_async(model=model, content=list(request.contents))
        embeddings = result["embedding"]
        if embeddings and not isinstance(embeddings[0], list):
            embeddings = [embeddings]
        return EmbeddingResponse(embeddings=embeddings, model=model)


GeminiContentGenerator.register()
