"""OpenAI content generator (not yet backed by the OpenAI API)."""

from ..models import ModelProvider
from .stub import StubContentGenerator


class OpenAIContentGenerator(StubContentGenerator):
    """Generator for OpenAI models. Selectable, but every call is rejected for now."""

    display_name = "OpenAI"

    @classmethod
    def get_provider(cls) -> ModelProvider:
        """Return the provider: OPENAI."""
        return ModelProvider.OPENAI


OpenAIContentGenerator.register()
