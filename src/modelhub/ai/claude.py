"""Anthropic Claude content generator (not yet backed by the Anthropic API)."""

from ..models import ModelProvider
from .stub import StubContentGenerator


class AnthropicContentGenerator(StubContentGenerator):
    """Generator for Claude models. Selectable, but every call is rejected for now."""

    display_name = "Anthropic"

    @classmethod
    def get_provider(cls) -> ModelProvider:
        """Return the provider: ANTHROPIC."""
        return ModelProvider.ANTHROPIC


AnthropicContentGenerator.register()
