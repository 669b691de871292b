"""Mock fixtures for modelhub tests."""

import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeStreamResponse:
    """Async-iterable stand-in for a streamed Gemini response."""

    def __init__(self, texts, prompt_tokens=None, output_tokens=None, fail_after=None):
        self._texts = list(texts)
        self._fail_after = fail_after
        self.pulled = 0
        self.usage_metadata = SimpleNamespace(
            prompt_token_count=prompt_tokens,
            candidates_token_count=output_tokens,
        )

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for index, text in enumerate(self._texts):
            if self._fail_after is not None and index >= self._fail_after:
                raise RuntimeError("connection reset")
            self.pulled += 1
            yield SimpleNamespace(text=text)


@pytest.fixture
def fake_genai(monkeypatch):
    """Install a mock ``google.generativeai`` module and return it.

    ``fake_genai.GenerativeModel.return_value`` is the model object whose
    async methods are AsyncMocks.
    """
    mock_google = MagicMock()
    mock_genai = MagicMock()
    mock_genai.configure.return_value = None
    mock_genai.embed_content_async = AsyncMock()

    model = MagicMock()
    model.generate_content_async = AsyncMock()
    model.count_tokens_async = AsyncMock()
    mock_genai.GenerativeModel.return_value = model

    mock_google.generativeai = mock_genai
    monkeypatch.setitem(sys.modules, "google", mock_google)
    monkeypatch.setitem(sys.modules, "google.generativeai", mock_genai)
    return mock_genai
