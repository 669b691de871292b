"""Shared pytest fixtures for modelhub tests."""

from fixtures.mock_fixtures import fake_genai  # noqa: F401
from fixtures.settings_fixtures import (  # noqa: F401
    command_context,
    settings_store,
    stored_snapshot,
)
