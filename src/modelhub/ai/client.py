"""Content generator dispatch and selection resolution."""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from ..constants import ENV_VAR_MAP
from ..models import ModelProvider
from ..registry import ModelRegistry
from .base import ContentGenerator, MultiProviderSelection, UnsupportedProviderError


def load_env_file(start_path: Path) -> bool:
    """Load a .env file from *start_path* into the environment if it exists.

    Existing environment variables are never overridden.

    Returns:
        True if a .env file was found and loaded
    """
    env_file = start_path / ".env"
    if not env_file.exists():
        return False
    return load_dotenv(env_file, override=False)


def api_key_from_env(
    provider: ModelProvider,
    environ: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Return the first non-blank credential found in *provider*'s env variables."""
    environ = os.environ if environ is None else environ
    for env_var in ENV_VAR_MAP.get(provider.value, ()):
        value = environ.get(env_var)
        if value and value.strip():
            return value
    return None


def resolve_selection(
    registry: ModelRegistry,
    proxy: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None
) -> MultiProviderSelection:
    """Turn the registry's current selection into a dispatcher input.

    A stored key wins; a blank or missing key falls back to the provider's
    environment variable.
    """
    provider = registry.get_current_provider()
    if registry.has_valid_api_key(provider):
        api_key = registry.get_provider_api_key(provider)
    else:
        api_key = api_key_from_env(provider, environ)

    config = registry.get_provider(provider)
    return MultiProviderSelection(
        provider=provider,
        model=registry.get_current_model(),
        api_key=api_key,
        base_url=config.base_url if config else None,
        proxy=proxy,
    )


def create_content_generator(
    selection: MultiProviderSelection,
    logger: Optional[logging.Logger] = None
) -> ContentGenerator:
    """Build the backend registered for ``selection.provider``.

    Raises:
        UnsupportedProviderError: If the provider is outside the supported set
            or has no registered backend. Raised here, before any call is made.
    """
    logger = logger or logging.getLogger(__name__)

    provider = ModelProvider.coerce(selection.provider)
    generator_cls = ContentGenerator.registry.get(provider) if provider is not None else None
    if generator_cls is None:
        raise UnsupportedProviderError(f"Unsupported provider: {selection.provider}")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Creating {generator_cls.__name__} for model '{selection.model}'")

    return generator_cls(replace(selection, provider=provider), logger)
