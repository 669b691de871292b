"""In-memory model registry: provider catalog, current selection and credentials."""

import logging
from typing import Any, List, Mapping, Optional, Union

from .models import (
    ModelInfo,
    ModelProvider,
    ProviderConfig,
    RegistryState,
    default_state,
)

ProviderKey = Union[ModelProvider, str]


class ModelRegistry:
    """Disposable view over a registry snapshot.

    Built fresh for each command invocation, mutated in memory, then either
    discarded or serialized back to the settings store. Mutators report
    failure through their boolean result and leave the state untouched.
    """

    def __init__(self, state: Optional[RegistryState] = None):
        self._state = state or default_state()

    # --- Queries ---

    def get_providers(self) -> List[ProviderConfig]:
        """Return every provider config in fixed order (gemini, openai, anthropic)."""
        return [self._state.providers[p] for p in ModelProvider]

    def get_provider(self, provider: ProviderKey) -> Optional[ProviderConfig]:
        """Return the config for *provider*, or None if it is not a known provider."""
        key = ModelProvider.coerce(provider)
        if key is None:
            return None
        return self._state.providers.get(key)

    def get_models_for_provider(self, provider: ProviderKey) -> List[ModelInfo]:
        """Return the models of *provider*, or an empty list if it is unknown."""
        config = self.get_provider(provider)
        return list(config.models) if config else []

    def get_all_models(self) -> List[ModelInfo]:
        """Return every model, grouped by provider in fixed provider order."""
        return [m for config in self.get_providers() for m in config.models]

    def get_current_provider(self) -> ModelProvider:
        return self._state.current_provider

    def get_current_model(self) -> str:
        return self._state.current_model

    def get_current_model_info(self) -> Optional[ModelInfo]:
        """Return the ModelInfo of the current selection.

        None only when a persisted snapshot names a model that its provider
        no longer offers; callers treat that as "no confirmed current model".
        """
        config = self.get_provider(self._state.current_provider)
        if config is None:
            return None
        return config.find_model(self._state.current_model)

    def get_provider_api_key(self, provider: ProviderKey) -> Optional[str]:
        config = self.get_provider(provider)
        return config.api_key if config else None

    def has_valid_api_key(self, provider: ProviderKey) -> bool:
        """Check whether *provider* has a key with non-whitespace content."""
        api_key = self.get_provider_api_key(provider)
        return bool(api_key) and len(api_key.strip()) > 0

    # --- Mutators ---

    def set_current_model(self, provider: ProviderKey, model_id: str) -> bool:
        """Switch the current selection to (*provider*, *model_id*).

        Both fields change together, or neither does.

        Returns:
            True if the provider is known and offers *model_id*, False otherwise
        """
        config = self.get_provider(provider)
        if config is None or config.find_model(model_id) is None:
            return False

        self._state.current_provider = config.provider
        self._state.current_model = model_id
        return True

    def set_provider_api_key(self, provider: ProviderKey, api_key: str) -> bool:
        """Store *api_key* verbatim for *provider*. False if the provider is unknown."""
        config = self.get_provider(provider)
        if config is None:
            return False
        config.api_key = api_key
        return True

    def set_provider_base_url(self, provider: ProviderKey, base_url: str) -> bool:
        """Store an endpoint override for *provider*. False if the provider is unknown."""
        config = self.get_provider(provider)
        if config is None:
            return False
        config.base_url = base_url
        return True

    # --- Snapshots ---

    def to_snapshot(self) -> dict:
        """Return an independent, JSON-compatible copy of the full state."""
        return self._state.to_dict()

    @classmethod
    def from_snapshot(
        cls,
        partial: Optional[Mapping[str, Any]],
        logger: Optional[logging.Logger] = None
    ) -> "ModelRegistry":
        """Build a registry from a possibly partial snapshot overlaid on the defaults.

        ``currentProvider`` and ``currentModel`` replace the defaults when
        present. Each provider entry under ``providers`` is overlaid field by
        field on that provider's built-in config, so a snapshot carrying only
        an ``apiKey`` keeps the built-in model list. A ``models`` list, when
        present, replaces the built-in list as a whole.

        Args:
            partial: Snapshot mapping (or None for pure defaults)
            logger: Optional logger for reporting ignored fields

        Returns:
            A registry whose provider set is always the full closed set
        """
        logger = logger or logging.getLogger(__name__)
        state = default_state()
        if not partial:
            return cls(state)

        if "currentProvider" in partial:
            provider = ModelProvider.coerce(partial["currentProvider"])
            if provider is None:
                logger.warning(
                    f"Ignoring unknown current provider in snapshot: {partial['currentProvider']!r}"
                )
            else:
                state.current_provider = provider

        if "currentModel" in partial:
            if isinstance(partial["currentModel"], str):
                state.current_model = partial["currentModel"]
            else:
                logger.warning(
                    f"Ignoring non-string current model in snapshot: {partial['currentModel']!r}"
                )

        providers = partial.get("providers")
        if isinstance(providers, Mapping):
            for key, overlay in providers.items():
                provider = ModelProvider.coerce(key)
                if provider is None:
                    logger.warning(f"Ignoring unknown provider in snapshot: {key!r}")
                    continue
                if not isinstance(overlay, Mapping):
                    logger.warning(f"Ignoring malformed config for provider '{key}'")
                    continue
                state.providers[provider] = ProviderConfig.from_dict(overlay, provider, logger)

        return cls(state)
