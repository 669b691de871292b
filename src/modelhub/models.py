"""Provider/model data model and the built-in model catalog."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .constants import DEFAULT_MODEL, DEFAULT_PROVIDER


class ModelProvider(str, Enum):
    """Closed set of supported providers. Declaration order is display order."""
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"

    @classmethod
    def coerce(cls, value: Any) -> Optional["ModelProvider"]:
        """Return the member for *value* (member or id string), or None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class ModelInfo:
    """A single selectable model offered by a provider.

    Attributes:
        id: Provider-scoped identifier, persisted verbatim
        name: Human-readable display name
        provider: The owning provider
        description: Optional one-line description
        context_window: Optional token capacity (advisory only)
        supports_streaming: Optional streaming flag (advisory only)
    """
    id: str
    name: str
    provider: ModelProvider
    description: Optional[str] = None
    context_window: Optional[int] = None
    supports_streaming: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted wire form, omitting unset metadata."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "provider": self.provider.value,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.context_window is not None:
            data["contextWindow"] = self.context_window
        if self.supports_streaming is not None:
            data["supportsStreaming"] = self.supports_streaming
        return data

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        provider: ModelProvider,
        logger: Optional[logging.Logger] = None
    ) -> "ModelInfo":
        """Build from the wire form. ``provider`` always comes from the owning map key.

        A ``contextWindow`` that is not a positive integer is dropped with a warning.
        """
        context_window = data.get("contextWindow")
        if context_window is not None and (
            isinstance(context_window, bool)
            or not isinstance(context_window, int)
            or context_window <= 0
        ):
            logger = logger or logging.getLogger(__name__)
            logger.warning(
                f"Ignoring invalid contextWindow for model '{data['id']}': {context_window!r}"
            )
            context_window = None

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            provider=provider,
            description=data.get("description"),
            context_window=context_window,
            supports_streaming=data.get("supportsStreaming"),
        )


@dataclass
class ProviderConfig:
    """One provider: its catalog of models plus credential and endpoint override."""
    name: str
    provider: ModelProvider
    models: List[ModelInfo] = field(default_factory=list)
    api_key: Optional[str] = None
    base_url: Optional[str] = None

    def find_model(self, model_id: str) -> Optional[ModelInfo]:
        """Return the model with *model_id*, or None."""
        return next((m for m in self.models if m.id == model_id), None)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "provider": self.provider.value,
        }
        if self.api_key is not None:
            data["apiKey"] = self.api_key
        if self.base_url is not None:
            data["baseUrl"] = self.base_url
        data["models"] = [m.to_dict() for m in self.models]
        return data

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        provider: ModelProvider,
        logger: Optional[logging.Logger] = None
    ) -> "ProviderConfig":
        """Build *provider*'s config from the wire form, starting from its built-in config.

        Fields absent from *data* keep their built-in values, so an entry
        carrying only ``apiKey`` keeps the built-in model list. A ``models``
        list replaces the built-in list as a whole; malformed entries and
        duplicate ids are skipped with a warning.
        """
        logger = logger or logging.getLogger(__name__)
        config = default_provider_config(provider)

        if isinstance(data.get("name"), str):
            config.name = data["name"]
        for wire_name, attr in (("apiKey", "api_key"), ("baseUrl", "base_url")):
            if wire_name not in data:
                continue
            value = data[wire_name]
            if value is None or isinstance(value, str):
                setattr(config, attr, value)
            else:
                logger.warning(f"Ignoring non-string {wire_name} for '{provider.value}'")

        models = data.get("models")
        if isinstance(models, list):
            parsed: List[ModelInfo] = []
            seen = set()
            for entry in models:
                if not isinstance(entry, Mapping) or "id" not in entry:
                    logger.warning(f"Skipping malformed model entry for '{provider.value}': {entry!r}")
                    continue
                model = ModelInfo.from_dict(entry, provider, logger)
                if model.id in seen:
                    logger.warning(f"Skipping duplicate model id '{model.id}' for '{provider.value}'")
                    continue
                seen.add(model.id)
                parsed.append(model)
            config.models = parsed

        return config


@dataclass
class RegistryState:
    """Full registry snapshot: current selection plus every provider's config."""
    current_provider: ModelProvider
    current_model: str
    providers: Dict[ModelProvider, ProviderConfig]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "currentProvider": self.current_provider.value,
            "currentModel": self.current_model,
            "providers": {
                p.value: self.providers[p].to_dict() for p in ModelProvider
            },
        }


# Built-in catalog: provider id -> (display name, [(id, name, description, context window)])
DEFAULT_CATALOG = {
    ModelProvider.GEMINI: ("Google Gemini", [
        ("gemini-2.5-pro", "Gemini 2.5 Pro", "Google's most capable AI model", 1_000_000),
        ("gemini-2.5-flash", "Gemini 2.5 Flash", "Faster, more efficient Gemini model", 1_000_000),
        ("gemini-1.5-pro", "Gemini 1.5 Pro", "Previous generation Gemini Pro model", 2_000_000),
    ]),
    ModelProvider.OPENAI: ("OpenAI", [
        ("gpt-4o", "GPT-4o", "OpenAI's most advanced multimodal model", 128_000),
        ("gpt-4o-mini", "GPT-4o mini", "Faster, cost-effective GPT-4o model", 128_000),
        ("gpt-4-turbo", "GPT-4 Turbo", "Enhanced GPT-4 with improved performance", 128_000),
    ]),
    ModelProvider.ANTHROPIC: ("Anthropic Claude", [
        ("claude-3-5-sonnet-20241022", "Claude 3.5 Sonnet", "Anthropic's most intelligent model", 200_000),
        ("claude-3-5-haiku-20241022", "Claude 3.5 Haiku", "Fast and capable Claude model", 200_000),
        ("claude-3-opus-20240229", "Claude 3 Opus", "Anthropic's most powerful model", 200_000),
    ]),
}


def default_provider_config(provider: ModelProvider) -> ProviderConfig:
    """Return a fresh built-in config for *provider*."""
    display_name, entries = DEFAULT_CATALOG[provider]
    return ProviderConfig(
        name=display_name,
        provider=provider,
        models=[
            ModelInfo(
                id=model_id,
                name=name,
                provider=provider,
                description=description,
                context_window=context,
                supports_streaming=True,
            )
            for model_id, name, description, context in entries
        ],
    )


def default_state() -> RegistryState:
    """Return a fresh built-in registry state (no shared mutable parts)."""
    return RegistryState(
        current_provider=ModelProvider(DEFAULT_PROVIDER),
        current_model=DEFAULT_MODEL,
        providers={p: default_provider_config(p) for p in ModelProvider},
    )
