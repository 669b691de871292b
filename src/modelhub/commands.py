"""The ``models`` command: list, switch and configure AI models and providers."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional

from .constants import PROVIDER_ALIASES, REGISTRY_SETTINGS_KEY
from .models import ModelProvider
from .registry import ModelRegistry
from .settings import SettingScope, SettingsStore
from .utils import mask_api_key

SUBCOMMANDS = ["list", "set", "key", "current", "url"]
PROVIDER_NAMES = [p.value for p in ModelProvider]


class MessageType(str, Enum):
    INFO = "info"
    ERROR = "error"


@dataclass
class MessageResult:
    """User-facing outcome of a command invocation."""
    message_type: MessageType
    content: str

    @classmethod
    def info(cls, content: str) -> "MessageResult":
        return cls(MessageType.INFO, content)

    @classmethod
    def error(cls, content: str) -> "MessageResult":
        return cls(MessageType.ERROR, content)

    @property
    def is_error(self) -> bool:
        return self.message_type is MessageType.ERROR


@dataclass
class CommandContext:
    """Dependencies handed to command handlers."""
    settings: SettingsStore
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))


def resolve_provider_alias(name: str) -> Optional[ModelProvider]:
    """Map a user-typed provider name (e.g. 'claude') to its provider, or None."""
    provider_id = PROVIDER_ALIASES.get(name.lower())
    return ModelProvider(provider_id) if provider_id else None


def _unknown_provider(name: str) -> MessageResult:
    return MessageResult.error(
        f"Unknown provider: {name}\nAvailable providers: {', '.join(PROVIDER_NAMES)}"
    )


def load_registry(context: CommandContext) -> ModelRegistry:
    """Rebuild a registry from the persisted snapshot (or defaults)."""
    data: Any = context.settings.read(REGISTRY_SETTINGS_KEY)
    if data is not None and not isinstance(data, Mapping):
        context.logger.warning(f"Ignoring malformed '{REGISTRY_SETTINGS_KEY}' setting")
        data = None
    return ModelRegistry.from_snapshot(data, context.logger)


def save_registry(context: CommandContext, registry: ModelRegistry) -> Optional[MessageResult]:
    """Persist *registry* to user settings. Returns an error result on failure."""
    try:
        context.settings.set_value(SettingScope.USER, REGISTRY_SETTINGS_KEY, registry.to_snapshot())
    except OSError as e:
        context.logger.error(f"Could not save model settings: {e}")
        return MessageResult.error(f"Could not save model settings: {e}")
    return None


def format_models_list(registry: ModelRegistry) -> str:
    """Render every provider with its key status and models, marking the current one."""
    current_provider = registry.get_current_provider()
    current_model = registry.get_current_model()
    sections = []

    for provider in registry.get_providers():
        is_current_provider = provider.provider is current_provider
        header = f"**{provider.name}**{' (current)' if is_current_provider else ''}"
        lines = [header]
        if registry.has_valid_api_key(provider.provider):
            lines.append("✓ API key configured")
        else:
            lines.append("⚠ API key required")
        if provider.base_url:
            lines.append(f"Endpoint: {provider.base_url}")

        for model in provider.models:
            indicator = "→ " if is_current_provider and model.id == current_model else "  "
            description = f" - {model.description}" if model.description else ""
            lines.append(f"{indicator}{model.name} ({model.id}){description}")

        sections.append("\n".join(lines))

    return "\n\n".join(sections)


def _list(context: CommandContext, registry: ModelRegistry, parts: List[str]) -> MessageResult:
    return MessageResult.info(f"Available AI Models and Providers:\n\n{format_models_list(registry)}")


def _set(context: CommandContext, registry: ModelRegistry, parts: List[str]) -> MessageResult:
    if len(parts) < 2:
        return MessageResult.error(
            "Usage: /models set <provider> <model>\nExample: /models set openai gpt-4o"
        )

    provider_name = parts[1].lower()
    provider = resolve_provider_alias(provider_name)
    if provider is None:
        return _unknown_provider(provider_name)

    if len(parts) < 3:
        model_list = "\n".join(
            f"  {m.id} - {m.name}" for m in registry.get_models_for_provider(provider)
        )
        return MessageResult.info(f"Available models for {provider_name}:\n{model_list}")

    model_id = parts[2]
    if not registry.set_current_model(provider, model_id):
        return MessageResult.error(f"Invalid model: {model_id} for provider {provider_name}")

    failure = save_registry(context, registry)
    if failure:
        return failure

    model_info = registry.get_current_model_info()
    context.logger.debug(f"Current model set to {provider.value}/{model_id}")
    return MessageResult.info(f"Switched to {model_info.name} ({model_id}) from {provider_name}")


def _key(context: CommandContext, registry: ModelRegistry, parts: List[str]) -> MessageResult:
    if len(parts) < 3:
        return MessageResult.error(
            "Usage: /models key <provider> <api-key>\nExample: /models key openai sk-..."
        )

    provider_name = parts[1].lower()
    provider = resolve_provider_alias(provider_name)
    if provider is None:
        return _unknown_provider(provider_name)

    api_key = " ".join(parts[2:])
    registry.set_provider_api_key(provider, api_key)
    failure = save_registry(context, registry)
    if failure:
        return failure

    return MessageResult.info(f"API key configured for {provider_name} ({mask_api_key(api_key)})")


def _url(context: CommandContext, registry: ModelRegistry, parts: List[str]) -> MessageResult:
    if len(parts) < 3:
        return MessageResult.error(
            "Usage: /models url <provider> <base-url>\n"
            "Example: /models url openai https://api.openai.com/v1"
        )

    provider_name = parts[1].lower()
    provider = resolve_provider_alias(provider_name)
    if provider is None:
        return _unknown_provider(provider_name)

    registry.set_provider_base_url(provider, parts[2])
    failure = save_registry(context, registry)
    if failure:
        return failure

    return MessageResult.info(f"Endpoint for {provider_name} set to {parts[2]}")


def _current(context: CommandContext, registry: ModelRegistry, parts: List[str]) -> MessageResult:
    provider_config = registry.get_provider(registry.get_current_provider())
    model_info = registry.get_current_model_info()
    if model_info is None:
        return MessageResult.error(
            f"No confirmed current model: '{registry.get_current_model()}' is not offered by "
            f"{provider_config.name}.\nUse /models set <provider> <model> to choose one."
        )
    return MessageResult.info(
        f"Current model: {model_info.name} ({model_info.id}) from {provider_config.name}"
    )


_HANDLERS = {
    "list": _list,
    "ls": _list,
    "set": _set,
    "key": _key,
    "apikey": _key,
    "url": _url,
    "current": _current,
}


def models_command(context: CommandContext, args: str) -> MessageResult:
    """Run ``/models [list|set|key|url|current]`` with the raw argument string.

    Args:
        context: Settings and logger to use
        args: Everything after the command name; empty means ``list``

    Returns:
        An info or error MessageResult; validation problems never raise
    """
    parts = args.split()
    subcommand = parts[0].lower() if parts else "list"

    handler = _HANDLERS.get(subcommand)
    if handler is None:
        return MessageResult.error(
            f"Unknown subcommand: {subcommand}\nAvailable commands: {', '.join(SUBCOMMANDS)}"
        )

    registry = load_registry(context)
    return handler(context, registry, parts)


def complete_models_command(context: CommandContext, partial: str) -> List[str]:
    """Return completions for the token being typed in *partial* (prefix match).

    A trailing space starts a new, empty token, so ``"set "`` completes providers.
    """
    parts = partial.split()
    if not parts or partial[-1:].isspace():
        parts.append("")

    if len(parts) == 1:
        return [cmd for cmd in SUBCOMMANDS if cmd.startswith(parts[0].lower())]

    subcommand = parts[0].lower()

    if subcommand in ("set", "key", "apikey", "url") and len(parts) == 2:
        return [name for name in PROVIDER_NAMES if name.startswith(parts[1].lower())]

    if subcommand == "set" and len(parts) == 3:
        provider = resolve_provider_alias(parts[1])
        if provider is None:
            return []
        registry = load_registry(context)
        return [
            m.id for m in registry.get_models_for_provider(provider)
            if m.id.startswith(parts[2])
        ]

    return []
