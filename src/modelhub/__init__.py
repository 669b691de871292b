"""Standardize the public API for the modelhub package."""

from .commands import (
    CommandContext,
    MessageResult,
    MessageType,
    complete_models_command,
    format_models_list,
    models_command,
    resolve_provider_alias,
)
from .constants import DEFAULT_MODEL, DEFAULT_PROVIDER, PROVIDER_ALIASES, REGISTRY_SETTINGS_KEY
from .models import ModelInfo, ModelProvider, ProviderConfig, RegistryState, default_state
from .registry import ModelRegistry
from .settings import SettingScope, SettingsStore
from .utils import mask_api_key, setup_logger

__version__ = "0.1.0"

__all__ = [
    "CommandContext",
    "MessageResult",
    "MessageType",
    "complete_models_command",
    "format_models_list",
    "models_command",
    "resolve_provider_alias",
    "DEFAULT_MODEL",
    "DEFAULT_PROVIDER",
    "PROVIDER_ALIASES",
    "REGISTRY_SETTINGS_KEY",
    "ModelInfo",
    "ModelProvider",
    "ProviderConfig",
    "RegistryState",
    "default_state",
    "ModelRegistry",
    "SettingScope",
    "SettingsStore",
    "mask_api_key",
    "setup_logger",
]
