"""Constants for the modelhub application."""

# Settings store
SETTINGS_DIRNAME = ".modelhub"
SETTINGS_FILENAME = "settings.json"
SETTINGS_HOME_ENV_VAR = "MODELHUB_HOME"
REGISTRY_SETTINGS_KEY = "modelRegistry"

# Built-in selection used when nothing has been persisted yet
DEFAULT_PROVIDER = "gemini"
DEFAULT_MODEL = "gemini-2.5-pro"
REFERENCE_PROVIDER_LABEL = "Gemini"

# Command-line aliases accepted for each provider id
PROVIDER_ALIASES = {
    "gemini": "gemini",
    "google": "gemini",
    "openai": "openai",
    "gpt": "openai",
    "anthropic": "anthropic",
    "claude": "anthropic",
}

# Environment fallbacks for credentials, checked in order
ENV_VAR_MAP = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "openai": ("OPENAI_API_KEY",),
    "anthropic": ("ANTHROPIC_API_KEY",),
}

DEFAULT_EMBEDDING_MODEL = "models/text-embedding-004"
