"""doclingo - Translate Markdown documents with Gemini."""

__version__ = "0.1.0"

from .config import (
    DEFAULT_MODEL,
    ENDPOINT_TEMPLATE,
    Config,
    get_config,
)
from .errors import (
    DoclingoError,
    UsageError,
    MissingLanguageError,
    MalformedArgumentError,
    InputReadError,
    EmptyInputError,
    MissingCredentialError,
    InvalidModelError,
    ConfigError,
    RemoteServiceError,
    RemoteConnectionError,
    EmptyTranslationError,
)
from .languages import (
    LANGUAGE_PRESETS,
    LanguageMetadata,
    resolve_language,
)
from .prompt import build_prompt
from .model import (
    resolve_model_id,
    expand_endpoint,
    resolve_endpoint,
)
from .arguments import ParsedArguments, parse_arguments
from .backends import GeminiBackend
from .translator import (
    Translator,
    get_translator,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "DEFAULT_MODEL",
    "ENDPOINT_TEMPLATE",
    "Config",
    "get_config",
    # Errors
    "DoclingoError",
    "UsageError",
    "MissingLanguageError",
    "MalformedArgumentError",
    "InputReadError",
    "EmptyInputError",
    "MissingCredentialError",
    "InvalidModelError",
    "ConfigError",
    "RemoteServiceError",
    "RemoteConnectionError",
    "EmptyTranslationError",
    # Languages
    "LANGUAGE_PRESETS",
    "LanguageMetadata",
    "resolve_language",
    # Prompt
    "build_prompt",
    # Model
    "resolve_model_id",
    "expand_endpoint",
    "resolve_endpoint",
    # Arguments
    "ParsedArguments",
    "parse_arguments",
    # Translation
    "GeminiBackend",
    "Translator",
    "get_translator",
]
