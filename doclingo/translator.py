"""Translation pipeline for doclingo."""

from __future__ import annotations

import logging
from typing import Callable

from .arguments import ParsedArguments
from .backends import GeminiBackend, ensure_api_key
from .config import Config, get_config
from .inputs import StreamSource, resolve_input
from .languages import resolve_language
from .model import resolve_endpoint
from .prompt import build_prompt

logger = logging.getLogger(__name__)

BackendFactory = Callable[..., GeminiBackend]


class Translator:
    """Runs one document through prompt building and the Gemini backend."""

    def __init__(self, config: Config, backend_factory: BackendFactory = GeminiBackend):
        self.config = config
        self._backend_factory = backend_factory

    def resolve_endpoint(self, model_override: str | None = None) -> str:
        """Resolve the endpoint URL for a run."""
        endpoint = resolve_endpoint(
            cli_override=model_override,
            env_override=self.config.model_override,
            default=self.config.default_model,
        )
        logger.debug("Resolved endpoint: %s", endpoint)
        return endpoint

    def translate_document(
        self,
        args: ParsedArguments,
        stdin: StreamSource | None = None,
    ) -> str:
        """
        Run the full pipeline for parsed command-line arguments.

        Everything that needs no I/O is validated before the input is read,
        so a bad invocation never blocks on stdin.

        Args:
            args: Parsed command-line arguments
            stdin: Stream used when no file path is given

        Returns:
            Translated text
        """
        api_key = ensure_api_key(self.config.api_key)
        language = resolve_language(args.language)
        endpoint = self.resolve_endpoint(args.model_override)

        if args.extra:
            logger.warning("Ignoring extra arguments: %s", " ".join(args.extra))

        text = resolve_input(args.file_path, stdin)
        logger.debug("Translating %d chars to %s (%s)", len(text), language.display_name, language.code)

        backend = self._backend_factory(endpoint, api_key=api_key, timeout=self.config.timeout)
        return backend.generate(build_prompt(language, text))


# Global translator instance
_translator: Translator | None = None


def get_translator() -> Translator:
    """Get the global translator instance."""
    global _translator
    if _translator is None:
        _translator = Translator(get_config())
    return _translator


def reset_translator() -> None:
    """Reset the global translator instance."""
    global _translator
    _translator = None
