"""Error taxonomy for doclingo.

Every expected failure is a subclass of :class:`DoclingoError`. Each kind
carries the structured fields relevant to it, a human-readable ``message``
and the ``exit_code`` the CLI terminates with.
"""

from __future__ import annotations


class DoclingoError(Exception):
    """Base class for all recognized doclingo failures."""

    exit_code: int = 1
    show_usage: bool = False

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(DoclingoError):
    """The invocation is incomplete or ambiguous."""

    show_usage = True


class MissingLanguageError(UsageError):
    """No target language code was supplied."""

    def __init__(self):
        super().__init__("Missing target language code.")


class MalformedArgumentError(DoclingoError):
    """A command-line option was supplied without a valid value."""

    show_usage = True

    def __init__(self, option: str, reason: str):
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid {option}: {reason}")


class InputReadError(DoclingoError):
    """The source file or input stream could not be read."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        self.reason = reason
        suffix = f" ({reason})" if reason else ""
        super().__init__(f"Failed to read {path}{suffix}")


class EmptyInputError(DoclingoError):
    """The resolved source text is blank."""

    def __init__(self):
        super().__init__("Input is empty. Provide Markdown via a file or stdin.")


class MissingCredentialError(DoclingoError):
    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(
            f"Missing {variable}. Please set your Gemini API key before running doclingo."
        )


class InvalidModelError(DoclingoError):
    """A model override was supplied but is blank."""

    def __init__(self, origin: str):
        self.origin = origin
        super().__init__(f"Invalid model identifier from {origin}: value must not be empty.")


class ConfigError(DoclingoError):
    """The configuration file or a configuration value is invalid."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")


class RemoteServiceError(DoclingoError):
    """The remote service answered with an unusable response."""

    def __init__(self, status: int, body: str, reason: str | None = None):
        self.status = status
        self.body = body
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Gemini API error {status}{detail}: {body}")


class RemoteConnectionError(DoclingoError):
    """The remote service could not be reached or did not answer in time."""

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Cannot reach Gemini API at {endpoint}: {reason}")


class EmptyTranslationError(DoclingoError):
    def __init__(self):
        super().__init__("Gemini API returned an empty translation.")
