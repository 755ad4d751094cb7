"""Split raw command-line tokens into positionals and the model override."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import MalformedArgumentError

MODEL_FLAGS = ("--model", "-m")
VERBOSE_FLAGS = ("--verbose", "-v")
END_OF_OPTIONS = "--"


@dataclass(frozen=True)
class ParsedArguments:
    """Positional tokens in order, plus the ``--model`` value if given."""

    positional: tuple[str, ...] = ()
    model_override: str | None = None
    verbose: bool = False

    @property
    def language(self) -> str | None:
        return self.positional[0] if self.positional else None

    @property
    def file_path(self) -> str | None:
        return self.positional[1] if len(self.positional) > 1 else None

    @property
    def extra(self) -> tuple[str, ...]:
        """Positional tokens beyond language and file path."""
        return self.positional[2:]


def _looks_like_flag(token: str) -> bool:
    return token.startswith("-") and token != "-"


def _check_value(option: str, value: str) -> str:
    if not value.strip():
        raise MalformedArgumentError(option, "value must not be empty")
    return value


def parse_arguments(argv: Sequence[str]) -> ParsedArguments:
    """
    Parse the argument vector (without the program name).

    Accepts ``--model VALUE``, ``-m VALUE`` and ``--model=VALUE``; the last
    occurrence wins. ``--verbose``/``-v`` may appear anywhere. A lone ``-`` is
    positional, and every token after ``--`` is positional.

    Raises:
        MalformedArgumentError: Missing, blank or flag-like option value, or
            an unknown option
    """
    positional: list[str] = []
    model_override: str | None = None
    verbose = False

    tokens = list(argv)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if token == END_OF_OPTIONS:
            positional.extend(tokens[i:])
            break

        if token in MODEL_FLAGS:
            if i >= len(tokens):
                raise MalformedArgumentError(token, "missing value")
            value = tokens[i]
            if _looks_like_flag(value):
                raise MalformedArgumentError(token, f"expected a value but got option '{value}'")
            model_override = _check_value(token, value)
            i += 1
            continue

        if token.startswith("--model="):
            model_override = _check_value("--model", token.split("=", 1)[1])
            continue

        if token in VERBOSE_FLAGS:
            verbose = True
            continue

        if _looks_like_flag(token):
            raise MalformedArgumentError(token, "unknown option")

        positional.append(token)

    return ParsedArguments(
        positional=tuple(positional),
        model_override=model_override,
        verbose=verbose,
    )
