"""Source document input: a named file or a piped byte stream."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from .errors import EmptyInputError, InputReadError, UsageError

STDIN_NAME = "<stdin>"


@dataclass(frozen=True)
class PathSource:
    """Read the document from a file."""

    path: str


@dataclass(frozen=True)
class StreamSource:
    """
    Read the document from a byte stream.

    ``interactive`` records whether the stream is a terminal. Reading from
    an interactive stream is refused instead of blocking on the user.
    """

    stream: BinaryIO
    interactive: bool
    name: str = STDIN_NAME


InputSource = Union[PathSource, StreamSource]


def stdin_source() -> StreamSource:
    """Describe the process's standard input as a StreamSource."""
    stream = getattr(sys.stdin, "buffer", sys.stdin)
    return StreamSource(stream=stream, interactive=sys.stdin.isatty())


def read_source(source: InputSource) -> str:
    """
    Read the raw text from a source.

    Raises:
        UsageError: The source is an interactive terminal
        InputReadError: The file or stream cannot be read or is not UTF-8
    """
    if isinstance(source, PathSource):
        try:
            return Path(source.path).read_bytes().decode("utf-8")
        except OSError as e:
            raise InputReadError(source.path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise InputReadError(source.path, f"not valid UTF-8: {e.reason}") from e

    if source.interactive:
        raise UsageError("No input file given and stdin is a terminal.")

    try:
        data = source.stream.read()
    except OSError as e:
        raise InputReadError(source.name, e.strerror or str(e)) from e

    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputReadError(source.name, f"not valid UTF-8: {e.reason}") from e


def ensure_content(text: str) -> str:
    """Reject blank input; return the text untouched otherwise."""
    if not text.strip():
        raise EmptyInputError()
    return text


def resolve_input(file_path: str | None, stdin: StreamSource | None = None) -> str:
    """
    Resolve the document text for a run.

    Args:
        file_path: Path given on the command line, or None for stdin
        stdin: Stream to use when no path is given (defaults to sys.stdin)

    Returns:
        Non-blank document text
    """
    source: InputSource = PathSource(file_path) if file_path else (stdin or stdin_source())
    return ensure_content(read_source(source))
