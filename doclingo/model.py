"""Model identifier resolution and endpoint expansion."""

from __future__ import annotations

from urllib.parse import quote, urlparse

from .config import DEFAULT_MODEL, ENDPOINT_TEMPLATE, MODEL_ENV
from .errors import InvalidModelError

CLI_ORIGIN = "--model"

# The template already contains the "models/" path segment
MODEL_PREFIX = "models/"


def resolve_model_id(
    cli_override: str | None = None,
    env_override: str | None = None,
    default: str = DEFAULT_MODEL,
) -> str:
    """
    Pick the model identifier for this run.

    Precedence is CLI flag, then environment, then the default. ``None``
    means "not given" and falls through; a given but blank value is an error.

    Args:
        cli_override: Value of ``--model``
        env_override: Value of ``GEMINI_MODEL``
        default: Identifier used when neither override is given

    Returns:
        Stripped model identifier

    Raises:
        InvalidModelError: If an override is present but blank
    """
    for value, origin in ((cli_override, CLI_ORIGIN), (env_override, MODEL_ENV)):
        if value is None:
            continue
        if not value.strip():
            raise InvalidModelError(origin)
        return value.strip()

    if not default.strip():
        raise InvalidModelError("default model")
    return default.strip()


def is_endpoint_url(model_id: str) -> bool:
    """Check if a model identifier is already a full http(s) URL."""
    parsed = urlparse(model_id)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def expand_endpoint(model_id: str) -> str:
    """Turn a model identifier into the URL to POST to."""
    if is_endpoint_url(model_id):
        return model_id
    name = model_id[len(MODEL_PREFIX):] if model_id.startswith(MODEL_PREFIX) else model_id
    return ENDPOINT_TEMPLATE.format(model=quote(name, safe=""))


def resolve_endpoint(
    cli_override: str | None = None,
    env_override: str | None = None,
    default: str = DEFAULT_MODEL,
) -> str:
    """Resolve the model identifier and expand it to an endpoint URL."""
    return expand_endpoint(resolve_model_id(cli_override, env_override, default))
