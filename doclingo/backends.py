"""Gemini generateContent backend."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import API_KEY_ENV, DEFAULT_TIMEOUT
from .errors import (
    EmptyTranslationError,
    MissingCredentialError,
    RemoteConnectionError,
    RemoteServiceError,
)

logger = logging.getLogger(__name__)


def ensure_api_key(api_key: str | None) -> str:
    """Return the stripped API key or raise MissingCredentialError."""
    key = (api_key or "").strip()
    if not key:
        raise MissingCredentialError(API_KEY_ENV)
    return key


def build_request_body(prompt: str) -> dict:
    """Wrap the prompt as a single user message."""
    return {
        "contents": [
            {"role": "user", "parts": [{"text": prompt}]},
        ],
    }


def extract_text(data: Any) -> str:
    """
    Concatenate the text of every part of every candidate.

    Candidates and parts are taken in the order returned. Entries without
    a string ``text``, and fields of the wrong type, are skipped.
    """
    if not isinstance(data, dict):
        return ""

    candidates = data.get("candidates")
    if not isinstance(candidates, list):
        return ""

    texts: list[str] = []
    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        content = candidate.get("content")
        if not isinstance(content, dict):
            continue
        parts = content.get("parts")
        if not isinstance(parts, list):
            continue
        for part in parts:
            if isinstance(part, dict) and isinstance(part.get("text"), str):
                texts.append(part["text"])
    return "".join(texts).strip()


class GeminiBackend:
    """
    Client for the Gemini ``generateContent`` REST API.

    One instance performs plain request/response exchanges against a single
    resolved endpoint. There is no streaming, retry or caching.

    Usage:
        backend = GeminiBackend(endpoint, api_key=key)
        text = backend.generate(prompt)
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str | None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Gemini backend.

        Args:
            endpoint: Fully qualified generateContent URL
            api_key: Gemini API key; checked here, before any request
            timeout: Seconds to wait for the response

        Raises:
            MissingCredentialError: If the API key is missing or blank
        """
        self.api_key = ensure_api_key(api_key)
        self.endpoint = endpoint
        self.timeout = timeout

    def _build_request(self, prompt: str) -> Request:
        req = Request(
            self.endpoint,
            data=json.dumps(build_request_body(prompt)).encode("utf-8"),
            method="POST",
        )
        req.add_header("Content-Type", "application/json")
        req.add_header("Accept", "application/json")
        req.add_header("x-goog-api-key", self.api_key)
        return req

    def generate(self, prompt: str) -> str:
        """
        Send the prompt and return the generated text.

        Args:
            prompt: Prompt sent unmodified as the sole message content

        Returns:
            Generated text, trimmed

        Raises:
            RemoteServiceError: Non-success status or a body that is not JSON
            RemoteConnectionError: The server could not be reached in time
            EmptyTranslationError: The response contains no text
        """
        req = self._build_request(prompt)
        logger.debug("POST %s (%d prompt chars, timeout %ss)", self.endpoint, len(prompt), self.timeout)

        try:
            with urlopen(req, timeout=self.timeout) as response:
                status = response.status
                body = response.read().decode("utf-8", errors="replace")
        except HTTPError as e:
            error_body = e.read().decode("utf-8", errors="replace") if e.fp else ""
            raise RemoteServiceError(e.code, error_body) from e
        except URLError as e:
            raise RemoteConnectionError(self.endpoint, str(e.reason)) from e
        except OSError as e:
            # Includes socket timeouts raised while reading the body
            raise RemoteConnectionError(self.endpoint, str(e) or type(e).__name__) from e

        if not 200 <= status < 300:
            raise RemoteServiceError(status, body)

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise RemoteServiceError(status, body, reason="response is not valid JSON") from e

        text = extract_text(data)
        logger.debug("Received %d response chars, %d translated chars", len(body), len(text))
        if not text:
            raise EmptyTranslationError()
        return text
