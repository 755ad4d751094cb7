"""Shared fixtures for doclingo tests."""

import json
import logging
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@pytest.fixture
def config_path(temp_config_dir):
    """Path of a (not yet written) config file."""
    return temp_config_dir / "config.yaml"


@pytest.fixture
def make_config(config_path):
    """Build a Config from an explicit environment mapping."""
    from doclingo.config import Config

    def _make(environ=None, path=None):
        return Config(config_path=path or config_path, environ=environ or {})

    return _make


@pytest.fixture(autouse=True)
def clean_environment(config_path, monkeypatch):
    """Isolate every test from the user's environment and config file."""
    from doclingo import config, translator

    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "DOCLINGO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOCLINGO_CONFIG", str(config_path))

    config.reset_config()
    translator.reset_translator()
    yield
    config.reset_config()
    translator.reset_translator()

    # Undo configure_logging from CLI runs
    logger = logging.getLogger("doclingo")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def api_key(monkeypatch):
    """Configure a Gemini API key in the environment."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return "test-key"


def make_response(payload, status=200):
    """Create a fake urlopen response usable as a context manager."""
    body = payload if isinstance(payload, str) else json.dumps(payload)
    response = MagicMock()
    response.status = status
    response.read.return_value = body.encode("utf-8")
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def gemini_payload(*texts):
    """A generateContent response with one candidate per text."""
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}}
            for text in texts
        ]
    }


@pytest.fixture
def sample_markdown():
    """Sample Markdown document."""
    return "# Title\n\nBody text.\n\n```python\nprint('hi')\n```\n"


@pytest.fixture
def markdown_file(tmp_path):
    """Write the end-to-end sample document to disk."""
    path = tmp_path / "doc.md"
    path.write_text("# Title\n\nBody text.", encoding="utf-8")
    return path


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner."""
    from typer.testing import CliRunner
    return CliRunner()


@pytest.fixture
def fake_response():
    """Factory for fake urlopen responses."""
    return make_response


@pytest.fixture
def payload():
    """Factory for generateContent payloads."""
    return gemini_payload
