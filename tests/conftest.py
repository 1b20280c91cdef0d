"""
Pytest configuration to ensure the project root is on sys.path for imports.
"""

import logging
import sys
from pathlib import Path

import pytest
import structlog

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def webhook_secret() -> str:
    """Shared webhook secret used across tests."""
    return "mysecret"


@pytest.fixture
def zen_body() -> bytes:
    """Raw body of a minimal ping-like delivery."""
    return b'{"zen":"hello"}'


@pytest.fixture
def zen_signature() -> str:
    """HMAC-SHA256 of `zen_body` under `webhook_secret`."""
    return "sha256=68842ba165fd11ef26e95c41997ce09cc7d423bf357fa647eacb07d32c9b3de0"


@pytest.fixture
def valid_event_payload() -> dict[str, object]:
    """Valid pull request webhook payload."""
    return {
        "action": "opened",
        "number": 42,
        "sender": {"login": "octocat", "id": 1, "type": "User"},
        "repository": {
            "id": 123456,
            "name": "hello-world",
            "full_name": "octocat/hello-world",
            "private": False,
            "html_url": "https://github.com/octocat/hello-world",
        },
        "pull_request": {"number": 42, "title": "Test PR"},
    }


@pytest.fixture
def restore_logging():
    """Put the root logger and structlog back after a test that calls setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
