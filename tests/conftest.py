"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Any

import pytest

from github_mcp_client.client import GitHubMCPClient
from github_mcp_client.config import GitHubMCPSettings
from github_mcp_client.models import CommandRequest, CommandResponse, placeholder_result
from github_mcp_client.transport import CommandTransport

ENV_VARS = (
    "GITHUB_MCP_ENABLED",
    "GITHUB_TOOLSETS",
    "GITHUB_READ_ONLY",
    "GITHUB_HOST",
    "GITHUB_PERSONAL_ACCESS_TOKEN",
    "LOG_LEVEL",
    # Bare field names; these must never be read as configuration.
    "ENABLED",
    "TOOLSETS",
    "READ_ONLY",
    "HOST",
    "TOKEN",
)


class RecordingTransport(CommandTransport):
    """Transport double that records requests and answers from a per-method table.

    A table value may be a plain result, a `CommandResponse`, or an exception to raise.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.requests: list[CommandRequest] = []
        self._responses = responses or {}

    @property
    def methods(self) -> list[str]:
        return [r.method for r in self.requests]

    async def dispatch(self, request: CommandRequest) -> CommandResponse:
        self.requests.append(request)
        response = self._responses.get(request.method, placeholder_result())
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, CommandResponse):
            return response
        return CommandResponse(result=response)


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate every test from the caller's environment and any local `.env`."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@contextmanager
def _restored_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


@pytest.fixture
def restored_root_logging() -> Callable[[], AbstractContextManager[None]]:
    """Provide a context manager undoing `configure_logging` changes to the root logger."""
    return _restored_root_logging


@pytest.fixture
def settings() -> GitHubMCPSettings:
    """Provide enabled settings with a token."""
    return GitHubMCPSettings(
        _env_file=None, GITHUB_MCP_ENABLED="true", GITHUB_PERSONAL_ACCESS_TOKEN="test-token"
    )


@pytest.fixture
def disabled_settings() -> GitHubMCPSettings:
    """Provide settings with the client switched off."""
    return GitHubMCPSettings(
        _env_file=None, GITHUB_MCP_ENABLED="false", GITHUB_PERSONAL_ACCESS_TOKEN="test-token"
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(settings: GitHubMCPSettings, transport: RecordingTransport) -> GitHubMCPClient:
    return GitHubMCPClient(settings=settings, transport=transport)


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    """Provide the recording transport class for tests that script responses."""
    return RecordingTransport
