"""Exceptions raised by the GitHub MCP client."""

from __future__ import annotations


class GitHubMCPError(Exception):
    """Base exception for GitHub MCP client errors."""


class NotConfiguredError(GitHubMCPError):
    """Raised when the client is disabled or has no token."""

    def __init__(self) -> None:
        super().__init__("GitHub MCP is not enabled or token is missing")


class CommandFailedError(GitHubMCPError):
    """Raised when the MCP server answers a command with an error payload."""

    def __init__(self, *, method: str, code: int, message: str) -> None:
        super().__init__(f"{method} failed ({code}): {message}")
        self.method = method
        self.code = code
        self.message = message
