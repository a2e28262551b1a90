"""GitHub MCP Client.

An async client that shapes GitHub commands (repository contents, code
search, issues, pull requests, security alerts, workflows) and sends them
through a single `execute` entry point to an MCP server transport.

No real transport ships yet: requests are logged and answered with a
placeholder result.
"""

__version__ = "0.1.0"

from github_mcp_client.client import GitHubMCPClient, github_mcp
from github_mcp_client.config import GitHubMCPSettings
from github_mcp_client.errors import CommandFailedError, GitHubMCPError, NotConfiguredError

__all__ = [
    "__version__",
    "CommandFailedError",
    "GitHubMCPClient",
    "GitHubMCPError",
    "GitHubMCPSettings",
    "NotConfiguredError",
    "github_mcp",
]
