"""GitHub MCP command client.

Every convenience method shapes its arguments into a parameter mapping and
forwards to `GitHubMCPClient.execute`, the single dispatch point.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from github_mcp_client.config import GitHubMCPSettings
from github_mcp_client.errors import CommandFailedError, NotConfiguredError
from github_mcp_client.models import CommandRequest, IssueState
from github_mcp_client.transport import CommandTransport, MockTransport

logger = logging.getLogger(__name__)


def _login_of(user: Any) -> str | None:
    if isinstance(user, Mapping):
        login = user.get("login")
    else:
        login = getattr(user, "login", None)
    return login if isinstance(login, str) else None


class GitHubMCPClient:
    """Async client for the commands exposed by a GitHub MCP server."""

    def __init__(
        self,
        settings: GitHubMCPSettings | None = None,
        transport: CommandTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration snapshot. Read from the environment when omitted.
            transport: Command transport. Defaults to `MockTransport`.
        """
        self._settings = settings if settings is not None else GitHubMCPSettings()
        self._transport = transport if transport is not None else MockTransport()

    @property
    def settings(self) -> GitHubMCPSettings:
        return self._settings

    async def execute(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Execute a single MCP command.

        Args:
            method: MCP command name, e.g. 'list_issues'.
            params: Command parameters.

        Returns:
            The command's result value.

        Raises:
            NotConfiguredError: If the client is disabled or the token is missing.
            CommandFailedError: If the server answers with an error payload.
        """
        if not self._settings.is_configured:
            raise NotConfiguredError()

        request = CommandRequest(method=method, params=dict(params or {}))

        try:
            response = await self._transport.dispatch(request)
            if not response.ok:
                raise CommandFailedError(
                    method=method,
                    code=response.error.code,
                    message=response.error.message,
                )
        except Exception:
            logger.error("GitHub MCP error", extra={"mcp_method": method}, exc_info=True)
            raise

        return response.result

    # Repositories

    async def get_repository_contents(self, owner: str, repo: str, path: str | None = None) -> Any:
        return await self.execute(
            "get_file_contents",
            {"owner": owner, "repo": repo, "path": path or "/"},
        )

    async def search_code(self, query: str, owner: str | None = None, repo: str | None = None) -> Any:
        """Search code, scoped to `owner/repo` when both are given."""

        search_query = f"{query} repo:{owner}/{repo}" if owner and repo else query
        return await self.execute("search_code", {"q": search_query})

    async def list_repositories(self) -> Any:
        """List repositories owned by the authenticated user.

        Resolves the current user first; if that fails the search is never issued.
        """
        user = await self.get_current_user()
        login = _login_of(user)
        if login is None:
            logger.warning("get_me returned no login; searching repositories without one")
            login = ""
        return await self.execute("search_repositories", {"query": f"user:{login}"})

    async def get_current_user(self) -> Any:
        return await self.execute("get_me")

    # Issues

    async def list_issues(self, owner: str, repo: str, state: IssueState = "open") -> Any:
        return await self.execute("list_issues", {"owner": owner, "repo": repo, "state": state})

    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: str | None = None,
        labels: list[str] | None = None,
    ) -> Any:
        return await self.execute(
            "create_issue",
            {"owner": owner, "repo": repo, "title": title, "body": body, "labels": labels},
        )

    # Pull requests

    async def list_pull_requests(self, owner: str, repo: str, state: IssueState = "open") -> Any:
        return await self.execute(
            "list_pull_requests",
            {"owner": owner, "repo": repo, "state": state},
        )

    async def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
    ) -> Any:
        return await self.execute(
            "create_pull_request",
            {
                "owner": owner,
                "repo": repo,
                "title": title,
                "head": head,
                "base": base,
                "body": body,
            },
        )

    # Security alerts

    async def analyze_code_security(self, owner: str, repo: str) -> Any:
        """List code scanning alerts for a repository."""

        return await self.execute("list_code_scanning_alerts", {"owner": owner, "repo": repo})

    async def get_dependabot_alerts(self, owner: str, repo: str) -> Any:
        return await self.execute("list_dependabot_alerts", {"owner": owner, "repo": repo})

    # Workflows

    async def list_workflows(self, owner: str, repo: str) -> Any:
        return await self.execute("list_workflows", {"owner": owner, "repo": repo})

    async def get_workflow_runs(self, owner: str, repo: str, workflow_id: str) -> Any:
        return await self.execute(
            "list_workflow_runs",
            {"owner": owner, "repo": repo, "workflow_id": workflow_id},
        )


github_mcp = GitHubMCPClient()
