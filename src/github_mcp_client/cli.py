"""CLI entrypoint for exercising the GitHub MCP client by hand."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from github_mcp_client import __version__
from github_mcp_client.client import GitHubMCPClient
from github_mcp_client.config import GitHubMCPSettings
from github_mcp_client.errors import GitHubMCPError
from github_mcp_client.logging import configure_logging

logger = logging.getLogger(__name__)


def _parse_labels(value: str | None) -> list[str] | None:
    if value is None:
        return None
    parts = [p.strip() for p in value.split(",")]
    labels = [p for p in parts if p]
    return labels or None


def _parse_param(value: str) -> tuple[str, Any]:
    key, sep, raw = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    # JSON literals (numbers, lists, true/false) are decoded; anything else stays a string.
    try:
        return key, json.loads(raw)
    except json.JSONDecodeError:
        return key, raw


def _add_repo_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--owner", required=True, help="Repository owner")
    parser.add_argument("--repo", required=True, help="Repository name")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-mcp",
        description="Send commands to a GitHub MCP server",
    )
    parser.add_argument("--version", action="version", version=f"github-mcp-client {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("me", help="Show the authenticated user")
    subparsers.add_parser("repos", help="List repositories of the authenticated user")

    contents = subparsers.add_parser("contents", help="Get repository contents")
    _add_repo_args(contents)
    contents.add_argument("--path", default=None, help="Path inside the repository (default '/')")

    search_code = subparsers.add_parser("search-code", help="Search code")
    search_code.add_argument("query", help="Search query")
    search_code.add_argument("--owner", default=None, help="Restrict to this owner (needs --repo)")
    search_code.add_argument("--repo", default=None, help="Restrict to this repository (needs --owner)")

    for name, help_text in (("issues", "List issues"), ("pulls", "List pull requests")):
        listing = subparsers.add_parser(name, help=help_text)
        _add_repo_args(listing)
        listing.add_argument("--state", choices=("open", "closed", "all"), default="open")

    create_issue = subparsers.add_parser("create-issue", help="Create an issue")
    _add_repo_args(create_issue)
    create_issue.add_argument("--title", required=True, help="Issue title")
    create_issue.add_argument("--body", default=None, help="Issue body")
    create_issue.add_argument(
        "--labels",
        default=None,
        help="Comma-separated labels, e.g. 'bug,triage'",
    )

    create_pr = subparsers.add_parser("create-pr", help="Create a pull request")
    _add_repo_args(create_pr)
    create_pr.add_argument("--title", required=True, help="Pull request title")
    create_pr.add_argument("--head", required=True, help="Branch containing the changes")
    create_pr.add_argument("--base", required=True, help="Branch to merge into")
    create_pr.add_argument("--body", default=None, help="Pull request description")

    for name, help_text in (
        ("code-alerts", "List code scanning alerts"),
        ("dependabot-alerts", "List Dependabot alerts"),
        ("workflows", "List workflows"),
    ):
        _add_repo_args(subparsers.add_parser(name, help=help_text))

    workflow_runs = subparsers.add_parser("workflow-runs", help="List runs of a workflow")
    _add_repo_args(workflow_runs)
    workflow_runs.add_argument("--workflow-id", required=True, help="Workflow ID or file name")

    exec_cmd = subparsers.add_parser("exec", help="Execute a raw MCP command")
    exec_cmd.add_argument("method", help="MCP command name, e.g. 'get_me'")
    exec_cmd.add_argument(
        "--param",
        dest="params",
        action="append",
        type=_parse_param,
        default=[],
        help="Command parameter as key=value (repeatable)",
    )

    return parser


def _command_for(client: GitHubMCPClient, args: argparse.Namespace) -> Callable[[], Awaitable[Any]]:
    if args.command == "me":
        return client.get_current_user
    if args.command == "repos":
        return client.list_repositories
    if args.command == "contents":
        return lambda: client.get_repository_contents(args.owner, args.repo, args.path)
    if args.command == "search-code":
        return lambda: client.search_code(args.query, args.owner, args.repo)
    if args.command == "issues":
        return lambda: client.list_issues(args.owner, args.repo, args.state)
    if args.command == "pulls":
        return lambda: client.list_pull_requests(args.owner, args.repo, args.state)
    if args.command == "create-issue":
        return lambda: client.create_issue(
            args.owner, args.repo, args.title, args.body, _parse_labels(args.labels)
        )
    if args.command == "create-pr":
        return lambda: client.create_pull_request(
            args.owner, args.repo, args.title, args.head, args.base, args.body
        )
    if args.command == "code-alerts":
        return lambda: client.analyze_code_security(args.owner, args.repo)
    if args.command == "dependabot-alerts":
        return lambda: client.get_dependabot_alerts(args.owner, args.repo)
    if args.command == "workflows":
        return lambda: client.list_workflows(args.owner, args.repo)
    if args.command == "workflow-runs":
        return lambda: client.get_workflow_runs(args.owner, args.repo, args.workflow_id)
    if args.command == "exec":
        return lambda: client.execute(args.method, dict(args.params))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = GitHubMCPSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level, stream=sys.stderr)

    client = GitHubMCPClient(settings=settings)
    command = _command_for(client, args)

    try:
        result = asyncio.run(command())
    except GitHubMCPError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
