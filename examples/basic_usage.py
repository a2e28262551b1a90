#!/usr/bin/env python3
"""Programmatic usage example.

This demonstrates using the client directly:

* build settings explicitly instead of reading the environment
* list open issues and create a pull request
* handle a client that is not configured

Repository selection is passed as an argument.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
from typing import Sequence

from github_mcp_client import GitHubMCPClient, GitHubMCPSettings, NotConfiguredError
from github_mcp_client.logging import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List issues and open a PR (programmatic example).")
    parser.add_argument("--owner", required=True, help="Repository owner")
    parser.add_argument("--repo", required=True, help="Repository name")
    parser.add_argument("--head", default="feature", help="Branch with the changes")
    parser.add_argument("--base", default="main", help="Branch to merge into")
    return parser.parse_args(argv)


async def _run(client: GitHubMCPClient, args: argparse.Namespace) -> None:
    issues = await client.list_issues(args.owner, args.repo)
    print("Open issues:", json.dumps(issues))

    pr = await client.create_pull_request(
        args.owner,
        args.repo,
        title="Example pull request",
        head=args.head,
        base=args.base,
    )
    print("Pull request:", json.dumps(pr))


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging("INFO")

    settings = GitHubMCPSettings(
        _env_file=None,
        GITHUB_MCP_ENABLED="true",
        GITHUB_PERSONAL_ACCESS_TOKEN=os.environ.get("GITHUB_PERSONAL_ACCESS_TOKEN", ""),
    )
    client = GitHubMCPClient(settings=settings)

    try:
        asyncio.run(_run(client, args))
    except NotConfiguredError as e:
        print(f"{e}; set GITHUB_PERSONAL_ACCESS_TOKEN")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
