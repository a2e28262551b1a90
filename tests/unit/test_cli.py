"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

import argparse
import json
from collections.abc import Callable
from contextlib import AbstractContextManager

import pytest

from github_mcp_client.cli import _parse_labels, _parse_param, build_parser, main

RestoredLogging = Callable[[], AbstractContextManager[None]]


@pytest.fixture
def configured_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_MCP_ENABLED", "true")
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "test-token")


@pytest.mark.usefixtures("configured_env")
def test_main_prints_result_as_json(
    restored_root_logging: RestoredLogging, capsys: pytest.CaptureFixture[str]
) -> None:
    with restored_root_logging():
        code = main(["issues", "--owner", "octo-org", "--repo", "octo-repo"])

    captured = capsys.readouterr()
    assert code == 0
    assert json.loads(captured.out) == {"success": True, "data": []}
    # Request logging goes to stderr so stdout stays parseable.
    log_lines = [json.loads(line) for line in captured.err.splitlines()]
    request_log = next(
        line for line in log_lines if line["message"].startswith("MCP request")
    )
    assert request_log["extra"]["mcp_method"] == "list_issues"
    assert request_log["extra"]["mcp_params"] == {
        "owner": "octo-org",
        "repo": "octo-repo",
        "state": "open",
    }


@pytest.mark.usefixtures("configured_env")
def test_main_exec_sends_raw_params(
    restored_root_logging: RestoredLogging, capsys: pytest.CaptureFixture[str]
) -> None:
    with restored_root_logging():
        code = main(["exec", "list_workflow_runs", "--param", "owner=a", "--param", "per_page=5"])

    captured = capsys.readouterr()
    assert code == 0
    request_log = next(
        json.loads(line) for line in captured.err.splitlines() if "MCP request" in line
    )
    assert request_log["extra"]["mcp_method"] == "list_workflow_runs"
    assert request_log["extra"]["mcp_params"] == {"owner": "a", "per_page": 5}


def test_main_reports_not_configured(
    restored_root_logging: RestoredLogging, capsys: pytest.CaptureFixture[str]
) -> None:
    with restored_root_logging():
        code = main(["me"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "GitHub MCP is not enabled or token is missing" in captured.err


def test_parser_defaults() -> None:
    parser = build_parser()

    contents = parser.parse_args(["contents", "--owner", "a", "--repo", "b"])
    assert contents.path is None

    pulls = parser.parse_args(["pulls", "--owner", "a", "--repo", "b"])
    assert pulls.state == "open"

    search = parser.parse_args(["search-code", "foo"])
    assert (search.query, search.owner, search.repo) == ("foo", None, None)


def test_parser_rejects_unknown_state() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["issues", "--owner", "a", "--repo", "b", "--state", "merged"])


def test_parse_labels() -> None:
    assert _parse_labels(None) is None
    assert _parse_labels(" bug, ,triage ") == ["bug", "triage"]
    assert _parse_labels(",") is None


def test_parse_param() -> None:
    assert _parse_param("owner=octo-org") == ("owner", "octo-org")
    assert _parse_param("per_page=30") == ("per_page", 30)
    assert _parse_param("labels=[\"bug\"]") == ("labels", ["bug"])
    assert _parse_param("q=a=b") == ("q", "a=b")

    with pytest.raises(argparse.ArgumentTypeError):
        _parse_param("novalue")
