"""Request/response shapes exchanged with the MCP server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

IssueState = Literal["open", "closed", "all"]


@dataclass(frozen=True, slots=True)
class CommandRequest:
    """A named MCP command plus its parameters."""

    method: str
    params: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"method": self.method, "params": dict(self.params)}


@dataclass(frozen=True, slots=True)
class CommandErrorPayload:
    code: int
    message: str


@dataclass(frozen=True, slots=True)
class CommandResponse:
    """Result or error returned for a command."""

    result: Any = None
    error: CommandErrorPayload | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def placeholder_result() -> dict[str, Any]:
    """Fixed result returned while no real MCP transport is wired in."""

    return {"success": True, "data": []}
