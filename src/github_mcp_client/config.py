"""Configuration for the GitHub MCP client.

Configuration is read once, when the client is constructed, from:
- environment variables
- and a local `.env` file (if present)

The snapshot is frozen; nothing in the client mutates it afterwards.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_TOOLSETS: tuple[str, ...] = ("repos", "issues", "pull_requests", "context")


class GitHubMCPSettings(BaseSettings):
    """Settings for the GitHub MCP client.

    Environment variables:
    - GITHUB_MCP_ENABLED            ("true" enables the client; anything else disables it)
    - GITHUB_TOOLSETS               (optional, comma-separated)
    - GITHUB_READ_ONLY              (optional, "true" or anything else)
    - GITHUB_HOST                   (optional)
    - GITHUB_PERSONAL_ACCESS_TOKEN  (optional here, required to execute commands)
    - LOG_LEVEL                     (optional)

    Notes:
        A missing token is not a configuration error. The client refuses to
        execute commands instead, see `is_configured`.

        Explicit values are passed under the environment variable names, e.g.
        `GitHubMCPSettings(_env_file=None, GITHUB_MCP_ENABLED="true", GITHUB_PERSONAL_ACCESS_TOKEN="...")`.
        Bare field names (`TOKEN`, `ENABLED`, ...) are never read.
    """

    enabled: bool = Field(
        default=False,
        validation_alias="GITHUB_MCP_ENABLED",
        description="Whether GitHub MCP commands may be executed",
    )
    toolsets: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_TOOLSETS),
        validation_alias="GITHUB_TOOLSETS",
        description="Toolset names exposed by the MCP server, in declared order",
    )
    read_only: bool = Field(
        default=False,
        validation_alias="GITHUB_READ_ONLY",
        description="Whether the MCP server runs in read-only mode",
    )
    host: str | None = Field(
        default=None,
        validation_alias="GITHUB_HOST",
        description="GitHub host override (useful for GitHub Enterprise)",
    )
    token: str = Field(
        default="",
        validation_alias="GITHUB_PERSONAL_ACCESS_TOKEN",
        description="GitHub personal access token passed to the MCP server",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("enabled", "read_only", mode="before")
    @classmethod
    def _exact_true(cls, value: Any) -> Any:
        # Only the literal "true" counts; "True", "1" and "yes" do not.
        if isinstance(value, str):
            return value == "true"
        return value

    @field_validator("toolsets", mode="before")
    @classmethod
    def _split_toolsets(cls, value: Any) -> Any:
        # A set but empty variable yields [""]; only an unset one gets the default.
        if isinstance(value, str):
            return value.split(",")
        return value

    @property
    def is_configured(self) -> bool:
        """True when commands may be executed (enabled and a token is present)."""

        return self.enabled and bool(self.token)
