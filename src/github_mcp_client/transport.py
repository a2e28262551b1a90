"""Transports that carry commands to the GitHub MCP server."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from github_mcp_client.models import CommandRequest, CommandResponse, placeholder_result

logger = logging.getLogger(__name__)


class CommandTransport(ABC):
    """Abstract base class for command transports.

    This interface keeps the client's domain methods unchanged while the
    transport is swapped (test double, mock, real MCP connection).
    """

    @abstractmethod
    async def dispatch(self, request: CommandRequest) -> CommandResponse:
        """Send a command and wait for its response.

        Args:
            request: The command to send.

        Returns:
            The server's response.
        """
        pass


class MockTransport(CommandTransport):
    """Transport that performs no I/O.

    Every request is logged and answered with the placeholder result,
    whatever the method or parameters.
    """

    async def dispatch(self, request: CommandRequest) -> CommandResponse:
        logger.info(
            "MCP request: %s",
            request.to_dict(),
            extra={"mcp_method": request.method, "mcp_params": dict(request.params)},
        )
        return CommandResponse(result=placeholder_result())
