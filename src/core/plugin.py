from abc import ABC, abstractmethod
from dataclasses import dataclass
from fastmcp import FastMCP


@dataclass
class RobotMetadata:
    """Descriptive information a robot plugin publishes to MCP clients."""

    name: str
    description: str
    robot_type: str
    url_prefix: str = ""        # URL path segment on the HTTP gateway (e.g. "ugv" → /ugv/mcp)
    instructions: str = ""      # MCP server instructions; defaults to the description


class RobotPlugin(ABC):
    """Base class for all robot plugins.

    A plugin is responsible for:
    1. Declaring its metadata (name, type, instructions)
    2. Registering its MCP tools on a FastMCP server instance
    3. Listing its tool names for the gateway index
    """

    @abstractmethod
    def metadata(self) -> RobotMetadata:
        """Return the robot's metadata."""
        ...

    @abstractmethod
    def register_tools(self, mcp: FastMCP) -> None:
        """Register this robot's MCP tools on the server."""
        ...

    @abstractmethod
    def tool_names(self) -> list[str]:
        """Return the list of MCP tool names this plugin registers.

        Must match the function names passed to @mcp.tool exactly.
        """
        ...
