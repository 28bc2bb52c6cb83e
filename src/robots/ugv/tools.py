import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from .client import reply_text
from .controller import MotionOutcome, UgvController

logger = logging.getLogger(__name__)


def format_motion(outcome: MotionOutcome) -> str:
    """Render both replies of a motion tool, sentinels included."""
    return (
        f"Drive: {reply_text(outcome.drive)}\n"
        f"Telemetry: {reply_text(outcome.telemetry)}"
    )


def register(mcp: FastMCP, robot: UgvController) -> None:
    """Register UGV MCP tools on the server."""

    @mcp.tool
    async def move_forward(speed: float) -> str:
        """Drive the rover forward, then report its IMU telemetry.

        Args:
            speed: Wheel speed applied to both sides. Negative values reverse.
        """
        logger.info("move_forward(speed=%s)", speed)
        try:
            outcome = await robot.move_forward(speed)
        except ValueError as e:
            raise ToolError(str(e)) from e
        return format_motion(outcome)

    @mcp.tool
    async def move_backward(speed: float) -> str:
        """Drive the rover backward, then report its IMU telemetry.

        Args:
            speed: Wheel speed magnitude; it is negated before sending.
        """
        logger.info("move_backward(speed=%s)", speed)
        try:
            outcome = await robot.move_backward(speed)
        except ValueError as e:
            raise ToolError(str(e)) from e
        return format_motion(outcome)

    @mcp.tool
    async def stop() -> str:
        """Stop the rover and report its IMU telemetry."""
        logger.info("stop()")
        return reply_text(await robot.stop())
