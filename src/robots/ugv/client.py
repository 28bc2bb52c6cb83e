import logging
from dataclasses import dataclass

import httpx

from .commands import RobotCommand, TelemetryRequest, encode
from .config import UgvConfig

logger = logging.getLogger(__name__)

NOT_RESPONDING = "Robot not responding"
NO_RESPONSE = "No response"


@dataclass(frozen=True)
class Ok:
    """The robot answered; ``text`` is its reply, unmodified."""

    text: str


@dataclass(frozen=True)
class Degraded:
    """No usable reply; ``reason`` is the sentinel shown to the caller."""

    reason: str


Reply = Ok | Degraded


def reply_text(reply: Reply) -> str:
    """Flatten a reply to the text reported through MCP."""
    return reply.text if isinstance(reply, Ok) else reply.reason


class UgvClient:
    """Async HTTP client for the UGV's JSON command endpoint.

    Every command is a single GET to ``/js?json=<command>``. Network and
    hardware faults are returned as ``Degraded`` replies instead of being
    raised, so one failed robot call never aborts a tool call.
    """

    def __init__(self, config: UgvConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    async def send(self, command_json: str) -> Reply:
        """Send raw command JSON and return the robot's reply."""
        logger.debug("-> %s", command_json)
        try:
            resp = await self.client.get("/js", params={"json": command_json})
        except httpx.TimeoutException as e:
            logger.warning("Timed out sending %s: %r", command_json, e)
            return Degraded(NOT_RESPONDING)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Failed to send %s: %r", command_json, e)
            return Degraded(f"Error: {str(e) or type(e).__name__}")

        if resp.is_error:
            logger.warning("Robot answered %s with HTTP %d", command_json, resp.status_code)
        if not resp.content:
            return Degraded(NO_RESPONSE)
        try:
            text = resp.content.decode(resp.charset_encoding or "utf-8")
        except (UnicodeDecodeError, LookupError):
            logger.warning("Undecodable reply to %s", command_json)
            return Degraded(NO_RESPONSE)
        logger.debug("<- %s", text)
        return Ok(text)

    async def send_command(self, command: RobotCommand) -> Reply:
        return await self.send(encode(command))

    async def fetch_telemetry(self) -> Reply:
        """Query the robot's IMU telemetry."""
        return await self.send_command(TelemetryRequest())

    async def aclose(self):
        await self.client.aclose()
