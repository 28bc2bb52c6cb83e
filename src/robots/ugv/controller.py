import logging
import math
from dataclasses import dataclass

from .client import Ok, Reply, UgvClient, reply_text
from .commands import Move, stop_command
from .config import UgvConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MotionOutcome:
    """Replies from a drive command and the telemetry query that follows it."""

    drive: Reply
    telemetry: Reply

    @property
    def ok(self) -> bool:
        return isinstance(self.drive, Ok) and isinstance(self.telemetry, Ok)


class UgvController:
    """Turns motion requests into drive + telemetry round trips.

    Calls are stateless and not serialized: two concurrent tool calls may
    interleave their requests at the robot.
    """

    def __init__(self, client: UgvClient, config: UgvConfig):
        self.client = client
        self.config = config

    def check_speed(self, speed: float) -> float:
        """Return ``speed`` as a float, or raise ValueError if out of range."""
        speed = float(speed)
        if not math.isfinite(speed):
            raise ValueError(f"speed must be a finite number, got {speed!r}")
        if abs(speed) > self.config.max_speed:
            raise ValueError(
                f"speed must be between -{self.config.max_speed} and "
                f"{self.config.max_speed}, got {speed}"
            )
        return speed

    async def move(self, left_speed: float, right_speed: float) -> MotionOutcome:
        """Send a drive command, then always fetch telemetry."""
        drive = await self.client.send_command(Move(left_speed, right_speed))
        telemetry = await self.client.fetch_telemetry()
        return MotionOutcome(drive=drive, telemetry=telemetry)

    async def move_forward(self, speed: float) -> MotionOutcome:
        speed = self.check_speed(speed)
        return await self.move(speed, speed)

    async def move_backward(self, speed: float) -> MotionOutcome:
        speed = self.check_speed(speed)
        return await self.move(-speed, -speed)

    async def stop(self) -> Reply:
        """Report telemetry, optionally after an explicit zero-speed drive."""
        if self.config.explicit_stop:
            drive = await self.client.send_command(stop_command())
            logger.info("Stop command reply: %s", reply_text(drive))
        return await self.client.fetch_telemetry()
