"""JSON command encoder for the UGV's ESP32 controller.

The firmware accepts one compact JSON object per request, discriminated by
the ``T`` field:

    drive:      {"T":1,"L":<left speed>,"R":<right speed>}
    telemetry:  {"T":126}
"""

import json
import math
from dataclasses import dataclass

DRIVE_TAG = 1
TELEMETRY_TAG = 126


@dataclass(frozen=True)
class Move:
    """Differential drive command with independent left/right wheel speeds."""

    left_speed: float
    right_speed: float

    def __post_init__(self):
        for name in ("left_speed", "right_speed"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
            # -0.0 + 0.0 == 0.0, keeps "-0.0" off the wire
            object.__setattr__(self, name, value + 0.0)


@dataclass(frozen=True)
class TelemetryRequest:
    """Ask the robot to report its IMU data."""


RobotCommand = Move | TelemetryRequest


def stop_command() -> Move:
    return Move(0.0, 0.0)


def encode(command: RobotCommand) -> str:
    """Serialize a command to the compact wire JSON."""
    if isinstance(command, Move):
        payload = {"T": DRIVE_TAG, "L": command.left_speed, "R": command.right_speed}
    elif isinstance(command, TelemetryRequest):
        payload = {"T": TELEMETRY_TAG}
    else:
        raise TypeError(f"Unsupported command: {command!r}")
    return json.dumps(payload, separators=(",", ":"), allow_nan=False)


def decode(text: str) -> RobotCommand:
    """Parse wire JSON back into a command.

    Raises ValueError on malformed JSON, an unknown tag, or missing speeds.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed command JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError("Command must be a JSON object")

    tag = payload.get("T")
    if tag == DRIVE_TAG:
        try:
            return Move(payload["L"], payload["R"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Drive command needs numeric L and R: {text}") from e
    if tag == TELEMETRY_TAG:
        return TelemetryRequest()
    raise ValueError(f"Unknown command tag: {tag!r}")
