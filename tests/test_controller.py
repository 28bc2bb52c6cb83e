"""Tests for the drive/telemetry orchestration, below the MCP layer."""

import asyncio
import math

import httpx
import pytest

from robots.ugv.client import NOT_RESPONDING, Degraded, Ok, UgvClient
from robots.ugv.config import UgvConfig
from robots.ugv.controller import UgvController

from conftest import StubRobot


def _controller(robot: StubRobot, **config) -> UgvController:
    cfg = UgvConfig(base_url="http://rover.test", **config)
    return UgvController(UgvClient(cfg, transport=robot.transport()), cfg)


def test_motion_outcome_keeps_both_replies(robot: StubRobot) -> None:
    outcome = asyncio.run(_controller(robot).move_forward(0.25))

    assert outcome.drive == Ok("OK")
    assert outcome.telemetry == Ok("IMU:0,0,0")
    assert outcome.ok


def test_degraded_outcome_is_structured() -> None:
    robot = StubRobot(error=httpx.ReadTimeout("timed out"))

    outcome = asyncio.run(_controller(robot).move_backward(0.5))

    assert outcome.drive == outcome.telemetry == Degraded(NOT_RESPONDING)
    assert not outcome.ok
    assert robot.tags == [1, 126]


def test_differential_move(robot: StubRobot) -> None:
    asyncio.run(_controller(robot).move(0.1, -0.2))

    assert robot.commands == ['{"T":1,"L":0.1,"R":-0.2}', '{"T":126}']


@pytest.mark.parametrize("speed", [math.nan, math.inf, -math.inf, 0.75])
def test_check_speed_rejects(robot: StubRobot, speed: float) -> None:
    with pytest.raises(ValueError):
        _controller(robot).check_speed(speed)


def test_check_speed_accepts_the_bound(robot: StubRobot) -> None:
    assert _controller(robot).check_speed(-0.5) == -0.5
    assert _controller(robot, max_speed=1.0).check_speed(1) == 1.0


def test_invalid_speed_sends_nothing(robot: StubRobot) -> None:
    with pytest.raises(ValueError):
        asyncio.run(_controller(robot).move_forward(math.nan))

    assert robot.commands == []


def test_stop_never_drives_by_default(robot: StubRobot) -> None:
    reply = asyncio.run(_controller(robot).stop())

    assert reply == Ok("IMU:0,0,0")
    assert robot.tags == [126]
