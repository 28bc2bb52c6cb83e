import json

import httpx
import pytest
from fastmcp import FastMCP

from robots.ugv.client import UgvClient
from robots.ugv.config import UgvConfig
from robots.ugv.controller import UgvController
from robots.ugv.tools import register


class StubRobot:
    """Stands in for the rover's /js endpoint and records every command."""

    def __init__(self, replies: dict[int, str] | None = None, error: Exception | None = None):
        self.replies = replies if replies is not None else {1: "OK", 126: "IMU:0,0,0"}
        self.error = error
        self.commands: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        command = request.url.params["json"]
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return httpx.Response(200, text=self.replies.get(json.loads(command)["T"], ""))

    @property
    def tags(self) -> list[int]:
        return [json.loads(c)["T"] for c in self.commands]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def make_server(robot: StubRobot, config: UgvConfig | None = None) -> FastMCP:
    config = config or UgvConfig(base_url="http://rover.test")
    client = UgvClient(config, transport=robot.transport())
    mcp = FastMCP(name="test-ugv")
    register(mcp, UgvController(client, config))
    return mcp


@pytest.fixture
def robot() -> StubRobot:
    return StubRobot()
