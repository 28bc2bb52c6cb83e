"""Tests for plugin discovery and the MCP server factories."""

import asyncio
import logging

import pytest
from fastapi.testclient import TestClient
from fastmcp import Client

from core.logging_config import configure_logging
from core.server import create_gateway, create_robot_server
from robots import discover_plugins, load_plugins
from robots.ugv import UgvPlugin


def test_ugv_plugin_is_discovered() -> None:
    plugins = discover_plugins()

    assert plugins["ugv"] is UgvPlugin


def test_load_plugins_filters_by_name() -> None:
    plugins = load_plugins(["ugv"])

    assert list(plugins) == ["ugv"]
    assert isinstance(plugins["ugv"], UgvPlugin)


def test_load_plugins_rejects_unknown_names() -> None:
    with pytest.raises(KeyError, match="Unknown robot"):
        load_plugins(["ugv", "hovercraft"])


def test_registered_tools_match_declared_names() -> None:
    plugin = UgvPlugin()
    mcp = create_robot_server(plugin)

    async def _run_test():
        async with Client(mcp) as client:
            return await client.list_tools()

    names = {tool.name for tool in asyncio.run(_run_test())}
    assert names == set(plugin.tool_names())


def test_gateway_index_lists_robots() -> None:
    app = create_gateway({"ugv": UgvPlugin()})

    body = TestClient(app).get("/").json()

    assert body["robots"]["ugv"]["mcp_endpoint"] == "/ugv/mcp"
    assert body["robots"]["ugv"]["tools"] == ["move_forward", "move_backward", "stop"]


def test_configure_logging_writes_to_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "bridge.log"

    configure_logging("DEBUG", log_file)
    configure_logging("DEBUG", log_file)
    logging.getLogger("robots.ugv.test").debug("hello rover")

    logger = logging.getLogger("robots")
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.flush()
    assert "hello rover" in log_file.read_text(encoding="utf-8")
    assert "| DEBUG    | robots.ugv.test |" in log_file.read_text(encoding="utf-8")

    for name in ("core", "robots"):
        for handler in logging.getLogger(name).handlers:
            handler.close()
        logging.getLogger(name).handlers.clear()
        logging.getLogger(name).propagate = True
