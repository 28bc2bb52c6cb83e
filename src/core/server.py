import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastmcp import FastMCP

from core.plugin import RobotPlugin

load_dotenv()

logger = logging.getLogger(__name__)


def _make_auth():
    """Create shared auth provider if MCP_BEARER_TOKEN is set."""
    bearer_token = os.getenv("MCP_BEARER_TOKEN")
    if not bearer_token:
        return None
    from fastmcp.server.auth.providers.jwt import StaticTokenVerifier

    return StaticTokenVerifier(
        tokens={bearer_token: {"client_id": "mcp-client", "scopes": []}}
    )


def create_robot_server(plugin: RobotPlugin, *, auth=None) -> FastMCP:
    """Create an isolated FastMCP server for a single robot plugin."""
    meta = plugin.metadata()

    mcp = FastMCP(
        name=meta.name,
        instructions=meta.instructions or meta.description,
        auth=auth,
    )
    plugin.register_tools(mcp)
    logger.info("Registered %d tool(s) for %s", len(plugin.tool_names()), meta.name)
    return mcp


def serve_stdio(plugin: RobotPlugin) -> None:
    """Serve one robot over stdio until the client disconnects."""
    mcp = create_robot_server(plugin)
    logger.info("Serving %s over stdio", plugin.metadata().name)
    mcp.run(transport="stdio")


def create_gateway(plugins: dict[str, RobotPlugin]) -> FastAPI:
    """Create a FastAPI gateway that sub-mounts each robot's MCP server.

    Each robot gets its own isolated FastMCP instance mounted at /{url_prefix}/
    (the plugin's package name when it declares no prefix),
    sharing one bearer-token verifier when MCP_BEARER_TOKEN is set.

    FastMCP requires each MCP app's lifespan to be started for its
    StreamableHTTPSessionManager task group. We compose all lifespans
    into the gateway's lifespan.
    """
    auth = _make_auth()
    mcp_apps = {}
    prefixes = {
        name: plugin.metadata().url_prefix or name for name, plugin in plugins.items()
    }
    for name, plugin in plugins.items():
        mcp = create_robot_server(plugin, auth=auth)
        mcp_apps[prefixes[name]] = mcp.http_app()

    @asynccontextmanager
    async def lifespan(app):
        # Start all MCP app lifespans (initializes their task groups)
        async with _compose_lifespans(mcp_apps.values()):
            yield

    app = FastAPI(title="Robot MCP Gateway", lifespan=lifespan)

    for prefix, mcp_app in mcp_apps.items():
        app.mount(f"/{prefix}", mcp_app)

    @app.get("/")
    async def index():
        return {
            "service": "Robot MCP Gateway",
            "robots": {
                name: {
                    "name": plugin.metadata().name,
                    "mcp_endpoint": f"/{prefixes[name]}/mcp",
                    "tools": plugin.tool_names(),
                }
                for name, plugin in plugins.items()
            },
        }

    return app


@asynccontextmanager
async def _compose_lifespans(apps):
    """Recursively enter the lifespan of each ASGI app."""
    apps = list(apps)
    if not apps:
        yield
        return

    first, *rest = apps
    async with first.lifespan(first):
        async with _compose_lifespans(rest):
            yield
