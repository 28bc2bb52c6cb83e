"""
Start the MCP server for one or more robot plugins.

Usage:
    # Serve the UGV rover over stdio (for desktop MCP clients)
    PYTHONPATH=src uv run python scripts/serve.py --robots ugv

    # Serve all discovered robot plugins over HTTP
    PYTHONPATH=src uv run python scripts/serve.py --transport http

    # Custom port and verbose logging
    PYTHONPATH=src uv run python scripts/serve.py --transport http --port 8001 --log-level DEBUG

Endpoints created (http transport):
    /{robot}/mcp   — Per-robot MCP server
    /              — Gateway info (lists all mounted robots)
"""

import argparse
import logging
import sys
import os

# Ensure src/ is on the path when run from repo root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import uvicorn

from core.logging_config import configure_logging
from core.server import create_gateway, serve_stdio
from robots import load_plugins

parser = argparse.ArgumentParser(description="Start the robot MCP server")
parser.add_argument("--robots", nargs="*", help="Robot plugins to load (default: all)")
parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
parser.add_argument("--port", type=int, default=8000)
parser.add_argument("--log-level", help="Logging level (default: $LOG_LEVEL or INFO)")
parser.add_argument("--log-file", help="Also write logs to this file")
args = parser.parse_args()

configure_logging(args.log_level, args.log_file)
logger = logging.getLogger("core.serve")

try:
    plugins = load_plugins(args.robots)
except KeyError as e:
    logger.error(e.args[0])
    sys.exit(1)

if not plugins:
    logger.error("No robot plugins found. Check src/robots/ for plugin packages.")
    sys.exit(1)

if args.transport == "stdio":
    if len(plugins) != 1:
        logger.error("stdio serves exactly one robot; pick one with --robots (have: %s)",
                     ", ".join(plugins))
        sys.exit(1)
    (plugin,) = plugins.values()
    try:
        serve_stdio(plugin)
    except KeyboardInterrupt:
        logger.info("Shutting down.")
    sys.exit(0)

logger.info("Loading %d robot(s): %s", len(plugins), ", ".join(plugins))
for name, plugin in plugins.items():
    meta = plugin.metadata()
    logger.info("  /%s/mcp — %s (%d tools)", meta.url_prefix or name, meta.name, len(plugin.tool_names()))

app = create_gateway(plugins)

try:
    uvicorn.run(app, host="0.0.0.0", port=args.port)
except KeyboardInterrupt:
    logger.info("Shutting down.")
