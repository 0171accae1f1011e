"""MCP server exposing the in-memory knowledge graph over stdio."""
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .api.tools import ToolDispatcher
from .config import ServerConfig
from .monitoring.metrics import MetricsCollector, HealthCheck
from .storage.memory.graph_store import InMemoryGraphStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # stdout carries the protocol stream
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def build_server(config: ServerConfig, dispatcher: ToolDispatcher) -> Server:
    """Register the knowledge graph tools on a new MCP server.

    Failures raised by call_tool are reported by the server as tool results
    with isError set.
    """
    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        return await dispatcher.handle_tool(name, arguments)

    return server


async def serve(config: ServerConfig) -> None:
    storage = InMemoryGraphStore()
    await storage.initialize()
    dispatcher = ToolDispatcher(storage, MetricsCollector(window_size=config.metrics_window))
    server = build_server(config, dispatcher)

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Knowledge Graph MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        health = await HealthCheck(storage).check_store()
        logger.info(f"Store health at shutdown: {health}")
        logger.info(f"Operation metrics: {dispatcher.metrics.get_metrics()}")
        await storage.cleanup()


def main() -> None:
    try:
        config = ServerConfig.from_env()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(config.log_level)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception:
        logger.exception("Failed to run MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
