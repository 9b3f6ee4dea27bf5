from __future__ import annotations

import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .dispatcher import Dispatcher
from .tools.results import render_text

SERVER_NAME = "avalanche-cli-installer"

logger = logging.getLogger("avalanche_installer.server")


def build_server(dispatcher: Dispatcher) -> Server:
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return dispatcher.registry.list_tools()

    # Bypasses server.call_tool(), which turns raised McpError into an isError
    # result; dispatch errors go out as JSON-RPC errors. Enum values are not
    # checked here, handlers report unsupported ones as data.
    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.dispatch(req.params.name, req.params.arguments or {})
        content = [types.TextContent(type="text", text=render_text(result))]
        return types.ServerResult(types.CallToolResult(content=content))

    server.request_handlers[types.CallToolRequest] = _call_tool
    return server


async def serve(dispatcher: Dispatcher) -> None:
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("%s server running on stdio", SERVER_NAME)
        await server.run(read_stream, write_stream, server.create_initialization_options())
