"""MCP protocol layer: JSON-RPC messages, the tool server and its transports."""

from .server import MCP_PROTOCOL_VERSION, ToolServer
from .stdio import StdioTransport

__all__ = ["MCP_PROTOCOL_VERSION", "StdioTransport", "ToolServer"]
