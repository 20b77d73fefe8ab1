"""
Image Extender MCP Servers

- stdio_server: line-delimited JSON-RPC loop (default)
- http_server: FastMCP streamable HTTP transport
"""

__all__ = [
    "stdio_server",
    "http_server",
    "tool",
]
