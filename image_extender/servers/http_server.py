"""
Image Extender MCP Server (streamable HTTP)

FastMCP server exposing the same extend_image tool for remote deployment.
Selected with MCP_TRANSPORT=http.
"""

import logging
from pathlib import Path
from typing import Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..config import SERVER_NAME, ServerConfig
from ..errors import ImageExtenderError
from .tool import TOOL_DESCRIPTION, TOOL_NAME, run_extend_image

logger = logging.getLogger(__name__)


def call_extend_image(
    file_path: str,
    width: int,
    height: int,
    timing_file: Optional[Path] = None,
) -> str:
    """extend_image 실행. 실패는 ToolError로 변환"""
    try:
        return run_extend_image(
            {"file_path": file_path, "width": width, "height": height},
            timing_file,
        )
    except ImageExtenderError as e:
        raise ToolError(str(e)) from e


def create_server(config: Optional[ServerConfig] = None) -> FastMCP:
    config = config or ServerConfig()
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    def extend_image(file_path: str, width: int, height: int) -> str:
        """
        Args:
            file_path: Absolute path of the PNG image to extend
            width: Target width in pixels
            height: Target height in pixels
        """
        return call_extend_image(file_path, width, height, config.timing_file)

    return mcp


def run_http(config: ServerConfig) -> None:
    mcp = create_server(config)
    logger.info("Serving %s over HTTP on %s:%d%s", SERVER_NAME, config.host, config.port, config.path)
    mcp.run(transport="http", host=config.host, port=config.port, path=config.path)
