#!/usr/bin/env python3
"""
Image Extender MCP Server (stdio)

Line-delimited JSON-RPC loop exposing a single tool, extend_image.
One request per line on stdin, one response per line on stdout.
Logs go to stderr only; stdout carries protocol frames exclusively.

Methods:
- initialize: protocol version, capabilities, server info
- notifications/initialized: acknowledged with an empty frame
- tools/list: extend_image descriptor
- tools/call: run extend_image

Requests are handled synchronously, one at a time. The loop stops when stdin
is closed.

Usage:
    python -m image_extender.servers.stdio_server
    MCP_TRANSPORT=http python -m image_extender.servers.stdio_server
"""

import io
import json
import logging
import sys
from typing import Any, BinaryIO, Optional, TextIO

from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND, Implementation, TextContent
from pydantic import BaseModel, ValidationError

from .. import __version__
from ..config import PROTOCOL_VERSION, SERVER_NAME, ServerConfig, configure_logging, load_config
from ..errors import ImageExtenderError, InvalidArgumentError, ProtocolError
from .tool import TOOL_NAME, run_extend_image, tool_definition

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
EXECUTION_ERROR = -32000


class JsonRpcRequest(BaseModel):
    jsonrpc: str
    method: str
    params: Any = None
    id: Any = None


def _frame(request_id: Any, result: Optional[dict] = None, error: Optional[dict] = None) -> dict:
    frame: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}
    if result is not None:
        frame["result"] = result
    if error is not None:
        frame["error"] = error
    frame["id"] = request_id
    return frame


def _error(request_id: Any, code: int, message: str) -> dict:
    return _frame(request_id, error={"code": code, "message": message})


def open_reader(stream: BinaryIO) -> TextIO:
    """
    byte stream을 줄 단위 UTF-8 text reader로 감싼다

    잘못된 UTF-8 byte는 U+FFFD로 치환되어 JSON 파싱 단계에서 ProtocolError로 버려지고,
    read loop는 계속된다.
    """
    return io.TextIOWrapper(stream, encoding="utf-8", errors="replace")


class ImageExtenderServer:
    """
    stdio MCP server

    reader/writer를 명시적으로 받아 전역 상태 없이 동작한다.
    serve()는 reader가 EOF에 도달하면 반환한다.
    """

    def __init__(self, reader: TextIO, writer: TextIO, config: Optional[ServerConfig] = None):
        self.reader = reader
        self.writer = writer
        self.config = config or ServerConfig()

    def serve(self) -> None:
        logger.info("%s %s listening on stdio", SERVER_NAME, __version__)
        for line in self.reader:
            response = self.handle_line(line)
            if response is not None:
                self._send(response)
        logger.info("Input closed, shutting down")

    def _send(self, response: dict) -> None:
        self.writer.write(json.dumps(response) + "\n")
        self.writer.flush()

    @staticmethod
    def parse_request(line: str) -> JsonRpcRequest:
        try:
            return JsonRpcRequest.model_validate_json(line)
        except ValidationError as e:
            raise ProtocolError(f"Malformed request line: {line.strip()!r}") from e

    def handle_line(self, line: str) -> Optional[dict]:
        """한 줄 처리. 파싱할 수 없는 줄은 로그만 남기고 None"""
        try:
            request = self.parse_request(line)
        except ProtocolError as e:
            logger.warning("%s", e)
            return None
        return self.handle_request(request)

    def handle_request(self, request: JsonRpcRequest) -> dict:
        match request.method:
            case "initialize":
                return _frame(request.id, result=self._initialize())
            case "notifications/initialized":
                return _frame(request.id)
            case "tools/list":
                return _frame(request.id, result={"tools": [tool_definition()]})
            case "tools/call":
                return self._call_tool(request)
            case _:
                logger.warning("Unsupported method: %s", request.method)
                return _error(request.id, METHOD_NOT_FOUND, f"Unsupported method: {request.method}")

    def _initialize(self) -> dict:
        server_info = Implementation(name=SERVER_NAME, version=__version__)
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": server_info.model_dump(by_alias=True, exclude_none=True),
        }

    def _call_tool(self, request: JsonRpcRequest) -> dict:
        params = request.params if isinstance(request.params, dict) else {}
        name = params.get("name", "")
        if name != TOOL_NAME:
            return _error(request.id, METHOD_NOT_FOUND, f"Unknown tool: {name}")

        try:
            text = run_extend_image(params.get("arguments", {}), self.config.timing_file)
        except InvalidArgumentError as e:
            # 범위 밖 크기(0 이하 포함)도 인자 오류: batch CLI와 같은 검증 정책
            logger.warning("Rejected %s call: %s", TOOL_NAME, e)
            return _error(request.id, INVALID_PARAMS, str(e))
        except ImageExtenderError as e:
            logger.error("%s failed: %s", TOOL_NAME, e)
            return _error(request.id, EXECUTION_ERROR, f"Execution error: {e}")

        content = TextContent(type="text", text=text)
        return _frame(
            request.id,
            result={"content": [content.model_dump(by_alias=True, exclude_none=True)]},
        )


def main() -> None:
    config = load_config()
    configure_logging(config.log_level)

    if config.transport == "http":
        # Streamable HTTP for remote deployment
        from .http_server import run_http
        run_http(config)
    else:
        # stdio for local clients
        ImageExtenderServer(open_reader(sys.stdin.buffer), sys.stdout, config).serve()


if __name__ == "__main__":
    main()
