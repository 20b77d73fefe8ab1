"""Configuration for the image extender CLI and MCP servers."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Server identity
SERVER_NAME = "image-extender-mcp"
PROTOCOL_VERSION = "2024-11-05"

# Defaults (overridable through environment variables)
DEFAULT_TRANSPORT = "stdio"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8002
DEFAULT_HTTP_PATH = "/mcp"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class ServerConfig:
    """MCP server 설정"""
    transport: str = DEFAULT_TRANSPORT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    path: str = DEFAULT_HTTP_PATH
    log_level: str = DEFAULT_LOG_LEVEL
    timing_file: Optional[Path] = None


def load_config(env_file: Optional[Path] = None) -> ServerConfig:
    """
    환경 변수에서 설정 로드

    .env 파일이 있으면 먼저 로드한다 (이미 설정된 환경 변수는 덮어쓰지 않음).

    Environment:
        MCP_TRANSPORT: "stdio" | "http"
        MCP_HOST, MCP_PORT, MCP_PATH: HTTP transport 주소
        IMAGE_EXTENDER_LOG_LEVEL: logging level
        IMAGE_EXTENDER_TIMING_FILE: ToolTimer 결과를 기록할 파일
    """
    env_file = env_file or Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    timing_file = os.getenv("IMAGE_EXTENDER_TIMING_FILE")
    return ServerConfig(
        transport=os.getenv("MCP_TRANSPORT", DEFAULT_TRANSPORT).lower(),
        host=os.getenv("MCP_HOST", DEFAULT_HOST),
        port=int(os.getenv("MCP_PORT", str(DEFAULT_PORT))),
        path=os.getenv("MCP_PATH", DEFAULT_HTTP_PATH),
        log_level=os.getenv("IMAGE_EXTENDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        timing_file=Path(timing_file) if timing_file else None,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    stderr로 로그 출력 설정

    stdout은 MCP 응답(또는 CLI 결과) 전용이므로 로그는 항상 stderr로 보낸다.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
