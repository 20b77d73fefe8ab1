"""
HTTP (FastMCP) Server 테스트
"""

import pytest
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from image_extender.config import ServerConfig
from image_extender.servers.http_server import call_extend_image, create_server


class TestCallExtendImage:

    def test_success(self, make_png):
        source_path = make_png("logo.png", 6, 4)

        text = call_extend_image(str(source_path), 10, 10)

        assert "Final size: 10x10" in text
        assert (source_path.parent / "ImageExtended" / "logo.png").is_file()

    def test_zero_size_raises_tool_error(self, make_png, tmp_path):
        source_path = make_png("logo.png", 6, 4)

        with pytest.raises(ToolError):
            call_extend_image(str(source_path), 0, 10)
        assert not (tmp_path / "ImageExtended").exists()

    def test_allocation_failure_raises_tool_error(self, make_png, monkeypatch):
        source_path = make_png("logo.png", 6, 4)

        def failing_compose(source, width, height):
            raise MemoryError()

        monkeypatch.setattr("image_extender.adapter.compose", failing_compose)

        with pytest.raises(ToolError):
            call_extend_image(str(source_path), 10, 10)

    def test_decode_failure_raises_tool_error(self, corrupt_png):
        with pytest.raises(ToolError):
            call_extend_image(str(corrupt_png), 10, 10)

    def test_writes_timing_file(self, make_png, tmp_path):
        source_path = make_png("logo.png", 2, 2)
        timing_file = tmp_path / "timing.json"

        call_extend_image(str(source_path), 4, 4, timing_file=timing_file)

        assert '"tool": "extend_image"' in timing_file.read_text()


class TestCreateServer:

    def test_returns_fastmcp(self):
        assert isinstance(create_server(ServerConfig(transport="http")), FastMCP)
