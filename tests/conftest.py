"""
Pytest Configuration and Fixtures
"""

import os

import pytest
from PIL import Image

CONFIG_ENV_VARS = (
    "MCP_TRANSPORT",
    "MCP_HOST",
    "MCP_PORT",
    "MCP_PATH",
    "IMAGE_EXTENDER_LOG_LEVEL",
    "IMAGE_EXTENDER_TIMING_FILE",
)


def _pattern_pixel(x: int, y: int) -> tuple[int, int, int, int]:
    """좌표마다 다른 RGBA 값 (alpha 0 픽셀 포함)"""
    return (x % 256, y % 256, (x * 7 + y * 3) % 256, (x * 5 + y * 11) % 256)


@pytest.fixture
def make_image():
    """패턴이 들어간 RGBA 이미지 생성 factory"""
    def _make(width: int, height: int) -> Image.Image:
        img = Image.new("RGBA", (width, height))
        img.putdata([_pattern_pixel(x, y) for y in range(height) for x in range(width)])
        return img
    return _make


@pytest.fixture
def make_png(tmp_path, make_image):
    """tmp_path 아래에 PNG 파일 생성 factory"""
    def _make(relative: str, width: int, height: int):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        make_image(width, height).save(path, format="PNG")
        return path
    return _make


@pytest.fixture
def corrupt_png(tmp_path):
    """PNG 확장자지만 이미지가 아닌 파일"""
    path = tmp_path / "broken.png"
    path.write_bytes(b"this is not an image")
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """설정 관련 환경 변수를 비우고 테스트 후 원래대로 복원"""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    # .env 파일 로드로 새로 생긴 값 제거 (원래 값은 monkeypatch가 복원)
    for name in CONFIG_ENV_VARS:
        os.environ.pop(name, None)
