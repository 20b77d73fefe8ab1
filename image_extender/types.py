"""
Image Extender Type Definitions

기본 타입 및 상수 정의
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

# ============================================================================
# Constants
# ============================================================================

OUTPUT_DIR_NAME = "ImageExtended"
"""출력 디렉토리 이름 (입력 파일과 같은 디렉토리 안에 생성)"""

OUTPUT_FORMAT = "PNG"
"""출력 포맷 (확장자와 무관하게 항상 PNG로 저장)"""

IMAGE_EXTENSIONS: tuple[str, ...] = (".png",)
"""디렉토리 탐색 시 처리 대상 확장자 (소문자 비교)"""

PIXEL_MODE = "RGBA"
TRANSPARENT = (0, 0, 0, 0)


# ============================================================================
# Geometry
# ============================================================================

class Dimensions(NamedTuple):
    """(width, height) 쌍"""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class CanvasLayout:
    """
    캔버스 배치 결과

    최종 캔버스 크기와 원본 이미지가 놓일 좌상단 오프셋.
    홀수 여백은 오른쪽/아래쪽에 1px 더 붙는다.
    """
    source: Dimensions
    final: Dimensions
    left: int
    top: int

    @property
    def right(self) -> int:
        return self.final.width - self.source.width - self.left

    @property
    def bottom(self) -> int:
        return self.final.height - self.source.height - self.top

    @property
    def is_noop(self) -> bool:
        return self.final == self.source


# ============================================================================
# Results
# ============================================================================

@dataclass(frozen=True)
class TransformResult:
    """단일 이미지 확장 결과"""
    input_path: Path
    output_path: Path
    original_size: Dimensions
    final_size: Dimensions


@dataclass
class ScanResult:
    """
    디렉토리 탐색 결과

    skipped: 탐색 중 오류가 난 항목 수 (권한 문제, 깨진 링크 등)
    """
    root: Path
    paths: list[Path] = field(default_factory=list)
    skipped: int = 0
