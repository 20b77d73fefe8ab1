"""
File Transform Adapter

단일 이미지 파일 처리: decode → compose → ImageExtended/ 아래에 PNG 저장.

출력 경로 규칙:
    D/f.png → D/ImageExtended/f.png  (D가 없으면 현재 디렉토리)

같은 이름의 기존 출력은 덮어쓴다. 저장은 임시 파일에 쓴 뒤 rename하므로
중간에 실패해도 최종 경로에 깨진 파일이 남지 않는다.
"""

import logging
import os
from pathlib import Path

from PIL import Image

from .compositor import compose
from .errors import CanvasAllocationError, DecodeError, OutputWriteError
from .timing import measure_io
from .types import OUTPUT_DIR_NAME, OUTPUT_FORMAT, PIXEL_MODE, Dimensions, TransformResult

logger = logging.getLogger(__name__)

# 16비트 회색조 PNG가 열리는 mode (Pillow 버전에 따라 "I" 또는 "I;16*")
WIDE_GRAY_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")
_WIDE_TO_8BIT = 257


def output_path_for(input_path: str | Path) -> Path:
    """입력 파일에 대응하는 출력 경로 (입력 디렉토리/ImageExtended/같은 파일명)"""
    input_path = Path(input_path)
    return input_path.parent / OUTPUT_DIR_NAME / input_path.name


def load_rgba(input_path: str | Path) -> Image.Image:
    """
    이미지를 RGBA로 decode

    alpha 채널이 없는 입력은 불투명(alpha=255)으로 승격된다.
    16비트 회색조는 0..65535 범위를 0..255로 축소한 뒤 승격한다.

    Raises:
        DecodeError: 파일을 열 수 없거나 지원하지 않는 이미지인 경우
    """
    try:
        img = measure_io(lambda: Image.open(input_path))
        with img:
            measure_io(img.load)
            return _to_rgba(img)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Cannot decode image {input_path}: {e}") from e


def _to_rgba(img: Image.Image) -> Image.Image:
    if img.mode in WIDE_GRAY_MODES:
        img = img.convert("I").point(lambda v: v / _WIDE_TO_8BIT).convert("L")
    return img.convert(PIXEL_MODE)


def _save_png(image: Image.Image, output_path: Path) -> None:
    """임시 파일에 PNG로 쓴 뒤 최종 경로로 교체"""
    tmp_path = output_path.with_name(f".{output_path.name}.{os.getpid()}.tmp")
    try:
        measure_io(lambda: image.save(tmp_path, format=OUTPUT_FORMAT))
        os.replace(tmp_path, output_path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def transform_file(
    input_path: str | Path,
    target_width: int,
    target_height: int,
) -> TransformResult:
    """
    이미지에 투명한 여백을 추가하여 목표 크기로 확장하고 저장

    Args:
        input_path: 입력 이미지 경로
        target_width: 목표 가로 픽셀수
        target_height: 목표 세로 픽셀수

    Returns:
        TransformResult (입력/출력 경로, 원본/최종 크기)

    Raises:
        DecodeError: 입력 이미지를 읽을 수 없는 경우
        CanvasAllocationError: 목표 크기의 canvas를 할당할 수 없는 경우
        OutputWriteError: 출력 디렉토리 생성 또는 저장 실패
    """
    input_path = Path(input_path)
    source = load_rgba(input_path)
    original_size = Dimensions(*source.size)

    logger.info(
        "Extending %s (%s -> %dx%d)", input_path, original_size, target_width, target_height
    )

    try:
        canvas = compose(source, target_width, target_height)
    except (MemoryError, OverflowError, ValueError) as e:
        raise CanvasAllocationError(
            f"Cannot allocate {target_width}x{target_height} canvas for {input_path}: {e}"
        ) from e

    output_path = output_path_for(input_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        _save_png(canvas, output_path)
    except (OSError, ValueError) as e:
        raise OutputWriteError(f"Cannot write {output_path}: {e}") from e

    logger.info("Saved %s", output_path)
    return TransformResult(
        input_path=input_path,
        output_path=output_path,
        original_size=original_size,
        final_size=Dimensions(*canvas.size),
    )
