"""
Directory Walker

root 아래의 모든 PNG 파일을 재귀적으로 찾는다.
순서는 파일시스템 열거 순서를 따르며 정렬하지 않는다.
"""

import logging
import os
from pathlib import Path

from .types import IMAGE_EXTENSIONS, ScanResult

logger = logging.getLogger(__name__)


def scan_directory(root: str | Path) -> ScanResult:
    """
    디렉토리를 재귀 탐색하여 이미지 파일 수집

    탐색 중 오류(권한, 깨진 링크 등)는 예외로 올리지 않고 skipped로 집계한다.

    Args:
        root: 탐색할 디렉토리

    Returns:
        ScanResult(root, paths, skipped)
    """
    result = ScanResult(root=Path(root))

    def on_error(error: OSError) -> None:
        result.skipped += 1
        logger.debug("Skipping unreadable entry %s: %s", error.filename, error)

    for dirpath, _dirnames, filenames in os.walk(result.root, onerror=on_error):
        for filename in filenames:
            if Path(filename).suffix.lower() in IMAGE_EXTENSIONS:
                result.paths.append(Path(dirpath) / filename)

    logger.debug(
        "Scanned %s: %d image(s), %d skipped", result.root, len(result.paths), result.skipped
    )
    return result


def find_images(root: str | Path) -> list[Path]:
    """root 아래의 PNG 파일 경로 목록"""
    return scan_directory(root).paths
