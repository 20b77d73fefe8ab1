#!/usr/bin/env python3
"""
Batch Driver

PNG 파일 하나 또는 디렉토리 전체에 투명 여백을 추가한다.

- 파일: 한 번 처리하고 결과를 출력
- 디렉토리: 재귀적으로 PNG를 찾아 순서대로 처리, 실패해도 계속 진행
- 그 외: InvalidPathError (exit 1)

Usage:
    image-extender ./icons 512 512
    python -m image_extender.batch icon.png 1024 768
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .adapter import transform_file
from .config import configure_logging
from .errors import ImageExtenderError, InvalidPathError
from .validation import target_size, validate_target_size
from .walker import scan_directory

logger = logging.getLogger(__name__)


@dataclass
class BatchSummary:
    """배치 처리 집계"""
    found: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0


def process_file(
    path: Path,
    width: int,
    height: int,
    out: TextIO,
    err: TextIO,
) -> bool:
    """단일 파일 처리 후 결과 출력. 성공 여부 반환"""
    try:
        result = transform_file(path, width, height)
    except ImageExtenderError as e:
        print(f"Error: {path} - {e}", file=err)
        return False

    print(
        f"Saved: {result.output_path} ({result.original_size} -> {result.final_size})",
        file=out,
    )
    return True


def run_batch(
    path: str | Path,
    width: int,
    height: int,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> BatchSummary:
    """
    파일 또는 디렉토리 처리

    Args:
        path: PNG 파일 또는 디렉토리 경로
        width: 목표 가로 픽셀수
        height: 목표 세로 픽셀수
        out: 진행 상황 출력 (default: stdout)
        err: 항목별 오류 출력 (default: stderr)

    Returns:
        BatchSummary

    Raises:
        InvalidArgumentError: 목표 크기가 정책에 맞지 않는 경우
        InvalidPathError: path가 파일도 디렉토리도 아닌 경우
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    validate_target_size(width, height)
    path = Path(path)
    summary = BatchSummary()
    logger.info("Batch run on %s (target %dx%d)", path, width, height)

    if path.is_file():
        summary.found = 1
        if process_file(path, width, height, out, err):
            summary.succeeded = 1
        else:
            summary.failed = 1
        return summary

    if not path.is_dir():
        raise InvalidPathError(f"Invalid path: {path}")

    scan = scan_directory(path)
    summary.found = len(scan.paths)
    summary.skipped = scan.skipped

    if scan.skipped:
        print(f"Skipped {scan.skipped} unreadable entries while scanning {path}", file=out)

    if not scan.paths:
        print(f"No PNG files found in directory: {path}", file=out)
        return summary

    print(f"Found {summary.found} PNG file(s).", file=out)

    for file_path in scan.paths:
        if process_file(file_path, width, height, out, err):
            summary.succeeded += 1
        else:
            summary.failed += 1

    print(f"\nDone: {summary.succeeded} succeeded, {summary.failed} failed", file=out)
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-extender",
        description="Extend PNG images to a target size by adding transparent margins. "
                    "The original image is centered on the new canvas.",
    )
    parser.add_argument("path", type=Path, help="PNG file or directory")
    parser.add_argument("width", type=target_size, help="Target width in pixels")
    parser.add_argument("height", type=target_size, help="Target height in pixels")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        run_batch(args.path, args.width, args.height)
    except InvalidPathError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
