"""
Tool timing with an I/O vs compute split.

Image decode and PNG write are wrapped with measure_io(); everything else a
tool does counts as compute. Results are logged (stderr) as

    ---TIMING---{"tool": "extend_image", "fn_total_ms": 15.5, "io_ms": 12.3, "compute_ms": 3.2}

and optionally written to a file.

Usage:
    with ToolTimer("extend_image") as timer:
        img = measure_io(lambda: Image.open(path))
        canvas = compose(img, 200, 200)
    timer.timing["io_ms"]
"""

import json
import logging
import threading
import time
from pathlib import Path
from typing import Callable, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)

TIMING_PREFIX = "---TIMING---"


class _IoClock(threading.local):
    """스레드별 I/O 누적 시간 (ms)"""
    io_ms: float = 0.0


_clock = _IoClock()


def measure_io(func: Callable[[], T]) -> T:
    """func 실행 시간을 현재 스레드의 I/O 시간에 더하고 결과를 반환"""
    start = time.perf_counter()
    try:
        return func()
    finally:
        _clock.io_ms += (time.perf_counter() - start) * 1000


class ToolTimer:
    """
    Tool 실행 시간 측정

    생성 시 I/O 누적값을 0으로 초기화하고, finish() (또는 with 블록 종료) 시
    전체/I-O/compute 시간을 기록한다.
    """

    def __init__(self, tool_name: str, timing_file: Optional[Path] = None):
        self.tool_name = tool_name
        self.timing_file = timing_file
        self.timing: dict = {}
        self._start = time.perf_counter()
        _clock.io_ms = 0.0

    def __enter__(self) -> "ToolTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()

    def finish(self) -> dict:
        total_ms = (time.perf_counter() - self._start) * 1000
        io_ms = _clock.io_ms
        self.timing = {
            "tool": self.tool_name,
            "fn_total_ms": round(total_ms, 3),
            "io_ms": round(io_ms, 3),
            "compute_ms": round(max(0.0, total_ms - io_ms), 3),
        }
        payload = json.dumps(self.timing)
        logger.info("%s%s", TIMING_PREFIX, payload)

        if self.timing_file is not None:
            try:
                self.timing_file.write_text(payload)
            except OSError as e:
                logger.warning("Could not write timing file %s: %s", self.timing_file, e)

        return self.timing
