"""
extend_image tool

stdio server와 HTTP(FastMCP) server가 공유하는 tool 정의와 실행 로직.
"""

import logging
from pathlib import Path
from typing import Optional

from mcp.types import Tool

from ..adapter import transform_file
from ..timing import ToolTimer
from ..types import OUTPUT_DIR_NAME, TransformResult
from ..validation import ExtendImageArgs, parse_extend_image_args

logger = logging.getLogger(__name__)

TOOL_NAME = "extend_image"
TOOL_DESCRIPTION = (
    "Extend a PNG image to a target size by adding transparent margins. "
    "The original image is centered on the new canvas and never shrunk. "
    f"The result is saved to an '{OUTPUT_DIR_NAME}' folder next to the input file."
)


def tool_definition() -> dict:
    """tools/list 응답에 들어갈 tool descriptor"""
    tool = Tool(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        inputSchema=ExtendImageArgs.model_json_schema(),
    )
    return tool.model_dump(by_alias=True, exclude_none=True)


def format_result(result: TransformResult) -> str:
    return (
        "Image extended successfully.\n"
        f"Input: {result.input_path}\n"
        f"Output: {result.output_path}\n"
        f"Original size: {result.original_size}\n"
        f"Final size: {result.final_size}"
    )


def run_extend_image(arguments: object, timing_file: Optional[Path] = None) -> str:
    """
    인자 검증 후 이미지 확장 실행

    Args:
        arguments: tool 호출 인자 (file_path, width, height)
        timing_file: ToolTimer 결과 기록 파일 (optional)

    Returns:
        결과 요약 텍스트

    Raises:
        InvalidArgumentError: 인자 형식 오류 또는 허용 범위 밖의 크기 (파일 I/O 전에 거부)
        DecodeError, CanvasAllocationError, OutputWriteError: 이미지 처리 실패
    """
    with ToolTimer(TOOL_NAME, timing_file):
        args = parse_extend_image_args(arguments)
        logger.info("Tool call: %s (%dx%d)", args.file_path, args.width, args.height)
        result = transform_file(args.file_path, args.width, args.height)

    message = format_result(result)
    logger.info(message)
    return message
