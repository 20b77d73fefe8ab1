"""
Target Size Validation

batch CLI와 MCP server가 공유하는 단일 검증 정책:
- 목표 가로/세로는 MIN_TARGET_SIZE(1) 이상, MAX_TARGET_SIZE(PNG 최대 크기) 이하의 정수
- 검증은 파일 I/O 이전에 수행

Compositor 자체는 0을 "원본 크기 유지"로 취급하며 거부하지 않는다.
"""

import argparse

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from .errors import InvalidArgumentError

MIN_TARGET_SIZE = 1
MAX_TARGET_SIZE = 2**31 - 1

ARGUMENTS_HINT = "file_path: string, width: integer, height: integer"


class ExtendImageArgs(BaseModel):
    """extend_image tool 인자"""
    file_path: StrictStr = Field(description="Absolute path of the PNG image to extend")
    width: StrictInt = Field(
        ge=MIN_TARGET_SIZE, le=MAX_TARGET_SIZE, description="Target width in pixels"
    )
    height: StrictInt = Field(
        ge=MIN_TARGET_SIZE, le=MAX_TARGET_SIZE, description="Target height in pixels"
    )


def validate_target_size(width: int, height: int) -> None:
    """
    목표 크기 검증

    Raises:
        InvalidArgumentError: width 또는 height가 MIN_TARGET_SIZE 미만이거나
            MAX_TARGET_SIZE를 넘는 경우
    """
    for name, value in (("width", width), ("height", height)):
        if value < MIN_TARGET_SIZE:
            raise InvalidArgumentError(
                f"{name} must be at least {MIN_TARGET_SIZE} pixel(s), got {value}"
            )
        if value > MAX_TARGET_SIZE:
            raise InvalidArgumentError(
                f"{name} must be at most {MAX_TARGET_SIZE} pixels, got {value}"
            )


def _describe(error: ValidationError) -> str:
    details = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        details.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(details)


def parse_extend_image_args(arguments: object) -> ExtendImageArgs:
    """
    tool 호출 인자를 ExtendImageArgs로 변환

    Raises:
        InvalidArgumentError: 필드 누락, 타입 불일치, 허용 범위 밖의 크기
    """
    try:
        return ExtendImageArgs.model_validate(arguments)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid arguments ({ARGUMENTS_HINT}): {_describe(e)}") from e


def target_size(value: str) -> int:
    """argparse type: MIN_TARGET_SIZE..MAX_TARGET_SIZE 범위의 정수"""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    try:
        validate_target_size(size, size)
    except InvalidArgumentError:
        raise argparse.ArgumentTypeError(
            f"must be between {MIN_TARGET_SIZE} and {MAX_TARGET_SIZE} pixels, got {size}"
        )
    return size
