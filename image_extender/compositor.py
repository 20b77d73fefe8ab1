"""
Canvas Compositor

원본 이미지를 투명 캔버스 중앙에 배치한다. I/O 없음.

규칙:
- 최종 크기 = max(원본, 목표) (축소하지 않음)
- 여백은 floor 나눗셈, 홀수 여백의 남는 1px은 오른쪽/아래쪽
- 픽셀은 alpha 포함 그대로 복사 (blending 없음)
"""

from PIL import Image

from .types import PIXEL_MODE, TRANSPARENT, CanvasLayout, Dimensions


def compute_layout(
    source_size: tuple[int, int],
    target_width: int,
    target_height: int,
) -> CanvasLayout:
    """
    최종 캔버스 크기와 배치 오프셋 계산

    Args:
        source_size: 원본 (width, height)
        target_width: 목표 가로 픽셀수 (0이면 원본 크기 유지)
        target_height: 목표 세로 픽셀수 (0이면 원본 크기 유지)

    Returns:
        CanvasLayout
    """
    source = Dimensions(*source_size)
    final = Dimensions(
        max(source.width, target_width),
        max(source.height, target_height),
    )
    return CanvasLayout(
        source=source,
        final=final,
        left=(final.width - source.width) // 2,
        top=(final.height - source.height) // 2,
    )


def compose(source: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """
    투명 여백을 추가한 새 RGBA 이미지 반환

    원본 이미지는 변경하지 않는다. RGBA가 아닌 입력은 불투명 alpha로 변환된다.
    """
    if source.mode != PIXEL_MODE:
        source = source.convert(PIXEL_MODE)

    layout = compute_layout(source.size, target_width, target_height)

    canvas = Image.new(PIXEL_MODE, layout.final, TRANSPARENT)
    # mask 없이 paste하면 alpha까지 그대로 덮어쓴다
    canvas.paste(source, (layout.left, layout.top))
    return canvas
