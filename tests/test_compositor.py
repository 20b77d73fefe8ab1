"""
Canvas Compositor 단위 테스트

1. 최종 크기 = max(원본, 목표)
2. 중앙 배치 (홀수 여백은 오른쪽/아래쪽)
3. 픽셀 보존 (alpha 포함), 여백은 (0, 0, 0, 0)
"""

import pytest
from PIL import Image

from image_extender.compositor import compose, compute_layout
from image_extender.types import Dimensions

TRANSPARENT_EXTREMA = ((0, 0), (0, 0), (0, 0), (0, 0))


class TestComputeLayout:
    """크기/오프셋 계산 테스트"""

    @pytest.mark.parametrize(
        "source,target,final,offset",
        [
            ((100, 50), (200, 200), (200, 200), (50, 75)),
            ((300, 100), (200, 50), (300, 100), (0, 0)),
            ((10, 10), (13, 13), (13, 13), (1, 1)),
            ((10, 20), (15, 20), (15, 20), (2, 0)),
            ((7, 3), (0, 0), (7, 3), (0, 0)),
            ((1, 1), (2, 9), (2, 9), (0, 4)),
        ],
    )
    def test_layout(self, source, target, final, offset):
        layout = compute_layout(source, *target)
        assert layout.final == Dimensions(*final)
        assert (layout.left, layout.top) == offset

    @pytest.mark.parametrize("source", [(1, 1), (5, 8), (64, 33)])
    @pytest.mark.parametrize("target", [(0, 0), (1, 100), (64, 64), (101, 2)])
    def test_padding_adds_up(self, source, target):
        """left + src + right == final, left == floor(padding / 2)"""
        layout = compute_layout(source, *target)
        assert layout.final.width == max(source[0], target[0])
        assert layout.final.height == max(source[1], target[1])
        assert layout.left + source[0] + layout.right == layout.final.width
        assert layout.top + source[1] + layout.bottom == layout.final.height
        assert layout.left == (layout.final.width - source[0]) // 2
        assert layout.right - layout.left in (0, 1)
        assert layout.bottom - layout.top in (0, 1)

    def test_noop_when_target_smaller(self):
        assert compute_layout((300, 100), 200, 50).is_noop
        assert not compute_layout((300, 100), 301, 50).is_noop


class TestCompose:
    """캔버스 합성 테스트"""

    def test_centers_source_on_transparent_canvas(self, make_image):
        """100x50 → 200x200: 행 75-124, 열 50-149에 원본"""
        source = make_image(100, 50)
        canvas = compose(source, 200, 200)

        assert canvas.mode == "RGBA"
        assert canvas.size == (200, 200)
        assert canvas.crop((50, 75, 150, 125)).tobytes() == source.tobytes()

        # 원본 영역 밖은 모두 완전 투명
        assert canvas.crop((0, 0, 200, 75)).getextrema() == TRANSPARENT_EXTREMA
        assert canvas.crop((0, 125, 200, 200)).getextrema() == TRANSPARENT_EXTREMA
        assert canvas.crop((0, 75, 50, 125)).getextrema() == TRANSPARENT_EXTREMA
        assert canvas.crop((150, 75, 200, 125)).getextrema() == TRANSPARENT_EXTREMA

    def test_never_shrinks(self, make_image):
        """300x100, 목표 200x50 → 그대로"""
        source = make_image(300, 100)
        canvas = compose(source, 200, 50)
        assert canvas.size == (300, 100)
        assert canvas.tobytes() == source.tobytes()

    def test_zero_target_keeps_source_size(self, make_image):
        source = make_image(12, 7)
        assert compose(source, 0, 0).size == (12, 7)

    def test_odd_padding_extra_pixel_right_bottom(self, make_image):
        source = make_image(10, 10)
        canvas = compose(source, 13, 13)

        assert canvas.getpixel((1, 1)) == source.getpixel((0, 0))
        assert canvas.getpixel((10, 10)) == source.getpixel((9, 9))
        assert canvas.crop((0, 0, 1, 13)).getextrema() == TRANSPARENT_EXTREMA
        assert canvas.crop((11, 0, 13, 13)).getextrema() == TRANSPARENT_EXTREMA
        assert canvas.crop((0, 11, 13, 13)).getextrema() == TRANSPARENT_EXTREMA

    def test_alpha_copied_verbatim(self):
        """투명 픽셀의 색상도 blending 없이 그대로"""
        source = Image.new("RGBA", (2, 2), (255, 10, 20, 0))
        source.putpixel((1, 1), (1, 2, 3, 128))
        canvas = compose(source, 4, 4)

        assert canvas.getpixel((1, 1)) == (255, 10, 20, 0)
        assert canvas.getpixel((2, 2)) == (1, 2, 3, 128)

    def test_rgb_source_promoted_to_opaque(self):
        source = Image.new("RGB", (3, 3), (10, 20, 30))
        canvas = compose(source, 5, 5)

        assert canvas.mode == "RGBA"
        assert canvas.getpixel((2, 2)) == (10, 20, 30, 255)
        assert canvas.getpixel((0, 0)) == (0, 0, 0, 0)

    def test_idempotent(self, make_image):
        once = compose(make_image(31, 17), 64, 40)
        twice = compose(once, 64, 40)
        assert twice.size == once.size
        assert twice.tobytes() == once.tobytes()

    def test_source_not_modified(self, make_image):
        source = make_image(8, 8)
        before = source.tobytes()
        compose(source, 20, 20)
        assert source.size == (8, 8)
        assert source.tobytes() == before
