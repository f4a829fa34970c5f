from io import BytesIO
from unittest.mock import patch

import pytest
from PIL import Image

from src.barcodegen.exceptions import BarcodeRenderError
from src.barcodegen.pattern import BarPattern
from src.barcodegen.raster import RasterRenderer

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def _decode(png: bytes) -> Image.Image:
    img = Image.open(BytesIO(png))
    img.load()
    return img.convert("RGB")


class TestRasterRenderer:
    @pytest.fixture
    def renderer(self) -> RasterRenderer:
        return RasterRenderer()

    @pytest.fixture
    def pattern(self) -> BarPattern:
        return BarPattern.from_modules("1100101101")

    def test_png_magic(self, renderer: RasterRenderer, pattern: BarPattern) -> None:
        png = renderer.render(pattern, 100, 60, False, "x")
        assert png[:8] == b"\x89PNG\r\n\x1a\n"

    @pytest.mark.parametrize(
        "width,height,include_text,expected",
        [
            (300, 150, False, (300, 150)),
            (300, 150, True, (300, 170)),
            (50, 50, True, (50, 70)),
            (1024, 1024, False, (1024, 1024)),
        ],
    )
    def test_canvas_size(
        self,
        renderer: RasterRenderer,
        pattern: BarPattern,
        width: int,
        height: int,
        include_text: bool,
        expected: tuple,
    ) -> None:
        img = _decode(renderer.render(pattern, width, height, include_text, "12345"))
        assert img.size == expected

    def test_bars_fill_region_exactly(self, renderer: RasterRenderer) -> None:
        # Integer scale: each module becomes 10 pixels wide.
        pattern = BarPattern.from_modules("1100101101")
        img = _decode(renderer.render(pattern, 100, 60, False, ""))
        for module, cell in enumerate(pattern):
            for y in (0, 30, 59):
                expected = BLACK if cell else WHITE
                assert img.getpixel((module * 10, y)) == expected
                assert img.getpixel((module * 10 + 9, y)) == expected

    def test_trailing_bar_reaches_right_edge(self, renderer: RasterRenderer) -> None:
        img = _decode(renderer.render(BarPattern.from_modules("0011"), 103, 50, False, ""))
        assert img.getpixel((102, 25)) == BLACK
        assert img.getpixel((0, 25)) == WHITE

    def test_label_band(self, renderer: RasterRenderer, pattern: BarPattern) -> None:
        img = _decode(renderer.render(pattern, 200, 80, True, "4006381333931"))
        band = img.crop((0, 80, 200, 100))
        assert band.getextrema() != ((255, 255), (255, 255), (255, 255))
        # Baseline sits 4 px above the bottom edge, so the last rows stay blank.
        assert img.crop((0, 99, 200, 100)).getextrema() == ((255, 255),) * 3

    def test_label_is_centered(self, renderer: RasterRenderer, pattern: BarPattern) -> None:
        img = _decode(renderer.render(pattern, 300, 80, True, "ABCDEF"))
        bbox = Image.eval(img.crop((0, 80, 300, 100)).convert("L"), lambda v: 255 - v).getbbox()
        assert bbox is not None
        left, _, right, _ = bbox
        assert abs((300 - right) - left) <= 8

    def test_long_label_clamped_to_left_edge(self, renderer: RasterRenderer) -> None:
        img = _decode(renderer.render(BarPattern.from_modules("10"), 50, 50, True, "W" * 60))
        band = Image.eval(img.crop((0, 50, 50, 70)).convert("L"), lambda v: 255 - v)
        bbox = band.getbbox()
        assert bbox is not None and bbox[0] <= 2

    def test_no_text_band_is_untouched(self, renderer: RasterRenderer) -> None:
        img = _decode(renderer.render(BarPattern.from_modules("1"), 60, 50, False, "ignored"))
        assert img.getextrema() == ((0, 0), (0, 0), (0, 0))

    def test_deterministic_output(self, renderer: RasterRenderer, pattern: BarPattern) -> None:
        first = renderer.render(pattern, 300, 150, True, "036000291452")
        second = RasterRenderer().render(pattern, 300, 150, True, "036000291452")
        assert first == second


def test_codec_failure_is_render_error() -> None:
    renderer = RasterRenderer()
    with patch("src.barcodegen.raster.Image.Image.save", side_effect=OSError("disk")):
        with pytest.raises(BarcodeRenderError, match="failed to encode PNG") as exc_info:
            renderer.render(BarPattern.from_modules("101"), 100, 50, False, "")
    assert exc_info.value.client_error is False
    assert isinstance(exc_info.value.__cause__, OSError)
