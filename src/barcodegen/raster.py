"""
RU: Растровый рендеринг рисунка штрихкода в PNG (Pillow).
EN: Raster rendering of a bar pattern into a PNG image (Pillow).

The pattern is scaled with nearest-neighbour resampling to exactly
``width x height`` and composited on an opaque white canvas; an optional
label band of ``TEXT_BAND_HEIGHT`` pixels is added below the bars.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Final, Optional

from PIL import Image, ImageDraw, ImageFont

from src.barcodegen.exceptions import BarcodeRenderError
from src.barcodegen.pattern import BarPattern
from src.model.enums import TEXT_BAND_HEIGHT

logger = logging.getLogger(__name__)

__all__ = [
    "RasterRenderer",
]

LABEL_BASELINE_OFFSET: Final[int] = 4  # Baseline distance from the canvas bottom
_BLACK: Final[int] = 0
_WHITE: Final[int] = 255


class RasterRenderer:
    """
    Lossless bitmap renderer for bar patterns.

    Args:
        font: Fixed-width bitmap font for the label. Defaults to Pillow's
            built-in bitmap font, loaded once and shared read-only.

    Examples:
        >>> png = RasterRenderer().render(pattern, 300, 150, True, "036000291452")
        >>> png[:4]
        b'\\x89PNG'
    """

    def __init__(self, font: Optional[ImageFont.ImageFont] = None) -> None:
        self.font = font if font is not None else ImageFont.load_default_imagefont()

    def render(
        self,
        pattern: BarPattern,
        width: int,
        height: int,
        include_text: bool,
        label: str,
    ) -> bytes:
        """
        Render ``pattern`` as PNG bytes.

        Args:
            pattern: Bar pattern from the symbology encoder.
            width: Canvas width and bar region width in pixels.
            height: Bar region height in pixels.
            include_text: Reserve a label band and draw ``label`` in it.
            label: Human readable text (the request data).

        Returns:
            PNG-encoded image of ``width x (height + band)`` pixels.

        Raises:
            BarcodeRenderError: Pillow failed to draw or encode the image.
        """
        canvas_height = height + TEXT_BAND_HEIGHT if include_text else height
        try:
            canvas = Image.new("RGB", (width, canvas_height), color="white")
            bars = self._scale_pattern(pattern, width, height)
            canvas.paste(bars.convert("RGB"), (0, 0))
            if include_text:
                self._draw_label(canvas, label, canvas_height - LABEL_BASELINE_OFFSET)
            buf = BytesIO()
            canvas.save(buf, format="PNG")
        except (OSError, ValueError) as e:
            raise BarcodeRenderError(
                "failed to encode PNG", context={"width": width, "height": canvas_height}
            ) from e
        logger.debug(
            "Output rendered as PNG %dx%d (%d bytes)",
            width,
            canvas_height,
            buf.getbuffer().nbytes,
        )
        return buf.getvalue()

    @staticmethod
    def _scale_pattern(pattern: BarPattern, width: int, height: int) -> Image.Image:
        row = Image.new("L", (pattern.width, 1), color=_WHITE)
        row.putdata([_BLACK if cell else _WHITE for cell in pattern])
        return row.resize((width, height), Image.Resampling.NEAREST)

    def _draw_label(self, canvas: Image.Image, label: str, baseline: int) -> None:
        """Draw ``label`` horizontally centered with its baseline at ``baseline``."""
        text_width = int(self.font.getlength(label))
        x = max(0, (canvas.width - text_width) // 2)
        # Bitmap fonts are placed by their top edge; the digit box gives the ascent.
        ascent = self.font.getbbox("0")[3]
        draw = ImageDraw.Draw(canvas)
        draw.text((x, baseline - ascent), label, font=self.font, fill="black")
