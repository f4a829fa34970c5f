"""
RU: Векторный рендеринг рисунка штрихкода в SVG без растеризации.
EN: Vector rendering of a bar pattern into SVG markup, without rasterizing.

Each maximal run of black modules becomes one ``<rect>``. Edges are computed
in float and rounded to two decimals; a bar's width is the difference of its
rounded edges, so neighbouring geometry never drifts apart by a rounding step.
"""

from __future__ import annotations

import logging
import re
from typing import Final, Iterator, List, Tuple
from xml.sax.saxutils import escape

from src.barcodegen.pattern import BarPattern
from src.model.enums import TEXT_BAND_HEIGHT

logger = logging.getLogger(__name__)

__all__ = [
    "VectorRenderer",
    "black_runs",
]

SVG_NAMESPACE: Final[str] = "http://www.w3.org/2000/svg"
LABEL_BASELINE_OFFSET: Final[int] = 18  # Baseline below the top of the label band
LABEL_FONT_SIZE: Final[int] = 12

_ESCAPE_ENTITIES: Final = {'"': "&quot;", "'": "&apos;"}
# Characters not allowed in XML 1.0 documents.
_XML_ILLEGAL: Final = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def black_runs(pattern: BarPattern) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(start, length)`` for every maximal run of black modules.

    A run touching the last module is closed by treating the position past
    the end as white.
    """
    run_start = -1
    for x in range(pattern.width + 1):
        is_bar = x < pattern.width and pattern.is_black(x)
        if is_bar and run_start == -1:
            run_start = x
        elif not is_bar and run_start != -1:
            yield run_start, x - run_start
            run_start = -1


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _label_text(label: str) -> str:
    return escape(_XML_ILLEGAL.sub("\ufffd", label), _ESCAPE_ENTITIES)


class VectorRenderer:
    """Emits a minimal set of rectangles (plus optional label) as SVG."""

    def render(
        self,
        pattern: BarPattern,
        width: int,
        height: int,
        include_text: bool,
        label: str,
    ) -> bytes:
        """
        Render ``pattern`` as UTF-8 SVG bytes.

        The background rect comes first, then one black rect per run with
        height ``height`` (the bar region), then the optional label centered
        at ``width / 2`` with its baseline at ``height + 18``.
        """
        scale_x = width / pattern.width
        canvas_height = height + TEXT_BAND_HEIGHT if include_text else height

        lines: List[str] = [
            f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{canvas_height}" '
            f'viewBox="0 0 {width} {canvas_height}">',
            f'<rect width="{width}" height="{canvas_height}" fill="white"/>',
        ]

        bars = 0
        for start, length in black_runs(pattern):
            left = round(start * scale_x, 2)
            right = round((start + length) * scale_x, 2)
            lines.append(
                f'<rect x="{_fmt(left)}" y="0" width="{_fmt(right - left)}" '
                f'height="{height}" fill="black"/>'
            )
            bars += 1

        if include_text:
            lines.append(
                f'<text x="{_fmt(width / 2)}" y="{height + LABEL_BASELINE_OFFSET}" '
                f'text-anchor="middle" font-family="monospace" '
                f'font-size="{LABEL_FONT_SIZE}" fill="black">{_label_text(label)}</text>'
            )

        lines.append("</svg>")
        logger.debug("SVG output produced: %d bars, %dx%d", bars, width, canvas_height)
        return "\n".join(lines).encode("utf-8")
