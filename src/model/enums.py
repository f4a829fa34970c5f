"""
model/enums.py

(Краткое RU: Перечисления для модели генерации штрихкодов.)

EN: Domain enums for the barcode generator: supported symbologies and output
formats. Wire values match the JSON request schema exactly.
NO encoding/rendering logic here!

See Also:
    - src/barcodegen/validation.py (per-symbology rules)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final

_logger: Final[logging.Logger] = logging.getLogger(__name__)

# === DIMENSION CONSTANTS ===
MIN_BARCODE_WIDTH: Final[int] = 50
MAX_BARCODE_WIDTH: Final[int] = 1024
MIN_BARCODE_HEIGHT: Final[int] = 50
MAX_BARCODE_HEIGHT: Final[int] = 1024
DEFAULT_BARCODE_WIDTH: Final[int] = 300
DEFAULT_BARCODE_HEIGHT: Final[int] = 150
TEXT_BAND_HEIGHT: Final[int] = 20  # Label band below the bars, both renderers

# === DOMAINS ===


class Symbology(str, Enum):
    UPC_A = "UPC-A"
    EAN_13 = "EAN-13"
    CODE_128 = "Code128"


class OutputFormat(str, Enum):
    PNG = "png"
    SVG = "svg"

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[self]


_CONTENT_TYPES: Final = {
    OutputFormat.PNG: "image/png",
    OutputFormat.SVG: "image/svg+xml",
}

# === DEFAULTS ===
DEFAULT_OUTPUT_FORMAT: Final[OutputFormat] = OutputFormat.PNG


def validate_dimensions(width: int, height: int) -> bool:
    return (
        MIN_BARCODE_WIDTH <= width <= MAX_BARCODE_WIDTH
        and MIN_BARCODE_HEIGHT <= height <= MAX_BARCODE_HEIGHT
    )


__all__ = [
    "Symbology",
    "OutputFormat",
    "MIN_BARCODE_WIDTH",
    "MAX_BARCODE_WIDTH",
    "MIN_BARCODE_HEIGHT",
    "MAX_BARCODE_HEIGHT",
    "DEFAULT_BARCODE_WIDTH",
    "DEFAULT_BARCODE_HEIGHT",
    "DEFAULT_OUTPUT_FORMAT",
    "TEXT_BAND_HEIGHT",
    "validate_dimensions",
]
