"""
barcodegen

Модуль генерации 1D штрихкодов (UPC-A, EAN-13, Code128) в PNG и SVG.

- Проверка контрольных цифр UPC-A/EAN-13 (взвешенный модуль 10).
- Кодирование символов через python-barcode (внешняя возможность).
- Растровый (Pillow) и векторный (SVG-прямоугольники) рендеринг одного рисунка.

Public API:
    - BarcodeService: фасад проверка -> кодирование -> рендеринг (class)
    - BarcodeConfig: значения по умолчанию запроса (dataclass)
    - SymbologyEncoder / PyBarcodeEncoder: возможность кодирования и её реализация
    - BarPattern: абстрактный рисунок штрихкода
    - RasterRenderer / VectorRenderer: рендеринг PNG / SVG
    - BarcodeGenError и подклассы: типизированные ошибки

Примеры:
    >>> from src.barcodegen import BarcodeService
    >>> from src.model.barcodegen import GenerateRequest
    >>> from src.model.enums import OutputFormat, Symbology
    >>> img = BarcodeService().generate(
    ...     GenerateRequest(data="Hello", symbology=Symbology.CODE_128, format=OutputFormat.SVG)
    ... )
    >>> img.content_type
    'image/svg+xml'

Зависимости:
    Pillow, python-barcode
"""

from src.barcodegen.config import BarcodeConfig
from src.barcodegen.encoder import PyBarcodeEncoder, SymbologyEncoder
from src.barcodegen.exceptions import (
    BarcodeGenError,
    BarcodeRenderError,
    BarcodeValidationError,
    ChecksumMismatchError,
    InvalidDataError,
    InvalidFormatError,
    InvalidTypeError,
)
from src.barcodegen.pattern import BarPattern
from src.barcodegen.raster import RasterRenderer
from src.barcodegen.service import BarcodeService
from src.barcodegen.vector import VectorRenderer

__all__ = [
    "BarcodeService",
    "BarcodeConfig",
    "SymbologyEncoder",
    "PyBarcodeEncoder",
    "BarPattern",
    "RasterRenderer",
    "VectorRenderer",
    "BarcodeGenError",
    "BarcodeValidationError",
    "BarcodeRenderError",
    "InvalidTypeError",
    "InvalidFormatError",
    "InvalidDataError",
    "ChecksumMismatchError",
]
